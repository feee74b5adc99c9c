# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

"""
Public scraper operations.

Every operation returns an Envelope and never raises: failures are logged
and converted at this boundary.
"""

from nontonapi.constants import (
    ERROR_DETAIL,
    ERROR_DOWNLOAD,
    ERROR_HOME,
    ERROR_SEARCH,
    NO_LOKAL_SERVER,
)
from nontonapi.downloads import resolve_downloads
from nontonapi.providers.errors import NontonError, ValidationError
from nontonapi.providers.log import error, info
from nontonapi.providers.utils import (
    Envelope,
    failure,
    fetch_page,
    require_url,
    session_scope,
    success,
)
from nontonapi.scraper.extract import extract


def _handle(operation, message, e) -> Envelope:
    if isinstance(e, ValidationError):
        info(f"{operation}: {e}")
        return failure(e.code, str(e))
    error(f"{operation}: {e}")
    code = e.code if isinstance(e, NontonError) else 500
    return failure(code, message, str(e))


def home(config, session=None) -> Envelope:
    try:
        with session_scope(session) as s:
            html = fetch_page(config, config.base_url, s)
        return success(extract(html, "catalog"))
    except Exception as e:
        return _handle("home", ERROR_HOME, e)


def search(config, query, session=None) -> Envelope:
    try:
        if not query:
            raise ValidationError("Query is required")
        with session_scope(session) as s:
            html = fetch_page(config, config.base_url, s, params={"s": query})
        return success(extract(html, "search"))
    except Exception as e:
        return _handle("search", ERROR_SEARCH, e)


def detail(config, url, session=None) -> Envelope:
    try:
        require_url(url)
        with session_scope(session) as s:
            html = fetch_page(config, url, s)
        return success(extract(html, "detail"))
    except Exception as e:
        return _handle("detail", ERROR_DETAIL, e)


def download(config, url, session=None) -> Envelope:
    """
    Episode page to download options.

    The lokal server link goes through the resolution pipeline, the other
    servers are listed as alternatives. A resolution failure is reported in
    result.download while the envelope itself stays successful.
    """
    try:
        require_url(url)
        with session_scope(session) as s:
            page = extract(fetch_page(config, url, s), "episodeServers")

            if page["lokal"]:
                downloads = resolve_downloads(config, page["lokal"], s)
            else:
                info(f"No lokal server on {url}")
                downloads = NO_LOKAL_SERVER

        return success(
            {
                "title": page["title"],
                "date": page["date"],
                "download": downloads,
                "alternative": page["alternative"],
            }
        )
    except Exception as e:
        return _handle("download", ERROR_DOWNLOAD, e)
