# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from concurrent.futures import ThreadPoolExecutor

from nontonapi.constants import ERROR_RESOLUTION
from nontonapi.downloads.helpers.download_links import (
    PendingLink,
    ResolutionError,
    ResolvedLink,
)
from nontonapi.downloads.helpers.manifest import (
    build_manifest_url,
    manifest_to_pending_links,
    request_manifest,
)
from nontonapi.downloads.helpers.redirects import resolve_redirects
from nontonapi.downloads.helpers.script_params import extract_script_params
from nontonapi.downloads.helpers.token import acquire_token
from nontonapi.providers.log import debug, error, info
from nontonapi.providers.utils import fetch_page, require_url, session_scope


def resolve_manifest(config, url, session) -> list[PendingLink]:
    """
    Phase one: lokal page to per-quality pending links.

    The token request runs while the page is fetched and its script
    parameters are read. The manifest request waits for both.
    """
    with ThreadPoolExecutor(max_workers=1) as executor:
        token_future = executor.submit(acquire_token, config, url, session)

        html = fetch_page(config, url, session)
        params = extract_script_params(html)
        debug(
            f"Script parameters: vid={params['encrypted_param']} title={params['title_param']}"
        )

        token = token_future.result()

    manifest_url = build_manifest_url(config, params)
    links = request_manifest(config, url, manifest_url, token, session)
    return manifest_to_pending_links(config, links)


def resolve_downloads(
    config, url, session=None
) -> list[ResolvedLink] | ResolutionError:
    """
    Resolve the final download link of every quality offered for a lokal
    server page.

    Never raises: any failure along the chain is returned as a single
    {"error", "details"} object.
    """
    try:
        require_url(url)
        with session_scope(session) as s:
            pending = resolve_manifest(config, url, s)
            info(f"Manifest offers {len(pending)} qualities for {url}")
            return resolve_redirects(config, pending, s)
    except Exception as e:
        error(f"Could not resolve lokal links for {url}: {e}")
        return {"error": ERROR_RESOLUTION, "details": str(e)}
