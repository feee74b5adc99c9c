# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from contextlib import contextmanager
from typing import Any, TypedDict
from urllib.parse import urlparse

import requests

from nontonapi.providers.errors import UpstreamFetchError, ValidationError


class Envelope(TypedDict, total=False):
    """
    Uniform result of every public scraper operation.

    - `result` is set on success
    - `error` / `details` are set on failure
    """

    success: bool
    code: int
    result: Any
    error: str
    details: str


class Unbuffered(object):
    def __init__(self, stream):
        self.stream = stream

    def write(self, data):
        self.stream.write(data)
        self.stream.flush()

    def writelines(self, datas):
        self.stream.writelines(datas)
        self.stream.flush()

    def __getattr__(self, attr):
        return getattr(self.stream, attr)


def is_valid_url(url):
    """Validate if a URL is properly formatted."""
    parsed = urlparse(url or "")
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def require_url(url, name="URL"):
    if not url:
        raise ValidationError(f"{name} is required")
    if not is_valid_url(url):
        raise ValidationError(f'{name} "{url}" is not an absolute http(s) URL')
    return url


def success(result) -> Envelope:
    return {"success": True, "code": 200, "result": result}


def failure(code, message, details=None) -> Envelope:
    envelope = {"success": False, "code": code, "error": message}
    if details is not None:
        envelope["details"] = details
    return envelope


@contextmanager
def session_scope(session=None):
    """
    Yield the given session, or a fresh requests.Session closed on exit.
    """
    if session is not None:
        yield session
        return

    owned = requests.Session()
    try:
        yield owned
    finally:
        owned.close()


def fetch_page(config, url, session, headers=None, params=None):
    """
    GET an upstream page and return its text.

    Transport errors and non-2xx answers surface as UpstreamFetchError.
    """
    try:
        r = session.get(
            url,
            headers=headers or config.browser_headers(),
            params=params,
            timeout=config.timeout,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        raise UpstreamFetchError(f"GET {url} failed: {e}") from e
    return r.text
