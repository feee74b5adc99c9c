# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import os

from dotenv import load_dotenv

from nontonapi.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_DOWNLOAD_HOST,
    DEFAULT_FINGERPRINT,
    DEFAULT_PORT,
    DEFAULT_REDIRECT_WORKERS,
    DEFAULT_TIMEOUT,
    FALLBACK_USER_AGENT,
)
from nontonapi.providers.log import warn

load_dotenv()


def _read_env_int(key, default):
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        warn(f'Ignoring invalid value "{value}" for {key}, using {default}')
        return default


class Config(object):
    """
    Upstream hosts and request identity used by every scrape.

    Explicit keyword arguments win over environment variables, which win over
    the defaults in nontonapi.constants. Tests pass fixed values here instead
    of touching the environment.
    """

    def __init__(
        self,
        base_url=None,
        download_host=None,
        user_agent=None,
        fingerprint=None,
        timeout=None,
        redirect_workers=None,
        port=None,
    ):
        self.base_url = base_url or os.getenv("NONTON_BASE_URL") or DEFAULT_BASE_URL
        self.download_host = (
            download_host
            or os.getenv("NONTON_DOWNLOAD_HOST")
            or DEFAULT_DOWNLOAD_HOST
        ).rstrip("/")
        self.user_agent = (
            user_agent or os.getenv("NONTON_USER_AGENT") or FALLBACK_USER_AGENT
        )
        self.fingerprint = (
            fingerprint or os.getenv("NONTON_FINGERPRINT") or DEFAULT_FINGERPRINT
        )
        if timeout is None:
            timeout = _read_env_int("NONTON_TIMEOUT", DEFAULT_TIMEOUT)
        self.timeout = timeout if timeout and timeout > 0 else None
        if redirect_workers is None:
            redirect_workers = _read_env_int(
                "NONTON_REDIRECT_WORKERS", DEFAULT_REDIRECT_WORKERS
            )
        self.redirect_workers = max(1, redirect_workers)
        self.port = port or _read_env_int("PORT", DEFAULT_PORT)

    def browser_headers(self, referer=None):
        headers = {"user-agent": self.user_agent}
        if referer:
            headers["referer"] = referer
        return headers

    def lokal_headers(self, referer, token=None):
        """
        Headers for the token and manifest endpoints.

        The referer is the page the token is bound to, never the endpoint
        itself. Token values are replayed exactly as received.
        """
        headers = {
            "content-type": "application/json",
            "origin": self.base_url,
            "referer": referer,
            "x-fingerprint": self.fingerprint,
        }
        if token:
            headers["x-challenge"] = str(token["challenge"])
            headers["x-security-token"] = str(token["token"])
            headers["x-timestamp"] = str(token["timestamp"])
        headers["user-agent"] = self.user_agent
        return headers
