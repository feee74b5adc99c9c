# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from typing import Optional, TypedDict


class ScriptParameters(TypedDict):
    encrypted_param: str
    title_param: str


class SecurityToken(TypedDict):
    """
    Token triple issued for one target URL.

    Replayed to the manifest endpoint exactly as received.
    """

    challenge: str
    token: str
    timestamp: str


class PendingLink(TypedDict):
    """Manifest entry, `url` points into the lokal host and still redirects."""

    quality: str
    url: str


class ResolvedLink(TypedDict):
    """Final link, `url` is the redirect target or None when none was sent."""

    quality: str
    url: Optional[str]


class ResolutionError(TypedDict):
    error: str
    details: str
