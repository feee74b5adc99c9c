# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from urllib.parse import quote, quote_plus, urlencode

import requests

from nontonapi.constants import MANIFEST_PATH
from nontonapi.downloads.helpers.download_links import (
    PendingLink,
    ScriptParameters,
    SecurityToken,
)
from nontonapi.providers.errors import ManifestParseError, UpstreamFetchError
from nontonapi.providers.log import debug


def encode_component(value):
    """Percent-encode like JavaScript's encodeURIComponent."""
    return quote(value, safe="!~*'()")


def build_manifest_url(config, params: ScriptParameters):
    """
    Build the manifest request URL.

    The lokal player encodes both parameters once before putting them in the
    query string, which encodes them a second time. The host expects exactly
    that, so `vid` and `title` are double encoded. `title` is left out when
    empty.
    """
    query = [
        ("mode", "lokal"),
        ("vid", encode_component(params["encrypted_param"])),
    ]
    if params["title_param"]:
        query.append(("title", encode_component(params["title_param"])))
    query.append(("dl", "yes"))
    query.append(("json", "true"))

    return (
        config.download_host
        + MANIFEST_PATH
        + "?"
        + urlencode(query, quote_via=quote_plus, safe="*")
    )


def request_manifest(config, url, manifest_url, token: SecurityToken, session):
    """
    POST the manifest request and return the `links` mapping.

    The body repeats the exact manifest URL next to the challenge, the headers
    replay the token triple untouched.
    """
    debug(f"Requesting download manifest: {manifest_url}")

    try:
        r = session.post(
            manifest_url,
            json={"challenge": token["challenge"], "url": manifest_url},
            headers=config.lokal_headers(url, token),
            timeout=config.timeout,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        raise UpstreamFetchError(f"Manifest request failed: {e}") from e

    try:
        data = r.json()
    except ValueError as e:
        raise ManifestParseError(f"Manifest response is not valid JSON: {e}") from e

    links = data.get("links") if isinstance(data, dict) else None
    if not isinstance(links, dict):
        raise ManifestParseError(f"Manifest response has no links mapping: {data}")

    return links


def manifest_to_pending_links(config, links) -> list[PendingLink]:
    """
    One pending link per quality, in manifest order, from the first candidate.

    The candidate path is appended to the host as is.
    """
    pending = []
    for quality, candidates in links.items():
        if not candidates:
            raise ManifestParseError(f'Quality "{quality}" has no candidates')
        try:
            path = candidates[0]["url"]
        except (KeyError, TypeError, IndexError) as e:
            raise ManifestParseError(
                f'Quality "{quality}" has a malformed candidate: {e}'
            ) from e
        if not isinstance(path, str):
            raise ManifestParseError(f'Quality "{quality}" has no candidate path')
        pending.append({"quality": quality, "url": config.download_host + path})
    return pending
