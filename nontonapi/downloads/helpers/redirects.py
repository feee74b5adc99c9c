# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from concurrent.futures import ThreadPoolExecutor
from urllib.parse import urljoin

import requests

from nontonapi.downloads.helpers.download_links import PendingLink, ResolvedLink
from nontonapi.providers.errors import UpstreamFetchError
from nontonapi.providers.log import debug


def resolve_redirect(config, link: PendingLink, session) -> ResolvedLink:
    """
    Read the redirect target of a pending link without following it.

    Exactly one GET is sent and its body is never read. A missing Location
    header is accepted, the link then resolves to None.
    """
    url = link["url"]

    try:
        r = session.get(
            url,
            headers=config.browser_headers(referer=url),
            allow_redirects=False,
            stream=True,
            timeout=config.timeout,
        )
    except requests.RequestException as e:
        raise UpstreamFetchError(f"Redirect lookup for {url} failed: {e}") from e

    try:
        location = r.headers.get("location")
    finally:
        r.close()

    if location is None:
        debug(f"No Location header for {link['quality']} ({r.status_code})")
        return {"quality": link["quality"], "url": None}

    # relative targets are resolved against the link that answered
    return {"quality": link["quality"], "url": urljoin(url, location)}


def resolve_redirects(config, links: list[PendingLink], session) -> list[ResolvedLink]:
    """
    Resolve every pending link, output order always follows input order.

    Runs one at a time unless config.redirect_workers allows more.
    """
    if config.redirect_workers <= 1 or len(links) <= 1:
        return [resolve_redirect(config, link, session) for link in links]

    with ThreadPoolExecutor(max_workers=config.redirect_workers) as executor:
        return list(
            executor.map(lambda link: resolve_redirect(config, link, session), links)
        )
