# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import requests

from nontonapi.constants import TOKEN_PATH
from nontonapi.downloads.helpers.download_links import SecurityToken
from nontonapi.providers.errors import TokenAcquisitionFailed
from nontonapi.providers.log import debug


def get_token_url(config):
    return config.download_host + TOKEN_PATH


def acquire_token(config, url, session) -> SecurityToken:
    """
    Request the challenge/token/timestamp triple bound to `url`.

    The lokal host validates that the referer is the page the token is for,
    not the token endpoint.
    """
    token_url = get_token_url(config)
    debug(f"Requesting security token for {url}")

    try:
        r = session.post(
            token_url,
            json={"url": url},
            headers=config.lokal_headers(url),
            timeout=config.timeout,
        )
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        raise TokenAcquisitionFailed(f"Token request failed: {e}") from e
    except ValueError as e:
        raise TokenAcquisitionFailed(f"Token response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise TokenAcquisitionFailed(f"Unexpected token response: {data}")

    missing = [key for key in ("challenge", "token", "timestamp") if key not in data]
    if missing:
        raise TokenAcquisitionFailed(
            f"Token response lacks {', '.join(missing)}: {data}"
        )

    return {
        "challenge": data["challenge"],
        "token": data["token"],
        "timestamp": data["timestamp"],
    }
