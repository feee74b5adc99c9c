# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import argparse
import sys

from bottle import run as run_server

from nontonapi.api import get_api
from nontonapi.providers.config import Config
from nontonapi.providers.log import info
from nontonapi.providers.utils import Unbuffered
from nontonapi.providers.version import get_version


def run():
    parser = argparse.ArgumentParser()
    parser.add_argument("--port", help="Desired Port, defaults to $PORT or 3000")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind to")
    arguments = parser.parse_args()

    sys.stdout = Unbuffered(sys.stdout)

    print(f"""┌────────────────────────────────────┐
  NontonAPI {get_version()}
  NontonAnimeID scraper & lokal link resolver
└────────────────────────────────────┘""")

    config = Config(port=int(arguments.port) if arguments.port else None)

    print("\n===== Startup Info =====")
    print(f'Catalog source: "{config.base_url}"')
    print(f'Lokal host: "{config.download_host}"')
    print(f"Upstream timeout: {config.timeout or 'none'}")

    app = get_api(config)

    info(f"API server running at http://{arguments.host}:{config.port}")
    info("See the endpoint list at /")
    run_server(app, host=arguments.host, port=config.port, quiet=True)
