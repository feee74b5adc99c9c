# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from bottle import request, response

from nontonapi import scraper
from nontonapi.providers.log import debug
from nontonapi.providers.utils import failure


def _reply(result):
    response.status = result.get("code") or (200 if result.get("success") else 500)
    return result


def setup_anime_routes(app, config):
    @app.get("/api/home")
    def home_api():
        return _reply(scraper.home(config))

    @app.get("/api/search")
    def search_api():
        keyword = request.query.getunicode("q")
        if not keyword:
            return _reply(
                failure(400, 'Query parameter "q" is required for searching.')
            )
        debug(f'Searching for "{keyword}"')
        return _reply(scraper.search(config, keyword))

    @app.get("/api/detail")
    def detail_api():
        anime_url = request.query.getunicode("url")
        if not anime_url:
            return _reply(failure(400, 'Query parameter "url" is required.'))
        return _reply(scraper.detail(config, anime_url))

    @app.get("/api/download")
    def download_api():
        episode_url = request.query.getunicode("url")
        if not episode_url:
            return _reply(
                failure(400, 'Query parameter "url" is required (episode URL).')
            )
        return _reply(scraper.download(config, episode_url))
