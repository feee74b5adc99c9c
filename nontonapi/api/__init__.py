# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

import json

from bottle import Bottle, response

from nontonapi.api.anime import setup_anime_routes
from nontonapi.api.health import setup_health_routes
from nontonapi.providers.version import get_version


def get_api(config):
    app = Bottle()

    setup_anime_routes(app, config)
    setup_health_routes(app, config)

    @app.get("/")
    def index():
        return {
            "message": "Welcome to the NontonAnimeID Scraper API",
            "version": get_version(),
            "endpoints": {
                "GET /api/home": "Get latest anime and featured data",
                "GET /api/search?q=search_term": "Search for anime by title",
                "GET /api/detail?url=anime_url": "Get detailed information about an anime",
                "GET /api/download?url=episode_url": "Get download links for an episode",
                "GET /health": "Health check with full server specs",
            },
            "scraper_source": config.base_url,
        }

    @app.error(404)
    def not_found(error):
        response.content_type = "application/json"
        return json.dumps(
            {"success": False, "code": 404, "error": "Endpoint not found"}
        )

    return app
