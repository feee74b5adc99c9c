# -*- coding: utf-8 -*-
# NontonAPI
# Project by https://github.com/rix1337

from bottle import response

from nontonapi.providers.log import crit
from nontonapi.providers.system_info import get_server_info


def setup_health_routes(app, config):
    @app.get("/health")
    def health():
        try:
            info = get_server_info()
        except Exception as e:
            crit(f"Could not build server info: {e}")
            response.status = 500
            return {
                "status": "Critical Error",
                "error": "Unexpected error while collecting server specs, check the log.",
                "details": str(e),
            }
        return {"status": "OK", "port": config.port, "server_specs": info}
