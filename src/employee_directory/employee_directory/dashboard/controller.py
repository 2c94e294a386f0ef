from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, make_token_required
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)

    @app.route("/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @token_required
    def dashboard_stats():
        try:
            return jsonify(container.dashboard_service.get_stats())
        except Exception:
            logger.exception("Error fetching dashboard stats")
            return error_response("Failed to fetch dashboard stats", 500)
