from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import now_utc, to_iso
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        try:
            demo = container.users_repo.get_demo()
            return jsonify({
                "status": "healthy",
                "timestamp": to_iso(now_utc()),
                "demoUserExists": demo is not None,
            })
        except Exception:
            logger.exception("Health check failed")
            return jsonify({
                "status": "error",
                "timestamp": to_iso(now_utc()),
                "error": "Record store unavailable",
            }), 500

    if not container.debug_status_enabled:
        return

    @app.route("/debug/status", methods=["GET"], endpoint="debug_status")
    def debug_status():
        # no auth; only registered when DEBUG_STATUS_ENABLED is set
        try:
            provider_users = list(container.auth_provider.list_users())
            demo_email = container.demo_email.lower()
            return jsonify({
                "storeConnected": True,
                "providerUsers": len(provider_users),
                "kvUsers": container.users_repo.count(),
                "demoUserInKV": container.users_repo.get_demo() is not None,
                "adminUserInProvider": any(u.email.lower() == demo_email for u in provider_users),
                "environment": {
                    "recordStore": container.record_store_backend,
                    "photoBucket": container.storage.bucket,
                },
            })
        except Exception:
            logger.exception("Debug status failed")
            return jsonify({"error": "Status unavailable", "storeConnected": False}), 500
