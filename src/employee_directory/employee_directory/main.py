from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .core.constants import MAX_PHOTO_BYTES
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .health.controller import register as register_health
from .storage.controller import register as register_storage
from .storage.filesystem_storage import FileSystemObjectStorage
from .users.controller import register as register_users

logger = logging.getLogger("employee_directory")

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(settings: Any) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger().setLevel(level)


def _register_http_hooks(app: Flask) -> None:
    @app.before_request
    def cors_preflight():
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def add_cors_and_log(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Server error")
        return jsonify({"error": "Internal server error"}), 500


def create_app(settings: Optional[Any] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = None
    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)

    _configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False
    # multipart overhead on top of the largest accepted photo
    app.config["MAX_CONTENT_LENGTH"] = MAX_PHOTO_BYTES + 64 * 1024

    if container is None:
        container = build_container(settings)

    if container.conn is not None:
        logger.info("settings=%s db=%s", settings_module or "<object>", container.conn.config.describe())
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    if isinstance(container.storage, FileSystemObjectStorage):
        container.storage.ensure_bucket()

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        try:
            container.demo_seeder.ensure_demo_account()
        except Exception:
            logger.exception("Error creating demo user")

    app.extensions["employee_directory"] = container

    _register_http_hooks(app)
    register_health(app, container)
    register_users(app, container)
    register_employees(app, container)
    register_dashboard(app, container)
    register_storage(app, container)

    return app
