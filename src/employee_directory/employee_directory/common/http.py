from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from flask import g, jsonify, request

from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    parts = header.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def make_token_required(auth_service) -> Callable:
    """Decorator factory: resolve the bearer token into ``g.user_id``/``g.user_email``."""

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                principal = auth_service.authenticate_token(bearer_token())
            except AuthenticationError as e:
                return error_response(str(e), 401)
            except Exception:
                logger.exception("Auth error")
                return error_response("Authentication failed", 401)

            g.user_id = principal.user_id
            g.user_email = principal.email
            return view(*args, **kwargs)

        return wrapper

    return token_required


def json_body() -> Any:
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Invalid JSON body")
    return data
