from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        try:
            body = json_body()
            if not isinstance(body, dict):
                raise ValidationError("Missing required fields")
            user_id = container.auth_service.sign_up(
                email=body.get("email"),
                password=body.get("password"),
                first_name=body.get("firstName"),
                last_name=body.get("lastName"),
            )
            return jsonify({"message": "User created successfully", "userId": user_id})
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Signup error")
            return error_response("Internal server error during signup", 500)

    @app.route("/auth/signin", methods=["POST"], endpoint="signin")
    def signin():
        try:
            body = json_body()
            if not isinstance(body, dict):
                raise ValidationError("Email and password required")
            result = container.auth_service.sign_in(email=body.get("email"), password=body.get("password"))
            return jsonify(result.to_dict())
        except ValidationError as e:
            return error_response(str(e), 400)
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except Exception:
            logger.exception("Signin error")
            return error_response("Internal server error during signin", 500)
