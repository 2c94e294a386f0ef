from __future__ import annotations

import logging

from flask import Flask, Response, request

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    storage = container.storage

    @app.route("/storage/<bucket>/<name>", methods=["GET"], endpoint="signed_object")
    def signed_object(bucket: str, name: str):
        token = request.args.get("token", "")
        if bucket != storage.bucket:
            return error_response("Bucket not found", 404)
        try:
            storage.verify_signed_token(name, token)
        except StorageError as e:
            return error_response(str(e), 403)

        try:
            if not storage.exists(name):
                return error_response("Object not found", 404)
            obj = storage.download(name)
        except StorageError:
            logger.exception("Failed to read object %s", name)
            return error_response("Failed to read object", 500)
        return Response(obj.data, mimetype=obj.content_type)
