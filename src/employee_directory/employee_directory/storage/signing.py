from __future__ import annotations

from datetime import timedelta
from urllib.parse import quote

import jwt

from ..common.datetime_utils import now_utc
from ..core.exceptions import StorageError

SIGNING_ALGORITHM = "HS256"


class UrlSigner:
    """Issues and checks time-limited links to private bucket objects."""

    def __init__(self, secret: str, public_base_url: str = ""):
        self._secret = secret
        self._base = public_base_url.rstrip("/")

    def sign(self, *, bucket: str, name: str, expires_in: int) -> str:
        payload = {
            "bucket": bucket,
            "name": name,
            "exp": now_utc() + timedelta(seconds=int(expires_in)),
        }
        token = jwt.encode(payload, self._secret, algorithm=SIGNING_ALGORITHM)
        return f"{self._base}/storage/{quote(bucket)}/{quote(name)}?token={token}"

    def verify(self, *, bucket: str, name: str, token: str) -> None:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[SIGNING_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise StorageError("Signed URL has expired")
        except jwt.InvalidTokenError:
            raise StorageError("Invalid signature")

        if payload.get("bucket") != bucket or payload.get("name") != name:
            raise StorageError("Invalid signature")
