from __future__ import annotations

import uuid
from datetime import timedelta
from typing import Any, Optional, Sequence

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, to_iso
from ..core.constants import ACCOUNT_PREFIX, DEFAULT_ACCESS_TOKEN_MINUTES, MIN_PASSWORD_LENGTH
from ..store.repository import RecordStore
from .provider import AuthProvider, AuthProviderError, ProviderSession, ProviderUser

TOKEN_ALGORITHM = "HS256"


class LocalAuthProvider(AuthProvider):
    """Credential store kept in the record store under ``account:<email>``.

    Access tokens are HS256 JWTs carrying ``sub`` (user id) and ``email``.
    """

    def __init__(self, store: RecordStore, *, jwt_secret: str, token_minutes: int = DEFAULT_ACCESS_TOKEN_MINUTES):
        self._store = store
        self._secret = jwt_secret
        self._token_minutes = int(token_minutes)

    @staticmethod
    def _key(email: str) -> str:
        return f"{ACCOUNT_PREFIX}{email.strip().lower()}"

    @staticmethod
    def _as_user(account: dict) -> ProviderUser:
        return ProviderUser(
            user_id=str(account["id"]),
            email=str(account["email"]),
            metadata=dict(account.get("metadata") or {}),
        )

    def create_user(self, *, email: str, password: str, metadata: Optional[dict[str, Any]] = None) -> ProviderUser:
        email = email.strip() if isinstance(email, str) else ""
        if "@" not in email:
            raise AuthProviderError("Unable to validate email address: invalid format")
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise AuthProviderError(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")
        if self._store.get(self._key(email)):
            raise AuthProviderError("A user with this email address has already been registered")

        account = {
            "id": str(uuid.uuid4()),
            "email": email,
            "passwordHash": generate_password_hash(password),
            "metadata": dict(metadata or {}),
            "createdAt": to_iso(now_utc()),
        }
        self._store.set(self._key(email), account)
        return self._as_user(account)

    def _issue_token(self, user: ProviderUser) -> str:
        issued = now_utc()
        payload = {
            "sub": user.user_id,
            "email": user.email,
            "iat": issued,
            "exp": issued + timedelta(minutes=self._token_minutes),
        }
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def sign_in_with_password(self, *, email: str, password: str) -> ProviderSession:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthProviderError("Invalid login credentials")
        account = self._store.get(self._key(email))
        try:
            ok = bool(account) and check_password_hash(account["passwordHash"], password or "")
        except (KeyError, ValueError):
            # e.g. a record without a hash or with a corrupted one
            ok = False
        if not ok:
            raise AuthProviderError("Invalid login credentials")

        user = self._as_user(account)
        return ProviderSession(access_token=self._issue_token(user), user=user)

    def get_user(self, access_token: str) -> ProviderUser:
        try:
            payload = jwt.decode(access_token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError:
            raise AuthProviderError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthProviderError("Invalid token")

        account = self._store.get(self._key(str(payload.get("email", ""))))
        if not account or str(account.get("id")) != str(payload.get("sub")):
            raise AuthProviderError("User not found")
        return self._as_user(account)

    def list_users(self) -> Sequence[ProviderUser]:
        return [self._as_user(v) for _, v in self._store.get_by_prefix(ACCOUNT_PREFIX) if v]
