from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..identity.provider import AuthProvider, AuthProviderError, ProviderUser
from .model import UserProfile
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInResult:
    """What the client keeps as its session: token + profile."""

    access_token: str
    user: UserProfile

    def to_dict(self) -> dict:
        return {"accessToken": self.access_token, "user": self.user.to_record()}


@dataclass(frozen=True)
class Principal:
    """The acting user resolved from a bearer token."""

    user_id: str
    email: str


def profile_from_metadata(user: ProviderUser) -> UserProfile:
    meta = user.metadata or {}
    try:
        role = Role(meta.get("role") or Role.EMPLOYEE.value)
    except ValueError:
        role = Role.EMPLOYEE
    return UserProfile(
        user_id=user.user_id,
        email=user.email,
        first_name=meta.get("firstName") or "User",
        last_name=meta.get("lastName") or "User",
        role=role,
        created_at=to_iso(now_utc()),
        is_active=True,
    )


class AuthService:
    """Use case: sign up, sign in, and resolve bearer tokens."""

    def __init__(self, provider: AuthProvider, users: UserRepository):
        self._provider = provider
        self._users = users

    def sign_up(self, *, email: str, password: str, first_name: str, last_name: str) -> str:
        try:
            email = require_non_empty(email, "email")
            first_name = require_non_empty(first_name, "firstName")
            last_name = require_non_empty(last_name, "lastName")
            if not isinstance(password, str) or not password:
                raise ValidationError("password is required")
        except ValidationError:
            raise ValidationError("Missing required fields")

        try:
            created = self._provider.create_user(
                email=email,
                password=password,
                metadata={"firstName": first_name, "lastName": last_name, "role": Role.EMPLOYEE.value},
            )
        except AuthProviderError as e:
            logger.warning("Signup rejected for %s: %s", email, e)
            raise ValidationError(str(e))

        self._users.save(
            UserProfile(
                user_id=created.user_id,
                email=created.email,
                first_name=first_name,
                last_name=last_name,
                role=Role.EMPLOYEE,
                created_at=to_iso(now_utc()),
                is_active=True,
            )
        )
        logger.info("User %s signed up", created.user_id)
        return created.user_id

    def sign_in(self, *, email: str, password: str) -> SignInResult:
        try:
            email = require_non_empty(email, "email")
        except ValidationError:
            raise ValidationError("Email and password required")
        # passwords are compared verbatim, so no stripping here
        if not isinstance(password, str) or not password:
            raise ValidationError("Email and password required")

        try:
            session = self._provider.sign_in_with_password(email=email, password=password)
        except AuthProviderError as e:
            logger.info("Signin failed for %s: %s", email, e)
            raise AuthenticationError(str(e))

        profile = self._users.get_by_id(session.user.user_id)
        if profile is None:
            profile = profile_from_metadata(session.user)
            self._users.save(profile)
            logger.info("Profile synthesized for %s on first sign-in", session.user.user_id)

        return SignInResult(access_token=session.access_token, user=profile)

    def authenticate_token(self, access_token: Optional[str]) -> Principal:
        if not access_token:
            raise AuthenticationError("Missing authorization token")
        try:
            user = self._provider.get_user(access_token)
        except AuthProviderError:
            raise AuthenticationError("Invalid or expired token")
        if not user.user_id:
            raise AuthenticationError("Invalid or expired token")
        return Principal(user_id=user.user_id, email=user.email)
