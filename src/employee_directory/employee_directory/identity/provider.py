from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence


class AuthProviderError(Exception):
    """Raised by the identity provider; the message is safe to show to clients."""


@dataclass(frozen=True)
class ProviderUser:
    user_id: str
    email: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProviderSession:
    access_token: str
    user: ProviderUser


class AuthProvider(Protocol):
    """Identity service that stores credentials and issues bearer tokens."""

    def create_user(self, *, email: str, password: str, metadata: Optional[dict[str, Any]] = None) -> ProviderUser:
        raise NotImplementedError

    def sign_in_with_password(self, *, email: str, password: str) -> ProviderSession:
        raise NotImplementedError

    def get_user(self, access_token: str) -> ProviderUser:
        raise NotImplementedError

    def list_users(self) -> Sequence[ProviderUser]:
        raise NotImplementedError
