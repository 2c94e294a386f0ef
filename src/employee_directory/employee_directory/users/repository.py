from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import UserProfile


class UserRepository(Protocol):
    """Repository interface for user profiles.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def save(self, profile: UserProfile) -> None:
        raise NotImplementedError

    def get_demo(self) -> Optional[UserProfile]:
        raise NotImplementedError

    def save_demo(self, profile: UserProfile) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
