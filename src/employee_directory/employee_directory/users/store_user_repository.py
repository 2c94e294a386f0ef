from __future__ import annotations

from typing import Optional

from ..core.constants import DEMO_USER_KEY, USER_PREFIX
from ..store.repository import RecordStore
from .model import UserProfile
from .repository import UserRepository


class StoreUserRepository(UserRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        record = self._store.get(f"{USER_PREFIX}{user_id}")
        return UserProfile.from_record(record) if record else None

    def save(self, profile: UserProfile) -> None:
        self._store.set(f"{USER_PREFIX}{profile.user_id}", profile.to_record())

    def get_demo(self) -> Optional[UserProfile]:
        record = self._store.get(DEMO_USER_KEY)
        return UserProfile.from_record(record) if record else None

    def save_demo(self, profile: UserProfile) -> None:
        self._store.set(DEMO_USER_KEY, profile.to_record())

    def count(self) -> int:
        # includes the user:demo sentinel
        return len(self._store.get_by_prefix(USER_PREFIX))
