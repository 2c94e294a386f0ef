from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.exceptions import StorageError


@dataclass(frozen=True)
class StoredObject:
    name: str
    data: bytes
    content_type: str


class ObjectStorage(Protocol):
    """Private bucket of binary objects reachable through signed URLs."""

    bucket: str

    def upload(self, name: str, data: bytes, *, content_type: str) -> None:
        raise NotImplementedError

    def download(self, name: str) -> StoredObject:
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        raise NotImplementedError

    def create_signed_url(self, name: str, *, expires_in: int) -> str:
        raise NotImplementedError

    def verify_signed_token(self, name: str, token: str) -> None:
        raise NotImplementedError


def check_object_name(name: str) -> str:
    if not name or "/" in name or "\\" in name or name.startswith("."):
        raise StorageError(f"Invalid object name: {name!r}")
    return name
