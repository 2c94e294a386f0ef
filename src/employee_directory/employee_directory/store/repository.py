from __future__ import annotations

from typing import Optional, Protocol, Sequence


class RecordStore(Protocol):
    """Namespaced key/value document store.

    Keys carry an entity prefix (``employee:``, ``user:``, ``audit:``...).
    Values are JSON-compatible dicts. No transactions: every call stands alone.
    """

    def get(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def set(self, key: str, value: dict) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def get_by_prefix(self, prefix: str) -> Sequence[tuple[str, dict]]:
        raise NotImplementedError
