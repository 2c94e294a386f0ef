from __future__ import annotations

import copy
from typing import Optional, Sequence

from .repository import RecordStore


class InMemoryRecordStore(RecordStore):
    """Dict-backed store for the ``memory`` backend and for tests."""

    def __init__(self, initial: Optional[dict[str, dict]] = None):
        self._data: dict[str, dict] = {k: copy.deepcopy(v) for k, v in (initial or {}).items()}

    def get(self, key: str) -> Optional[dict]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: dict) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def get_by_prefix(self, prefix: str) -> Sequence[tuple[str, dict]]:
        return [(k, copy.deepcopy(v)) for k, v in sorted(self._data.items()) if k.startswith(prefix)]

    def keys(self) -> list[str]:
        return sorted(self._data)
