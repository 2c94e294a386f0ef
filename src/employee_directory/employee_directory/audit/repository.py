from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditEntry


class AuditRepository(Protocol):
    def append(self, entry: AuditEntry) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[AuditEntry]:
        raise NotImplementedError
