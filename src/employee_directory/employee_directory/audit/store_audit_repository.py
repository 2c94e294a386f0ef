from __future__ import annotations

from typing import Sequence

from ..core.constants import AUDIT_PREFIX
from ..store.repository import RecordStore
from .model import AuditEntry
from .repository import AuditRepository


class StoreAuditRepository(AuditRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def append(self, entry: AuditEntry) -> None:
        self._store.set(f"{AUDIT_PREFIX}{entry.audit_id}", entry.to_record())

    def list_all(self) -> Sequence[AuditEntry]:
        return [AuditEntry.from_record(v) for _, v in self._store.get_by_prefix(AUDIT_PREFIX) if v]
