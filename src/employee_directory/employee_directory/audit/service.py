from __future__ import annotations

import uuid
from typing import Any, Optional

from ..common.datetime_utils import now_utc, parse_iso, to_iso
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.enums import AuditAction
from .model import AuditEntry
from .repository import AuditRepository


class AuditService:
    """Use case: append audit entries and read the recent-activity feed."""

    def __init__(self, audits: AuditRepository):
        self._audits = audits

    def record(
        self,
        *,
        action: AuditAction,
        entity_id: str,
        user_id: Optional[str],
        details: Optional[dict[str, Any]] = None,
        entity_type: str = "employee",
    ) -> AuditEntry:
        entry = AuditEntry(
            audit_id=str(uuid.uuid4()),
            action=action.value,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
            timestamp=to_iso(now_utc()),
            details=dict(details or {}),
        )
        self._audits.append(entry)
        return entry

    def recent(self, limit: int = RECENT_ACTIVITY_LIMIT) -> list[AuditEntry]:
        entries = sorted(self._audits.list_all(), key=lambda e: parse_iso(e.timestamp), reverse=True)
        return entries[:limit]
