from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class AuditEntry:
    """Append-only record of a mutating action."""

    audit_id: str
    action: str
    entity_type: str
    entity_id: str
    user_id: Optional[str]
    timestamp: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> dict:
        return {
            "id": self.audit_id,
            "action": self.action,
            "entityType": self.entity_type,
            "entityId": self.entity_id,
            "userId": self.user_id,
            "timestamp": self.timestamp,
            "details": dict(self.details),
        }

    @classmethod
    def from_record(cls, record: dict) -> "AuditEntry":
        return cls(
            audit_id=str(record.get("id", "")),
            action=str(record.get("action", "")),
            entity_type=str(record.get("entityType", "")),
            entity_id=str(record.get("entityId", "")),
            user_id=record.get("userId"),
            timestamp=str(record.get("timestamp", "")),
            details=dict(record.get("details") or {}),
        )
