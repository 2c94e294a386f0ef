from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Domain entity: local profile of an authenticated user.

    Note: credentials live with the identity provider, never here.
    """

    user_id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    created_at: Optional[str] = None
    is_active: bool = True

    def to_record(self) -> dict:
        return {
            "id": self.user_id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "role": self.role.value,
            "createdAt": self.created_at,
            "isActive": self.is_active,
        }

    @classmethod
    def from_record(cls, record: dict) -> "UserProfile":
        try:
            role = Role(record.get("role") or Role.EMPLOYEE.value)
        except ValueError:
            role = Role.EMPLOYEE
        return cls(
            user_id=str(record.get("id", "")),
            email=str(record.get("email") or ""),
            first_name=str(record.get("firstName") or "User"),
            last_name=str(record.get("lastName") or "User"),
            role=role,
            created_at=record.get("createdAt"),
            is_active=bool(record.get("isActive", True)),
        )
