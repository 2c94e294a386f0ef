from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# camelCase record key -> dataclass attribute
RECORD_FIELDS = {
    "id": "employee_id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "position": "position",
    "department": "department",
    "salary": "salary",
    "startDate": "start_date",
    "status": "status",
    "address": "address",
    "emergencyContact": "emergency_contact",
    "emergencyPhone": "emergency_phone",
    "profilePicture": "profile_picture",
    "profilePictureFileName": "profile_picture_file_name",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "createdBy": "created_by",
    "updatedBy": "updated_by",
}


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object. The stored/wire shape is the camelCase dict
    produced by `to_record`.
    """

    employee_id: str
    first_name: str
    last_name: str
    email: str
    position: str
    department: str
    status: str = "active"
    phone: Optional[str] = None
    salary: Optional[int] = None
    start_date: Optional[str] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    profile_picture: Optional[str] = None
    profile_picture_file_name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_record(self) -> dict:
        return {key: getattr(self, attr) for key, attr in RECORD_FIELDS.items()}

    @classmethod
    def from_record(cls, record: dict) -> "Employee":
        kwargs = {attr: record.get(key) for key, attr in RECORD_FIELDS.items() if key in record}
        kwargs["employee_id"] = str(record.get("id", ""))
        for required in ("first_name", "last_name", "email", "position", "department"):
            kwargs[required] = kwargs.get(required) or ""
        kwargs["status"] = kwargs.get("status") or "active"
        return cls(**kwargs)


def to_attributes(fields: dict) -> dict:
    """Translate camelCase form fields into `Employee` attribute names."""
    return {RECORD_FIELDS[k]: v for k, v in fields.items()}
