from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role stored on a user profile (informational, not used for authorization)."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AuditAction(str, Enum):
    """Action tags written to the audit log."""

    CREATE_EMPLOYEE = "CREATE_EMPLOYEE"
    UPDATE_EMPLOYEE = "UPDATE_EMPLOYEE"
    DELETE_EMPLOYEE = "DELETE_EMPLOYEE"
    BULK_UPDATE_EMPLOYEE = "BULK_UPDATE_EMPLOYEE"
