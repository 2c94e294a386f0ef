from __future__ import annotations

import dataclasses
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..audit.service import AuditService
from ..common.datetime_utils import now_utc, parse_iso, to_iso
from ..common.validators import require_choice, require_non_empty, require_positive_int
from ..core.constants import EDITABLE_EMPLOYEE_FIELDS, REQUIRED_EMPLOYEE_FIELDS
from ..core.enums import AuditAction, EmployeeStatus
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from .model import Employee, to_attributes
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

STATUS_CHOICES = tuple(s.value for s in EmployeeStatus)


@dataclass(frozen=True)
class BulkUpdateResult:
    results: list[dict]
    total_processed: int

    def to_dict(self) -> dict:
        return {"results": self.results, "totalProcessed": self.total_processed}


def clean_employee_fields(data: Any, *, partial: bool) -> dict:
    """Keep only editable fields and validate them.

    With ``partial=True`` (updates) only the fields present are checked, but a
    required field that is present may not be blanked.
    """

    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")

    fields = {k: data[k] for k in EDITABLE_EMPLOYEE_FIELDS if k in data}

    for name in REQUIRED_EMPLOYEE_FIELDS:
        if partial and name not in fields:
            continue
        fields[name] = require_non_empty(fields.get(name), name)

    if "status" in fields or not partial:
        status = fields.get("status")
        if status in (None, "") and not partial:
            status = EmployeeStatus.ACTIVE.value
        fields["status"] = require_choice(status, "status", STATUS_CHOICES)

    if "salary" in fields:
        salary = fields["salary"]
        fields["salary"] = None if salary in (None, "") else require_positive_int(salary, "salary")

    for name, value in fields.items():
        if name in ("salary",) or value is None:
            continue
        if not isinstance(value, str):
            raise ValidationError(f"{name} must be a string")

    return fields


def filter_employees(
    employees: Sequence[Employee],
    *,
    q: Optional[str] = None,
    status: Optional[str] = None,
    department: Optional[str] = None,
) -> list[Employee]:
    """Case-insensitive text match on name/email/position plus exact status and department.

    ``"all"`` or an empty value disables the status/department filter.
    """

    term = (q or "").strip().lower()
    status = None if status in (None, "", "all") else status
    department = None if department in (None, "", "all") else department

    out: list[Employee] = []
    for e in employees:
        if term and not any(term in (v or "").lower() for v in (e.first_name, e.last_name, e.email, e.position)):
            continue
        if status and e.status != status:
            continue
        if department and e.department != department:
            continue
        out.append(e)
    return out


class EmployeeService:
    """Use case: employee CRUD, search, bulk update and export.

    Every mutation is a single read-modify-write followed by one audit append.
    Nothing here is transactional: the audit write can fail after the employee
    write succeeded.
    """

    def __init__(self, employees: EmployeeRepository, audit: AuditService):
        self._employees = employees
        self._audit = audit

    def list_employees(self) -> list[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: parse_iso(e.created_at), reverse=True)

    def search(
        self,
        *,
        q: Optional[str] = None,
        status: Optional[str] = None,
        department: Optional[str] = None,
    ) -> list[Employee]:
        return filter_employees(self.list_employees(), q=q, status=status, department=department)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _email_taken(self, email: str, *, exclude_id: Optional[str] = None) -> bool:
        target = email.strip().lower()
        return any(
            e.employee_id != exclude_id and (e.email or "").strip().lower() == target
            for e in self._employees.list_all()
        )

    def create_employee(self, data: Mapping[str, Any], *, user_id: Optional[str]) -> Employee:
        fields = clean_employee_fields(data, partial=False)

        if self._email_taken(fields["email"]):
            raise ValidationError("Employee with this email already exists")

        now = to_iso(now_utc())
        employee = Employee(
            employee_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            created_by=user_id,
            profile_picture=None,
            **to_attributes(fields),
        )
        self._employees.save(employee)

        self._audit.record(
            action=AuditAction.CREATE_EMPLOYEE,
            entity_id=employee.employee_id,
            user_id=user_id,
            details={"employeeName": employee.full_name},
        )
        logger.info("Employee %s created by %s", employee.employee_id, user_id)
        return employee

    def _merge(self, existing: Employee, fields: dict, *, user_id: Optional[str]) -> Employee:
        return dataclasses.replace(
            existing,
            updated_at=to_iso(now_utc()),
            updated_by=user_id,
            **to_attributes(fields),
        )

    def _check_email_change(self, existing: Employee, fields: dict) -> None:
        new_email = fields.get("email")
        if new_email and new_email.lower() != (existing.email or "").lower():
            if self._email_taken(new_email, exclude_id=existing.employee_id):
                raise ValidationError("Employee with this email already exists")

    def update_employee(self, employee_id: str, data: Mapping[str, Any], *, user_id: Optional[str]) -> Employee:
        fields = clean_employee_fields(data, partial=True)
        existing = self.get_employee(employee_id)

        self._check_email_change(existing, fields)

        updated = self._merge(existing, fields, user_id=user_id)
        self._employees.save(updated)

        self._audit.record(
            action=AuditAction.UPDATE_EMPLOYEE,
            entity_id=employee_id,
            user_id=user_id,
            details={"employeeName": updated.full_name, "changes": list(fields)},
        )
        return updated

    def delete_employee(self, employee_id: str, *, user_id: Optional[str]) -> Employee:
        employee = self.get_employee(employee_id)
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")

        self._audit.record(
            action=AuditAction.DELETE_EMPLOYEE,
            entity_id=employee_id,
            user_id=user_id,
            details={"employeeName": employee.full_name},
        )
        logger.info("Employee %s deleted by %s", employee_id, user_id)
        return employee

    def bulk_update(self, employee_ids: Any, updates: Any, *, user_id: Optional[str]) -> BulkUpdateResult:
        if not isinstance(employee_ids, list) or not employee_ids:
            raise ValidationError("Employee IDs array is required")

        fields = clean_employee_fields(updates if updates is not None else {}, partial=True)

        results: list[dict] = []
        for raw_id in employee_ids:
            try:
                existing = self.get_employee(str(raw_id))
                self._check_email_change(existing, fields)
            except DomainError as e:
                results.append({"id": raw_id, "success": False, "error": str(e)})
                continue

            updated = self._merge(existing, fields, user_id=user_id)
            self._employees.save(updated)
            results.append({"id": raw_id, "success": True})

            self._audit.record(
                action=AuditAction.BULK_UPDATE_EMPLOYEE,
                entity_id=updated.employee_id,
                user_id=user_id,
                details={"employeeName": updated.full_name, "changes": list(fields)},
            )

        return BulkUpdateResult(results=results, total_processed=len(results))

    def attach_photo(
        self,
        employee: Employee,
        *,
        url: Optional[str],
        file_name: str,
        user_id: Optional[str],
    ) -> Employee:
        updated = dataclasses.replace(
            employee,
            profile_picture=url,
            profile_picture_file_name=file_name,
            updated_at=to_iso(now_utc()),
            updated_by=user_id,
        )
        self._employees.save(updated)
        return updated

    def all_records(self) -> Sequence[Employee]:
        """Unsorted full scan, as used by exports."""
        return list(self._employees.list_all())
