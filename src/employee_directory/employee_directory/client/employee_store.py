from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional

from ..core.constants import DEFAULT_DEPARTMENT_COLOR, DEPARTMENT_COLORS
from ..dashboard.service import compute_stats
from ..employees.model import Employee
from ..employees.service import filter_employees
from .api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)


def get_department_color(department: Optional[str]) -> str:
    return DEPARTMENT_COLORS.get(department or "", DEFAULT_DEPARTMENT_COLOR)


class EmployeeStore:
    """Client-side cache of the employee list and dashboard stats.

    Single mutations splice the returned record into ``employees`` and then
    refetch stats; bulk operations refetch everything.
    """

    def __init__(self, api: ApiClient):
        self._api = api
        self.employees: list[Employee] = []
        self.dashboard_stats: Optional[dict] = None

    def refresh(self) -> None:
        self.refresh_employees()
        self.refresh_stats()

    def refresh_employees(self) -> list[Employee]:
        response = self._api.get_employees()
        self.employees = [Employee.from_record(r) for r in response.get("employees") or [] if r]
        return self.employees

    def refresh_stats(self) -> Optional[dict]:
        try:
            self.dashboard_stats = self._api.get_dashboard_stats()
        except ApiError as e:
            # get_employee_stats falls back to a local computation
            logger.warning("Error fetching dashboard stats: %s", e)
        return self.dashboard_stats

    def add(self, data: dict) -> Employee:
        employee = Employee.from_record(self._api.create_employee(data)["employee"])
        self.employees.insert(0, employee)
        self.refresh_stats()
        return employee

    def update(self, employee_id: str, updates: dict) -> Employee:
        employee = Employee.from_record(self._api.update_employee(employee_id, updates)["employee"])
        self.employees = [employee if e.employee_id == employee_id else e for e in self.employees]
        self.refresh_stats()
        return employee

    def delete(self, employee_id: str) -> None:
        self._api.delete_employee(employee_id)
        self.employees = [e for e in self.employees if e.employee_id != employee_id]
        self.refresh_stats()

    def upload_photo(self, employee_id: str, *, filename: str, data: bytes, content_type: str) -> Optional[str]:
        response = self._api.upload_employee_photo(
            employee_id, filename=filename, data=data, content_type=content_type
        )
        url = response.get("profilePicture")
        self.employees = [
            dataclasses.replace(e, profile_picture=url) if e.employee_id == employee_id else e
            for e in self.employees
        ]
        self.refresh_stats()
        return url

    def bulk_update(self, employee_ids: list[str], updates: dict) -> dict:
        result = self._api.bulk_update_employees(employee_ids, updates)
        self.refresh()
        logger.info("Updated %d employees", len(employee_ids))
        return result

    def bulk_delete(self, employee_ids: list[str]) -> list[str]:
        """Delete one id at a time; keeps going past failures and returns the failed ids.

        Deletions that succeeded before a failure are not rolled back.
        """

        failed: list[str] = []
        for employee_id in employee_ids:
            try:
                self._api.delete_employee(employee_id)
            except ApiError as e:
                logger.warning("Failed to delete employee %s: %s", employee_id, e)
                failed.append(employee_id)
                continue
            self.employees = [e for e in self.employees if e.employee_id != employee_id]
        self.refresh_stats()
        return failed

    def export(self, format: str = "csv") -> Any:
        data = self._api.export_employees(format)
        if format == "json":
            return data.get("employees", [])
        return data

    def get_employee_by_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.employee_id == employee_id), None)

    def get_employee_stats(self) -> dict:
        if self.dashboard_stats and self.dashboard_stats.get("stats"):
            return self.dashboard_stats["stats"]
        return compute_stats(self.employees).to_dict()

    def get_recent_activity(self) -> list[dict]:
        if not self.dashboard_stats:
            return []
        return list(self.dashboard_stats.get("recentActivity") or [])

    def filter(
        self,
        *,
        q: Optional[str] = None,
        status: Optional[str] = None,
        department: Optional[str] = None,
    ) -> list[Employee]:
        return filter_employees(self.employees, q=q, status=status, department=department)
