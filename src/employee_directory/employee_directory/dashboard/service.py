from __future__ import annotations

from dataclasses import dataclass, field

from ..audit.service import AuditService
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.enums import EmployeeStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class EmployeeStats:
    total: int
    active: int
    inactive: int
    department_counts: dict[str, int] = field(default_factory=dict)
    average_salary: float = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "inactive": self.inactive,
            "departmentCounts": dict(self.department_counts),
            "averageSalary": self.average_salary,
        }


def compute_stats(employees: list[Employee]) -> EmployeeStats:
    """Headcount, department breakdown and mean salary from a full list.

    Departments are counted by their raw string; a missing salary counts as 0.
    """

    department_counts: dict[str, int] = {}
    for e in employees:
        department_counts[e.department] = department_counts.get(e.department, 0) + 1

    total = len(employees)
    return EmployeeStats(
        total=total,
        active=sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE.value),
        inactive=sum(1 for e in employees if e.status == EmployeeStatus.INACTIVE.value),
        department_counts=department_counts,
        average_salary=(sum(e.salary or 0 for e in employees) / total) if total else 0,
    )


class DashboardService:
    """Recomputes everything from a full scan on every call."""

    def __init__(self, employees: EmployeeRepository, audit: AuditService):
        self._employees = employees
        self._audit = audit

    def get_stats(self) -> dict:
        stats = compute_stats(list(self._employees.list_all()))
        return {
            "stats": stats.to_dict(),
            "recentActivity": [a.to_record() for a in self._audit.recent(RECENT_ACTIVITY_LIMIT)],
        }
