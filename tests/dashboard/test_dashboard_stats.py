from __future__ import annotations

from src.employee_directory.employee_directory.dashboard.service import DashboardService, compute_stats
from src.employee_directory.employee_directory.employees.model import Employee
from src.employee_directory.employee_directory.employees.store_employee_repository import StoreEmployeeRepository


def _employee(i: int, department: str, salary, status: str = "active") -> Employee:
    return Employee(
        employee_id=f"e{i}",
        first_name=f"First{i}",
        last_name=f"Last{i}",
        email=f"e{i}@company.com",
        position="Staff",
        department=department,
        salary=salary,
        status=status,
    )


def test_average_salary_and_department_counts():
    employees = [
        _employee(1, "Engineering", 95000),
        _employee(2, "Engineering", 78000),
        _employee(3, "Marketing", 65000, status="inactive"),
        _employee(4, "HR", 58000),
        _employee(5, "Sales", 72000),
    ]

    stats = compute_stats(employees)

    assert stats.average_salary == 73600
    assert stats.total == 5
    assert stats.active == 4
    assert stats.inactive == 1
    assert stats.department_counts == {"Engineering": 2, "Marketing": 1, "HR": 1, "Sales": 1}
    assert sum(stats.department_counts.values()) == stats.total


def test_missing_salary_counts_as_zero():
    stats = compute_stats([_employee(1, "HR", None), _employee(2, "HR", 100)])
    assert stats.average_salary == 50


def test_empty_directory():
    assert compute_stats([]).to_dict() == {
        "total": 0,
        "active": 0,
        "inactive": 0,
        "departmentCounts": {},
        "averageSalary": 0,
    }


def test_get_stats_includes_recent_activity(store, employee_service, audit_service, employee_data):
    for i in range(12):
        employee_service.create_employee(employee_data(email=f"p{i}@company.com"), user_id="u1")

    result = DashboardService(StoreEmployeeRepository(store), audit_service).get_stats()

    assert result["stats"]["total"] == 12
    assert len(result["recentActivity"]) == 10
    assert {a["action"] for a in result["recentActivity"]} == {"CREATE_EMPLOYEE"}
