from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.exceptions import ValidationError
from .model import Employee

EXPORT_FORMATS = ("csv", "json")

CSV_HEADERS = [
    "ID",
    "First Name",
    "Last Name",
    "Email",
    "Phone",
    "Position",
    "Department",
    "Salary",
    "Start Date",
    "Status",
    "Address",
    "Emergency Contact",
    "Emergency Phone",
]


def _csv_row(e: Employee) -> list[str]:
    return [
        e.employee_id,
        e.first_name,
        e.last_name,
        e.email,
        e.phone or "",
        e.position,
        e.department,
        str(e.salary or 0),
        e.start_date or "",
        e.status,
        e.address or "",
        e.emergency_contact or "",
        e.emergency_phone or "",
    ]


def employees_to_csv(employees: Iterable[Employee]) -> str:
    """Header line (unquoted) followed by one fully quoted line per employee."""

    lines = [",".join(CSV_HEADERS)]
    for e in employees:
        buf = io.StringIO()
        csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="").writerow(_csv_row(e))
        lines.append(buf.getvalue())
    return "\n".join(lines)


def employees_to_json(employees: Iterable[Employee]) -> list[dict]:
    return [e.to_record() for e in employees]


def check_export_format(value: str | None) -> str:
    fmt = (value or "csv").lower()
    if fmt not in EXPORT_FORMATS:
        raise ValidationError("format must be csv or json")
    return fmt
