from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEE_PREFIX
from ..store.repository import RecordStore
from .model import Employee
from .repository import EmployeeRepository


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    @staticmethod
    def _key(employee_id: str) -> str:
        return f"{EMPLOYEE_PREFIX}{employee_id}"

    def list_all(self) -> Sequence[Employee]:
        # null values can be left behind by partial writes; skip them
        return [Employee.from_record(v) for _, v in self._store.get_by_prefix(EMPLOYEE_PREFIX) if v]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        record = self._store.get(self._key(employee_id))
        return Employee.from_record(record) if record else None

    def save(self, employee: Employee) -> None:
        self._store.set(self._key(employee.employee_id), employee.to_record())

    def delete_by_id(self, employee_id: str) -> bool:
        if self._store.get(self._key(employee_id)) is None:
            return False
        self._store.delete(self._key(employee_id))
        return True
