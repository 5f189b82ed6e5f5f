from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeData


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """Return employees joined with their department name."""

        raise NotImplementedError

    def get_by_number(self, number: int) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, number: int) -> bool:
        raise NotImplementedError

    def count_by_department(self, department_code: str) -> int:
        raise NotImplementedError

    def create(self, data: EmployeeData) -> int:
        raise NotImplementedError

    def update(self, number: int, data: EmployeeData) -> bool:
        raise NotImplementedError

    def delete(self, number: int) -> bool:
        raise NotImplementedError
