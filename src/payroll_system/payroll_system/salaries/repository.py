from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Salary, SalaryData


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[Salary]:
        """Return salaries joined with employee and department names."""

        raise NotImplementedError

    def list_for_employee(self, employee_number: int) -> Sequence[Salary]:
        raise NotImplementedError

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        raise NotImplementedError

    def find_id_for_employee_month(
        self,
        *,
        employee_number: int,
        month: str,
        exclude_id: Optional[int] = None,
    ) -> Optional[int]:
        raise NotImplementedError

    def count_by_employee(self, employee_number: int) -> int:
        raise NotImplementedError

    def create(self, data: SalaryData) -> int:
        raise NotImplementedError

    def update(self, salary_id: int, data: SalaryData) -> bool:
        raise NotImplementedError

    def delete(self, salary_id: int) -> bool:
        raise NotImplementedError
