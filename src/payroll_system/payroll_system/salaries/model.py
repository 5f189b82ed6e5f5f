from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryData:
    """Validated salary fields with the derived net amount."""

    employee_number: int
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal
    month: str


@dataclass(frozen=True)
class Salary:
    salary_id: int
    employee_number: int
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal
    month: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    department_name: Optional[str] = None

    @classmethod
    def from_data(cls, salary_id: int, data: SalaryData) -> "Salary":
        return cls(
            salary_id=int(salary_id),
            employee_number=data.employee_number,
            gross_salary=data.gross_salary,
            total_deduction=data.total_deduction,
            net_salary=data.net_salary,
            month=data.month,
        )

    def to_dict(self) -> dict:
        out = {
            "salary_id": self.salary_id,
            "employee_number": self.employee_number,
            "gross_salary": str(self.gross_salary),
            "total_deduction": str(self.total_deduction),
            "net_salary": str(self.net_salary),
            "month": self.month,
        }
        if self.first_name is not None:
            out.update(
                {
                    "first_name": self.first_name,
                    "last_name": self.last_name,
                    "position": self.position,
                    "department_name": self.department_name,
                }
            )
        return out
