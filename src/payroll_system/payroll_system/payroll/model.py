from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayrollSourceRow:
    """Employee joined with department and (maybe) that month's salary."""

    employee_number: int
    first_name: str
    last_name: str
    position: str
    department_name: Optional[str]
    net_salary: Optional[Decimal]


@dataclass(frozen=True)
class PayrollReportRow:
    first_name: str
    last_name: str
    position: str
    department_name: str
    net_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "position": self.position,
            "department_name": self.department_name,
            "net_salary": str(self.net_salary),
        }


@dataclass(frozen=True)
class RecordCounts:
    employee_count: int
    department_count: int
    salary_count: int

    def to_dict(self) -> dict:
        return {
            "employee_count": self.employee_count,
            "department_count": self.department_count,
            "salary_count": self.salary_count,
        }


@dataclass(frozen=True)
class PayrollReport:
    month: str
    department_code: str
    rows: tuple[PayrollReportRow, ...]
    available_months: tuple[str, ...]
    counts: RecordCounts
    total_net_salary: Decimal
    search: Optional[str] = None
    employee_number: Optional[int] = None

    def metadata(self) -> dict:
        return {
            "month": self.month,
            "department_code": self.department_code,
            "employee_number": self.employee_number,
            "search": self.search,
            "available_months": list(self.available_months),
            "counts": self.counts.to_dict(),
            "total_net_salary": str(self.total_net_salary),
        }
