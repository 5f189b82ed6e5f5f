from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Department:
    code: str
    name: str
    gross_salary_budget: Decimal

    def to_dict(self) -> dict:
        return {
            "department_code": self.code,
            "department_name": self.name,
            "gross_salary_budget": str(self.gross_salary_budget),
        }
