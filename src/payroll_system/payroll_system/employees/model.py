from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class EmployeeData:
    """Writable employee fields, already validated."""

    first_name: str
    last_name: str
    position: str
    gender: Gender
    hired_date: date
    department_code: str
    address: Optional[str] = None
    telephone: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    number: int
    first_name: str
    last_name: str
    position: str
    gender: Gender
    hired_date: date
    department_code: str
    address: Optional[str] = None
    telephone: Optional[str] = None
    department_name: Optional[str] = None

    @classmethod
    def from_data(cls, number: int, data: EmployeeData) -> "Employee":
        return cls(
            number=int(number),
            first_name=data.first_name,
            last_name=data.last_name,
            position=data.position,
            gender=data.gender,
            hired_date=data.hired_date,
            department_code=data.department_code,
            address=data.address,
            telephone=data.telephone,
        )

    def to_dict(self) -> dict:
        return {
            "employee_number": self.number,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address,
            "position": self.position,
            "telephone": self.telephone,
            "gender": self.gender.value,
            "hired_date": self.hired_date.strftime("%Y-%m-%d"),
            "department_code": self.department_code,
            "department_name": self.department_name,
        }
