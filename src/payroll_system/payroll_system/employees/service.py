from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import optional_text, require_date, require_non_empty
from ..core.enums import Gender
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.service import normalize_code
from ..integrity.guard import ReferentialIntegrityGuard
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, guard: ReferentialIntegrityGuard):
        self._employees = employees
        self._guard = guard

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> EmployeeData:
        try:
            gender = Gender(str(payload.get("gender") or "").strip())
        except ValueError:
            message = "Gender must be either Male or Female"
            raise ValidationError(message, errors=[{"field": "gender", "message": message}])

        return EmployeeData(
            first_name=require_non_empty(payload.get("first_name"), "first_name"),
            last_name=require_non_empty(payload.get("last_name"), "last_name"),
            position=require_non_empty(payload.get("position"), "position"),
            gender=gender,
            hired_date=require_date(payload.get("hired_date"), "hired_date"),
            department_code=normalize_code(payload.get("department_code")),
            address=optional_text(payload.get("address")),
            telephone=optional_text(payload.get("telephone")),
        )

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, number: int) -> Employee:
        emp = self._employees.get_by_number(int(number))
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def create(self, payload: Mapping[str, Any]) -> Employee:
        data = self._parse(payload)
        self._guard.require_department(data.department_code)
        number = self._employees.create(data)
        logger.info("Created employee %s in %s", number, data.department_code)
        return Employee.from_data(number, data)

    def update(self, number: int, payload: Mapping[str, Any]) -> Employee:
        data = self._parse(payload)
        if not self._employees.exists(int(number)):
            raise NotFoundError("Employee not found")
        self._guard.require_department(data.department_code)
        if not self._employees.update(int(number), data):
            raise NotFoundError("Employee not found")
        return Employee.from_data(number, data)

    def delete(self, number: int) -> None:
        self._guard.ensure_employee_deletable(int(number))
        if not self._employees.delete(int(number)):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", number)
