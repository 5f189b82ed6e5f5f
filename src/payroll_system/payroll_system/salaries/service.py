from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_int, require_money, require_month
from ..core.exceptions import NotFoundError, ValidationError
from ..integrity.guard import ReferentialIntegrityGuard
from ..payroll.calculator.base import NetSalaryCalculator
from ..payroll.calculator.standard_calculator import StandardNetSalaryCalculator
from .model import Salary, SalaryData
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class SalaryService:
    def __init__(
        self,
        salaries: SalaryRepository,
        guard: ReferentialIntegrityGuard,
        *,
        calculator: Optional[NetSalaryCalculator] = None,
    ):
        self._salaries = salaries
        self._guard = guard
        self._calculator = calculator or StandardNetSalaryCalculator()

    def _parse(self, payload: Mapping[str, Any]) -> SalaryData:
        gross = require_money(payload.get("gross_salary"), "gross_salary")
        deduction = require_money(payload.get("total_deduction"), "total_deduction")
        if deduction > gross:
            message = "Total deduction cannot exceed gross salary"
            raise ValidationError(message, errors=[{"field": "total_deduction", "message": message}])

        # net_salary from the request is ignored on purpose.
        return SalaryData(
            employee_number=require_int(payload.get("employee_number"), "employee_number"),
            gross_salary=gross,
            total_deduction=deduction,
            net_salary=self._calculator.net_salary(gross, deduction),
            month=require_month(payload.get("month")),
        )

    def list_all(self) -> Sequence[Salary]:
        return self._salaries.list_all()

    def list_for_employee(self, employee_number: int) -> Sequence[Salary]:
        return self._salaries.list_for_employee(int(employee_number))

    def get(self, salary_id: int) -> Salary:
        salary = self._salaries.get_by_id(int(salary_id))
        if not salary:
            raise NotFoundError("Salary record not found")
        return salary

    def create(self, payload: Mapping[str, Any]) -> Salary:
        data = self._parse(payload)
        self._guard.require_employee(data.employee_number)
        self._guard.ensure_unique_salary(employee_number=data.employee_number, month=data.month)
        salary_id = self._salaries.create(data)
        logger.info("Created salary %s for employee %s (%s)", salary_id, data.employee_number, data.month)
        return Salary.from_data(salary_id, data)

    def update(self, salary_id: int, payload: Mapping[str, Any]) -> Salary:
        data = self._parse(payload)
        self.get(salary_id)
        self._guard.require_employee(data.employee_number)
        self._guard.ensure_unique_salary(
            employee_number=data.employee_number,
            month=data.month,
            exclude_id=int(salary_id),
        )
        if not self._salaries.update(int(salary_id), data):
            raise NotFoundError("Salary record not found")
        return Salary.from_data(salary_id, data)

    def delete(self, salary_id: int) -> None:
        if not self._salaries.delete(int(salary_id)):
            raise NotFoundError("Salary record not found")
        logger.info("Deleted salary %s", salary_id)
