from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import DependentRecordsError, DuplicateRecordError, InvalidReferenceError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..salaries.repository import SalaryRepository

logger = logging.getLogger(__name__)


class ReferentialIntegrityGuard:
    """Application-level checks between departments, employees and salaries.

    Parents must exist before a child is written, and a parent cannot be
    deleted while children reference it. The schema carries the same rules
    as FK/UNIQUE constraints; these checks produce the friendly errors.
    """

    def __init__(
        self,
        departments: DepartmentRepository,
        employees: EmployeeRepository,
        salaries: SalaryRepository,
    ):
        self._departments = departments
        self._employees = employees
        self._salaries = salaries

    def require_department(self, code: str) -> None:
        if not self._departments.exists(code):
            raise InvalidReferenceError(
                "Invalid department code",
                errors=[{"field": "department_code", "message": f"Department {code} does not exist"}],
            )

    def require_employee(self, number: int) -> None:
        if not self._employees.exists(int(number)):
            raise InvalidReferenceError(
                "Invalid employee number",
                errors=[{"field": "employee_number", "message": f"Employee {number} does not exist"}],
            )

    def ensure_department_deletable(self, code: str) -> None:
        count = self._employees.count_by_department(code)
        if count > 0:
            logger.info("Refusing to delete department %s: %s employees", code, count)
            raise DependentRecordsError("Cannot delete department with existing employees")

    def ensure_employee_deletable(self, number: int) -> None:
        count = self._salaries.count_by_employee(int(number))
        if count > 0:
            logger.info("Refusing to delete employee %s: %s salary records", number, count)
            raise DependentRecordsError("Cannot delete employee with existing salary records")

    def ensure_unique_salary(self, *, employee_number: int, month: str, exclude_id: Optional[int] = None) -> None:
        existing = self._salaries.find_id_for_employee_month(
            employee_number=int(employee_number),
            month=month,
            exclude_id=exclude_id,
        )
        if existing is not None:
            raise DuplicateRecordError("Salary record already exists for this employee and month")
