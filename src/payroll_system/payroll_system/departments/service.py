from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Sequence

from ..common.validators import require_money, require_non_empty
from ..core.exceptions import DuplicateRecordError, NotFoundError, ValidationError
from ..integrity.guard import ReferentialIntegrityGuard
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(r"^[A-Z0-9]+$")


def normalize_code(value: Any) -> str:
    code = require_non_empty(value, "department_code").upper()
    if not _CODE_RE.match(code):
        message = "department_code must contain only letters and digits"
        raise ValidationError(message, errors=[{"field": "department_code", "message": message}])
    return code


class DepartmentService:
    def __init__(self, departments: DepartmentRepository, guard: ReferentialIntegrityGuard):
        self._departments = departments
        self._guard = guard

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get(self, code: str) -> Department:
        dept = self._departments.get_by_code(normalize_code(code))
        if not dept:
            raise NotFoundError("Department not found")
        return dept

    @staticmethod
    def _build(code: str, payload: Mapping[str, Any]) -> Department:
        return Department(
            code=code,
            name=require_non_empty(payload.get("department_name"), "department_name"),
            gross_salary_budget=require_money(payload.get("gross_salary_budget"), "gross_salary_budget"),
        )

    def create(self, payload: Mapping[str, Any]) -> Department:
        dept = self._build(normalize_code(payload.get("department_code")), payload)
        if self._departments.exists(dept.code):
            raise DuplicateRecordError("Department code already exists")
        self._departments.create(dept)
        logger.info("Created department %s", dept.code)
        return dept

    def update(self, code: str, payload: Mapping[str, Any]) -> Department:
        dept = self._build(normalize_code(code), payload)
        if not self._departments.update(dept):
            raise NotFoundError("Department not found")
        return dept

    def delete(self, code: str) -> None:
        code = normalize_code(code)
        self._guard.ensure_department_deletable(code)
        if not self._departments.delete(code):
            raise NotFoundError("Department not found")
        logger.info("Deleted department %s", code)
