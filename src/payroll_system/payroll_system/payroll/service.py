from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.validators import is_month
from ..core.constants import MONEY_QUANTUM
from ..core.exceptions import InvalidMonthFormatError, MissingRequiredFilterError
from . import report_view
from .model import PayrollReport, PayrollReportRow
from .repository import PayrollReportRepository

logger = logging.getLogger(__name__)

_ZERO = Decimal("0").quantize(MONEY_QUANTUM)


class PayrollReportService:
    def __init__(self, reports: PayrollReportRepository):
        self._reports = reports

    def build_payroll_report(
        self,
        *,
        month: str,
        department_code: Optional[str],
        employee_number: Optional[int] = None,
        search: Optional[str] = None,
    ) -> PayrollReport:
        month = (month or "").strip()
        if not is_month(month):
            raise InvalidMonthFormatError(
                "Invalid month format. Use YYYY-MM",
                errors=[{"field": "month", "message": "Invalid month format. Use YYYY-MM"}],
            )

        department_code = (department_code or "").strip().upper()
        if not department_code:
            raise MissingRequiredFilterError(
                "Department code is required",
                errors=[{"field": "department_code", "message": "Department code is required"}],
            )

        source = self._reports.get_report_rows(
            month=month,
            department_code=department_code,
            employee_number=employee_number,
        )

        # employee_number breaks ties between identical names.
        source = sorted(source, key=lambda r: (r.last_name, r.first_name, r.employee_number))
        rows = [
            PayrollReportRow(
                first_name=r.first_name,
                last_name=r.last_name,
                position=r.position,
                department_name=r.department_name or "",
                # Employees without a salary that month still appear, at zero.
                net_salary=r.net_salary if r.net_salary is not None else _ZERO,
            )
            for r in source
        ]

        visible = report_view.filter_rows(rows, search)
        logger.debug(
            "Payroll report month=%s dept=%s employee=%s: %s rows (%s after search)",
            month,
            department_code,
            employee_number,
            len(rows),
            len(visible),
        )

        return PayrollReport(
            month=month,
            department_code=department_code,
            employee_number=employee_number,
            search=(search or "").strip() or None,
            rows=visible,
            available_months=tuple(self._reports.list_available_months()),
            counts=self._reports.get_counts(),
            total_net_salary=report_view.total_net_salary(visible),
        )
