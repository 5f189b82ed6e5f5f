from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollSourceRow, RecordCounts


class PayrollReportRepository(Protocol):
    def get_report_rows(
        self,
        *,
        month: str,
        department_code: str,
        employee_number: Optional[int] = None,
    ) -> Sequence[PayrollSourceRow]:
        """Every matching employee, with ``net_salary=None`` when unpaid that month."""

        raise NotImplementedError

    def list_available_months(self) -> Sequence[str]:
        raise NotImplementedError

    def get_counts(self) -> RecordCounts:
        raise NotImplementedError
