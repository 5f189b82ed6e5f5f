"""Stateless views over already-built report rows (search box + footer total)."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..core.constants import MONEY_QUANTUM
from .model import PayrollReportRow


def matches(row: PayrollReportRow, query: str) -> bool:
    needle = query.lower()
    return any(
        needle in (value or "").lower()
        for value in (row.first_name, row.last_name, row.position, row.department_name)
    )


def filter_rows(rows: Iterable[PayrollReportRow], query: Optional[str]) -> tuple[PayrollReportRow, ...]:
    needle = (query or "").strip()
    if not needle:
        return tuple(rows)
    return tuple(r for r in rows if matches(r, needle))


def total_net_salary(rows: Iterable[PayrollReportRow]) -> Decimal:
    return sum((r.net_salary for r in rows), Decimal("0")).quantize(MONEY_QUANTUM)
