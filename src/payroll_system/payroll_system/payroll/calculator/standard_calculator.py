from __future__ import annotations

from decimal import Decimal

from ...core.constants import MONEY_QUANTUM
from .base import NetSalaryCalculator


class StandardNetSalaryCalculator(NetSalaryCalculator):
    """Standard rule: gross - deduction, exact to the cent."""

    def net_salary(self, gross: Decimal, deduction: Decimal) -> Decimal:
        return (Decimal(gross) - Decimal(deduction)).quantize(MONEY_QUANTUM)
