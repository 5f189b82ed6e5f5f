from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class NetSalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, gross: Decimal, deduction: Decimal) -> Decimal:
        raise NotImplementedError
