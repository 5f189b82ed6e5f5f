from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MONEY_MAX, MONEY_QUANTUM, MONTH_PATTERN
from ..core.exceptions import InvalidMonthFormatError, ValidationError

_MONTH_RE = re.compile(MONTH_PATTERN)


def _invalid(field: str, message: str) -> ValidationError:
    return ValidationError(message, errors=[{"field": field, "message": message}])


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise _invalid(field_name, f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise _invalid(field_name, f"{field_name} must be a valid integer")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise _invalid(field_name, f"{field_name} must be a valid integer")


def require_money(value: Any, field_name: str) -> Decimal:
    """Parse a non-negative amount into a cent-quantized Decimal that fits
    the DECIMAL(15,2) money columns.

    Floats are converted through ``str`` so 0.1 stays 0.1 instead of its
    binary expansion.
    """

    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise _invalid(field_name, f"{field_name} must be a number")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise _invalid(field_name, f"{field_name} must be a number")
    if not amount.is_finite():
        raise _invalid(field_name, f"{field_name} must be a number")
    if amount < 0:
        raise _invalid(field_name, f"{field_name} must not be negative")
    try:
        amount = amount.quantize(MONEY_QUANTUM)
    except InvalidOperation:
        raise _invalid(field_name, f"{field_name} must not exceed {MONEY_MAX}")
    if amount > MONEY_MAX:
        raise _invalid(field_name, f"{field_name} must not exceed {MONEY_MAX}")
    # "-0" parses as negative zero.
    return abs(amount)


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise _invalid(field_name, f"{field_name} must be a date (YYYY-MM-DD)")


def require_month(value: Any, field_name: str = "month") -> str:
    month = str(value or "").strip()
    if not _MONTH_RE.match(month) or not 1 <= int(month[5:]) <= 12:
        message = "Invalid month format. Use YYYY-MM"
        raise InvalidMonthFormatError(message, errors=[{"field": field_name, "message": message}])
    return month


def is_month(value: Any) -> bool:
    return bool(_MONTH_RE.match(str(value or "")))
