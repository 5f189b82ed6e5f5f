"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MONTH_PATTERN = r"^\d{4}-\d{2}$"
MONEY_QUANTUM = Decimal("0.01")
DEFAULT_JWT_EXPIRES_MINUTES = 60 * 24
DEFAULT_POOL_SIZE = 10
JWT_ALGORITHM = "HS256"
# Largest value a DECIMAL(15,2) column holds.
MONEY_MAX = Decimal("9999999999999.99")
