from __future__ import annotations

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.constants import MONEY_QUANTUM
from ..core.exceptions import ConflictError, DependentRecordsError, DomainError, InvalidReferenceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Run a block inside one transaction on a pooled connection.

    Commits when the block exits normally, rolls back on any exception and
    always hands the connection back to the pool. MySQL integrity errors are
    re-raised as domain errors.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except IntegrityError as exc:
        conn.rollback()
        raise translate_integrity_error(exc) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def translate_integrity_error(exc: IntegrityError) -> DomainError:
    logger.warning("Write rejected by database constraint: %s", exc)
    if exc.errno == errorcode.ER_DUP_ENTRY:
        return ConflictError("Record was modified concurrently and already exists")
    if exc.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
        return InvalidReferenceError("Referenced record no longer exists")
    if exc.errno in (errorcode.ER_ROW_IS_REFERENCED, errorcode.ER_ROW_IS_REFERENCED_2):
        return DependentRecordsError("Record is still referenced by other records")
    return ConflictError("Write rejected by database constraint")


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_money(value: Any) -> Decimal:
    """Normalize DECIMAL columns (or NULL from an outer join) to cents."""

    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(MONEY_QUANTUM)
