from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

_SELECT_EMPLOYEE = """
    SELECT e.employee_number, e.first_name, e.last_name, e.address, e.position,
           e.telephone, e.gender, e.hired_date, e.department_code, d.department_name
    FROM employees e
    LEFT JOIN departments d ON d.department_code = e.department_code
"""


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        number=int(r["employee_number"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        position=r["position"],
        gender=Gender(r["gender"]),
        hired_date=r["hired_date"],
        department_code=r["department_code"],
        address=r.get("address"),
        telephone=r.get("telephone"),
        department_name=r.get("department_name"),
    )


def _params(data: EmployeeData) -> tuple:
    return (
        data.first_name,
        data.last_name,
        data.address,
        data.position,
        data.telephone,
        data.gender.value,
        data.hired_date,
        data.department_code,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_EMPLOYEE + " ORDER BY e.employee_number")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_number(self, number: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_EMPLOYEE + " WHERE e.employee_number=%s", (int(number),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def exists(self, number: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_number=%s", (int(number),))
            return fetchone(cur) is not None

    def count_by_department(self, department_code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees WHERE department_code=%s", (department_code,))
            return int(fetchone(cur)["total"])

    def create(self, data: EmployeeData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    first_name, last_name, address, position,
                    telephone, gender, hired_date, department_code
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(data),
            )
            return int(cur.lastrowid)

    def update(self, number: int, data: EmployeeData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, address=%s, position=%s,
                    telephone=%s, gender=%s, hired_date=%s, department_code=%s
                WHERE employee_number=%s
                """,
                _params(data) + (int(number),),
            )
            if cur.rowcount:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_number=%s", (int(number),))
            return fetchone(cur) is not None

    def delete(self, number: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_number=%s", (int(number),))
            return cur.rowcount > 0
