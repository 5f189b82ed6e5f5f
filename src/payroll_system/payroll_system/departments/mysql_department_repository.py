from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_money
from .model import Department
from .repository import DepartmentRepository


def _row_to_department(r: dict) -> Department:
    return Department(
        code=r["department_code"],
        name=r["department_name"],
        gross_salary_budget=to_money(r["gross_salary_budget"]),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department_code, department_name, gross_salary_budget
                FROM departments
                ORDER BY department_code
                """
            )
            return [_row_to_department(r) for r in fetchall(cur)]

    def get_by_code(self, code: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department_code, department_name, gross_salary_budget
                FROM departments
                WHERE department_code=%s
                """,
                (code,),
            )
            r = fetchone(cur)
            return _row_to_department(r) if r else None

    def exists(self, code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM departments WHERE department_code=%s", (code,))
            return fetchone(cur) is not None

    def create(self, department: Department) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO departments(department_code, department_name, gross_salary_budget)
                VALUES(%s,%s,%s)
                """,
                (department.code, department.name, department.gross_salary_budget),
            )

    def update(self, department: Department) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE departments
                SET department_name=%s, gross_salary_budget=%s
                WHERE department_code=%s
                """,
                (department.name, department.gross_salary_budget, department.code),
            )
            if cur.rowcount:
                return True
            # MySQL reports 0 affected rows when the values did not change.
            cur.execute("SELECT 1 AS found FROM departments WHERE department_code=%s", (department.code,))
            return fetchone(cur) is not None

    def delete(self, code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE department_code=%s", (code,))
            return cur.rowcount > 0
