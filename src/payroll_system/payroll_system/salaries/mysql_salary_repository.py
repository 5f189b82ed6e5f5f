from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_money
from .model import Salary, SalaryData
from .repository import SalaryRepository

_SELECT_SALARY = """
    SELECT s.salary_id, s.employee_number, s.gross_salary, s.total_deduction,
           s.net_salary, s.month,
           e.first_name, e.last_name, e.position, d.department_name
    FROM salaries s
    JOIN employees e ON e.employee_number = s.employee_number
    JOIN departments d ON d.department_code = e.department_code
"""


def _row_to_salary(r: dict) -> Salary:
    return Salary(
        salary_id=int(r["salary_id"]),
        employee_number=int(r["employee_number"]),
        gross_salary=to_money(r["gross_salary"]),
        total_deduction=to_money(r["total_deduction"]),
        net_salary=to_money(r["net_salary"]),
        month=r["month"],
        first_name=r.get("first_name"),
        last_name=r.get("last_name"),
        position=r.get("position"),
        department_name=r.get("department_name"),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_SALARY + " ORDER BY s.month DESC, e.last_name, e.first_name")
            return [_row_to_salary(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_number: int) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_SALARY + " WHERE s.employee_number=%s ORDER BY s.month DESC",
                (int(employee_number),),
            )
            return [_row_to_salary(r) for r in fetchall(cur)]

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_SALARY + " WHERE s.salary_id=%s", (int(salary_id),))
            r = fetchone(cur)
            return _row_to_salary(r) if r else None

    def find_id_for_employee_month(
        self,
        *,
        employee_number: int,
        month: str,
        exclude_id: Optional[int] = None,
    ) -> Optional[int]:
        sql = "SELECT salary_id FROM salaries WHERE employee_number=%s AND month=%s"
        params: list[object] = [int(employee_number), month]
        if exclude_id is not None:
            sql += " AND salary_id<>%s"
            params.append(int(exclude_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql + " LIMIT 1", tuple(params))
            r = fetchone(cur)
            return int(r["salary_id"]) if r else None

    def count_by_employee(self, employee_number: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM salaries WHERE employee_number=%s", (int(employee_number),))
            return int(fetchone(cur)["total"])

    def create(self, data: SalaryData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salaries(employee_number, gross_salary, total_deduction, net_salary, month)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (data.employee_number, data.gross_salary, data.total_deduction, data.net_salary, data.month),
            )
            return int(cur.lastrowid)

    def update(self, salary_id: int, data: SalaryData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salaries
                SET employee_number=%s, gross_salary=%s, total_deduction=%s, net_salary=%s, month=%s
                WHERE salary_id=%s
                """,
                (
                    data.employee_number,
                    data.gross_salary,
                    data.total_deduction,
                    data.net_salary,
                    data.month,
                    int(salary_id),
                ),
            )
            if cur.rowcount:
                return True
            cur.execute("SELECT 1 AS found FROM salaries WHERE salary_id=%s", (int(salary_id),))
            return fetchone(cur) is not None

    def delete(self, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salaries WHERE salary_id=%s", (int(salary_id),))
            return cur.rowcount > 0
