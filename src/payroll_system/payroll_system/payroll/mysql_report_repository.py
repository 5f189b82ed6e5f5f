from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_money
from .model import PayrollSourceRow, RecordCounts
from .repository import PayrollReportRepository


class MySQLPayrollReportRepository(PayrollReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_report_rows(
        self,
        *,
        month: str,
        department_code: str,
        employee_number: Optional[int] = None,
    ) -> Sequence[PayrollSourceRow]:
        clauses = ["e.department_code=%s"]
        params: list[object] = [month, department_code]
        if employee_number is not None:
            clauses.append("e.employee_number=%s")
            params.append(int(employee_number))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.employee_number, e.first_name, e.last_name, e.position,
                       d.department_name, s.net_salary
                FROM employees e
                LEFT JOIN departments d ON d.department_code = e.department_code
                LEFT JOIN salaries s ON s.employee_number = e.employee_number AND s.month=%s
                WHERE {where}
                ORDER BY e.last_name, e.first_name, e.employee_number
                """,
                tuple(params),
            )
            return [
                PayrollSourceRow(
                    employee_number=int(r["employee_number"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    position=r["position"],
                    department_name=r.get("department_name"),
                    net_salary=to_money(r["net_salary"]) if r.get("net_salary") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def list_available_months(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT month FROM salaries ORDER BY month DESC")
            return [r["month"] for r in fetchall(cur)]

    def get_counts(self) -> RecordCounts:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    (SELECT COUNT(*) FROM employees) AS employee_count,
                    (SELECT COUNT(*) FROM departments) AS department_count,
                    (SELECT COUNT(*) FROM salaries) AS salary_count
                """
            )
            r = fetchone(cur) or {}
            return RecordCounts(
                employee_count=int(r.get("employee_count") or 0),
                department_count=int(r.get("department_count") or 0),
                salary_count=int(r.get("salary_count") or 0),
            )
