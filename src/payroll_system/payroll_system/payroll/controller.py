from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.http import success, token_required
from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.auth_service)

    @app.route("/api/reports/payroll/<month>", methods=["GET"], endpoint="payroll_report_missing_department")
    @app.route("/api/reports/payroll/<month>/<department_code>", methods=["GET"], endpoint="payroll_report")
    @auth_required
    def payroll_report(month: str, department_code: Optional[str] = None):
        raw_employee = (request.args.get("employee_number") or "").strip()
        employee_number = require_int(raw_employee, "employee_number") if raw_employee else None

        report = container.payroll_report_service.build_payroll_report(
            month=month,
            department_code=department_code,
            employee_number=employee_number,
            search=request.args.get("search"),
        )
        return success([r.to_dict() for r in report.rows], metadata=report.metadata())
