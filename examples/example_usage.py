"""Example: use the service layer without going through Flask.

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        jwt_secret=settings.JWT_SECRET,
        jwt_expires_minutes=settings.JWT_EXPIRES_MINUTES,
        admin_username=settings.ADMIN_USERNAME,
        admin_password=settings.ADMIN_PASSWORD,
    )
    report = container.payroll_report_service.build_payroll_report(month="2024-03", department_code="ENG")
    for row in report.rows:
        print(row.to_dict())
    print("total:", report.total_net_salary)


if __name__ == "__main__":
    main()
