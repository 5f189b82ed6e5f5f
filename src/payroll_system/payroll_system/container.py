from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.credentials import CredentialVerifier, SingleUserCredentialVerifier
from .auth.service import AuthService
from .auth.tokens import TokenService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .integrity.guard import ReferentialIntegrityGuard
from .payroll.mysql_report_repository import MySQLPayrollReportRepository
from .payroll.repository import PayrollReportRepository
from .payroll.service import PayrollReportService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    salaries_repo: SalaryRepository
    reports_repo: PayrollReportRepository

    guard: ReferentialIntegrityGuard
    auth_service: AuthService
    department_service: DepartmentService
    employee_service: EmployeeService
    salary_service: SalaryService
    payroll_report_service: PayrollReportService


def assemble(
    *,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    salaries_repo: SalaryRepository,
    reports_repo: PayrollReportRepository,
    verifier: CredentialVerifier,
    tokens: TokenService,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any set of repositories."""

    guard = ReferentialIntegrityGuard(departments_repo, employees_repo, salaries_repo)
    return Container(
        conn=conn,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        salaries_repo=salaries_repo,
        reports_repo=reports_repo,
        guard=guard,
        auth_service=AuthService(verifier, tokens),
        department_service=DepartmentService(departments_repo, guard),
        employee_service=EmployeeService(employees_repo, guard),
        salary_service=SalaryService(salaries_repo, guard),
        payroll_report_service=PayrollReportService(reports_repo),
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    jwt_expires_minutes: int,
    admin_username: str,
    admin_password: str,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return assemble(
        conn=conn,
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        reports_repo=MySQLPayrollReportRepository(conn),
        verifier=SingleUserCredentialVerifier(admin_username, admin_password),
        tokens=TokenService(jwt_secret, expires_minutes=jwt_expires_minutes),
    )
