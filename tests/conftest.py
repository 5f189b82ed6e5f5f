from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.auth.credentials import SingleUserCredentialVerifier
from src.payroll_system.payroll_system.auth.tokens import TokenService
from src.payroll_system.payroll_system.container import assemble
from src.payroll_system.payroll_system.core.enums import Gender
from src.payroll_system.payroll_system.departments.model import Department
from src.payroll_system.payroll_system.employees.model import Employee, EmployeeData
from src.payroll_system.payroll_system.main import create_app
from src.payroll_system.payroll_system.payroll.model import PayrollSourceRow, RecordCounts
from src.payroll_system.payroll_system.salaries.model import Salary, SalaryData


class InMemoryDepartments:
    def __init__(self):
        self.rows: dict[str, Department] = {}

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def get_by_code(self, code):
        return self.rows.get(code)

    def exists(self, code):
        return code in self.rows

    def create(self, department):
        self.rows[department.code] = department

    def update(self, department):
        if department.code not in self.rows:
            return False
        self.rows[department.code] = department
        return True

    def delete(self, code):
        return self.rows.pop(code, None) is not None

    def count(self):
        return len(self.rows)


class InMemoryEmployees:
    def __init__(self, departments: InMemoryDepartments):
        self._departments = departments
        self.rows: dict[int, Employee] = {}
        self._next_id = 1

    def _with_department(self, emp: Employee) -> Employee:
        dept = self._departments.get_by_code(emp.department_code)
        return Employee(
            number=emp.number,
            first_name=emp.first_name,
            last_name=emp.last_name,
            position=emp.position,
            gender=emp.gender,
            hired_date=emp.hired_date,
            department_code=emp.department_code,
            address=emp.address,
            telephone=emp.telephone,
            department_name=dept.name if dept else None,
        )

    def list_all(self):
        return [self._with_department(self.rows[k]) for k in sorted(self.rows)]

    def get_by_number(self, number):
        emp = self.rows.get(int(number))
        return self._with_department(emp) if emp else None

    def exists(self, number):
        return int(number) in self.rows

    def count_by_department(self, department_code):
        return sum(1 for e in self.rows.values() if e.department_code == department_code)

    def create(self, data: EmployeeData):
        number = self._next_id
        self._next_id += 1
        self.rows[number] = Employee.from_data(number, data)
        return number

    def update(self, number, data: EmployeeData):
        if int(number) not in self.rows:
            return False
        self.rows[int(number)] = Employee.from_data(number, data)
        return True

    def delete(self, number):
        return self.rows.pop(int(number), None) is not None

    def count(self):
        return len(self.rows)


class InMemorySalaries:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.rows: dict[int, Salary] = {}
        self._next_id = 1

    def _joined(self, s: Salary) -> Salary:
        emp = self._employees.get_by_number(s.employee_number)
        return Salary(
            salary_id=s.salary_id,
            employee_number=s.employee_number,
            gross_salary=s.gross_salary,
            total_deduction=s.total_deduction,
            net_salary=s.net_salary,
            month=s.month,
            first_name=emp.first_name,
            last_name=emp.last_name,
            position=emp.position,
            department_name=emp.department_name,
        )

    def list_all(self):
        joined = [self._joined(s) for s in self.rows.values()]
        joined.sort(key=lambda s: (s.last_name, s.first_name))
        joined.sort(key=lambda s: s.month, reverse=True)
        return joined

    def list_for_employee(self, employee_number):
        rows = [self._joined(s) for s in self.rows.values() if s.employee_number == int(employee_number)]
        return sorted(rows, key=lambda s: s.month, reverse=True)

    def get_by_id(self, salary_id):
        s = self.rows.get(int(salary_id))
        return self._joined(s) if s else None

    def find_id_for_employee_month(self, *, employee_number, month, exclude_id=None):
        for s in self.rows.values():
            if s.employee_number == int(employee_number) and s.month == month and s.salary_id != exclude_id:
                return s.salary_id
        return None

    def count_by_employee(self, employee_number):
        return sum(1 for s in self.rows.values() if s.employee_number == int(employee_number))

    def create(self, data: SalaryData):
        salary_id = self._next_id
        self._next_id += 1
        self.rows[salary_id] = Salary.from_data(salary_id, data)
        return salary_id

    def update(self, salary_id, data: SalaryData):
        if int(salary_id) not in self.rows:
            return False
        self.rows[int(salary_id)] = Salary.from_data(salary_id, data)
        return True

    def delete(self, salary_id):
        return self.rows.pop(int(salary_id), None) is not None

    def count(self):
        return len(self.rows)


class InMemoryPayrollReports:
    """Left join of employees x department x salary-for-month over the fakes."""

    def __init__(self, departments, employees, salaries):
        self._departments = departments
        self._employees = employees
        self._salaries = salaries

    def get_report_rows(self, *, month, department_code, employee_number=None):
        out = []
        for emp in self._employees.list_all():
            if emp.department_code != department_code:
                continue
            if employee_number is not None and emp.number != int(employee_number):
                continue
            sid = self._salaries.find_id_for_employee_month(employee_number=emp.number, month=month)
            out.append(
                PayrollSourceRow(
                    employee_number=emp.number,
                    first_name=emp.first_name,
                    last_name=emp.last_name,
                    position=emp.position,
                    department_name=emp.department_name,
                    net_salary=self._salaries.rows[sid].net_salary if sid is not None else None,
                )
            )
        return out

    def list_available_months(self):
        return sorted({s.month for s in self._salaries.rows.values()}, reverse=True)

    def get_counts(self):
        return RecordCounts(
            employee_count=self._employees.count(),
            department_count=self._departments.count(),
            salary_count=self._salaries.count(),
        )


class Store:
    def __init__(self):
        self.departments = InMemoryDepartments()
        self.employees = InMemoryEmployees(self.departments)
        self.salaries = InMemorySalaries(self.employees)
        self.reports = InMemoryPayrollReports(self.departments, self.employees, self.salaries)

    def add_department(self, code, name, budget="0"):
        self.departments.create(Department(code=code, name=name, gross_salary_budget=Decimal(budget)))

    def add_employee(self, first_name, last_name, department_code, *, position="Engineer", gender=Gender.FEMALE):
        return self.employees.create(
            EmployeeData(
                first_name=first_name,
                last_name=last_name,
                position=position,
                gender=gender,
                hired_date=date(2022, 1, 10),
                department_code=department_code,
            )
        )

    def add_salary(self, employee_number, month, gross, deduction):
        gross, deduction = Decimal(gross), Decimal(deduction)
        return self.salaries.create(
            SalaryData(
                employee_number=employee_number,
                gross_salary=gross,
                total_deduction=deduction,
                net_salary=gross - deduction,
                month=month,
            )
        )


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService("test-jwt-secret", expires_minutes=60)


@pytest.fixture
def container(store, tokens):
    return assemble(
        departments_repo=store.departments,
        employees_repo=store.employees,
        salaries_repo=store.salaries,
        reports_repo=store.reports,
        verifier=SingleUserCredentialVerifier("admin", "admin123"),
        tokens=tokens,
    )


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client) -> dict:
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    token = resp.get_json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}
