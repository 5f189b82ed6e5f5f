from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.core.exceptions import ConflictError


def _seed_engineering(client):
    client.post(
        "/api/departments",
        json={"department_code": "ENG", "department_name": "Engineering", "gross_salary_budget": 500000},
    )
    resp = client.post(
        "/api/employees",
        json={
            "first_name": "Ada",
            "last_name": "Lovelace",
            "position": "Engineer",
            "gender": "Female",
            "hired_date": "2021-03-01",
            "department_code": "ENG",
        },
    )
    return resp.get_json()["data"]["employee_number"]


def test_login_and_me(client, auth_headers):
    resp = client.get("/api/auth/me", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "success"
    assert body["data"]["user"]["username"] == "admin"


def test_login_failure_is_401(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "bad"})

    assert resp.status_code == 401
    assert resp.get_json() == {"status": "error", "message": "Invalid username or password"}


def test_login_validation_errors(client):
    resp = client.post("/api/auth/login", json={"username": "admin"})

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["field"] == "password"


def test_me_without_token_is_401(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Access token is required"


def test_payroll_scenario_end_to_end(client, auth_headers):
    number = _seed_engineering(client)

    created = client.post(
        "/api/salaries",
        json={
            "employee_number": number,
            "gross_salary": 800000,
            "total_deduction": 150000,
            "net_salary": 1,
            "month": "2024-03",
        },
    )
    assert created.status_code == 201
    assert created.get_json()["data"]["net_salary"] == "650000.00"

    resp = client.get("/api/reports/payroll/2024-03/ENG", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["data"] == [
        {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "position": "Engineer",
            "department_name": "Engineering",
            "net_salary": "650000.00",
        }
    ]
    assert body["metadata"]["available_months"] == ["2024-03"]
    assert body["metadata"]["counts"] == {"employee_count": 1, "department_count": 1, "salary_count": 1}
    assert body["metadata"]["total_net_salary"] == "650000.00"


def test_report_is_idempotent(client, auth_headers, store):
    _seed_engineering(client)
    store.add_employee("Alan", "Turing", "ENG")

    first = client.get("/api/reports/payroll/2024-03/ENG", headers=auth_headers).get_json()
    second = client.get("/api/reports/payroll/2024-03/ENG", headers=auth_headers).get_json()

    assert first == second
    assert [r["net_salary"] for r in first["data"]] == ["0.00", "0.00"]


def test_report_requires_token(client):
    resp = client.get("/api/reports/payroll/2024-03/ENG")
    assert resp.status_code == 401


def test_report_filter_errors(client, auth_headers):
    bad_month = client.get("/api/reports/payroll/2024-3/ENG", headers=auth_headers)
    no_dept = client.get("/api/reports/payroll/2024-03", headers=auth_headers)
    bad_employee = client.get("/api/reports/payroll/2024-03/ENG?employee_number=abc", headers=auth_headers)

    assert bad_month.status_code == 400
    assert bad_month.get_json()["message"] == "Invalid month format. Use YYYY-MM"
    assert no_dept.status_code == 400
    assert no_dept.get_json()["message"] == "Department code is required"
    assert bad_employee.status_code == 400


def test_report_employee_filter_and_search(client, auth_headers, store):
    number = _seed_engineering(client)
    store.add_employee("Alan", "Turing", "ENG")

    only_ada = client.get(f"/api/reports/payroll/2024-03/ENG?employee_number={number}", headers=auth_headers)
    only_alan = client.get("/api/reports/payroll/2024-03/ENG?search=TUR", headers=auth_headers)

    assert [r["last_name"] for r in only_ada.get_json()["data"]] == ["Lovelace"]
    assert [r["last_name"] for r in only_alan.get_json()["data"]] == ["Turing"]


def test_duplicate_salary_is_400(client):
    number = _seed_engineering(client)
    payload = {"employee_number": number, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"}

    assert client.post("/api/salaries", json=payload).status_code == 201
    resp = client.post("/api/salaries", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Salary record already exists for this employee and month"


def test_salary_written_by_a_concurrent_request_is_409(client, store, monkeypatch):
    number = _seed_engineering(client)
    payload = {"employee_number": number, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"}

    # Another request inserts the same month between the duplicate check and the insert.
    def insert_after_other_request(data):
        store.add_salary(number, "2024-03", "10", "1")
        raise ConflictError("Record was modified concurrently and already exists")

    monkeypatch.setattr(store.salaries, "create", insert_after_other_request)
    resp = client.post("/api/salaries", json=payload)

    assert resp.status_code == 409
    assert resp.get_json()["status"] == "error"
    assert store.salaries.count() == 1


@pytest.mark.parametrize(
    "url, body",
    [
        ("/api/salaries", {"employee_number": 1, "gross_salary": "1e30", "total_deduction": 0, "month": "2024-03"}),
        ("/api/salaries", {"employee_number": 1, "gross_salary": 1e14, "total_deduction": 0, "month": "2024-03"}),
        ("/api/departments", {"department_code": "OPS", "department_name": "Ops", "gross_salary_budget": 1e40}),
    ],
)
def test_oversized_amounts_are_400(client, url, body):
    _seed_engineering(client)

    resp = client.post(url, json=body)

    assert resp.status_code == 400
    assert resp.get_json()["status"] == "error"


def test_negative_zero_amount_is_echoed_as_zero(client):
    number = _seed_engineering(client)

    resp = client.post(
        "/api/salaries",
        json={"employee_number": number, "gross_salary": "-0", "total_deduction": "0", "month": "2024-03"},
    )

    assert resp.status_code == 201
    assert resp.get_json()["data"]["gross_salary"] == "0.00"


def test_update_missing_records_is_404(client):
    _seed_engineering(client)

    salary = client.put(
        "/api/salaries/42",
        json={"employee_number": 77, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"},
    )
    employee = client.put(
        "/api/employees/42",
        json={
            "first_name": "Ada",
            "last_name": "Lovelace",
            "position": "Engineer",
            "gender": "Female",
            "hired_date": "2021-03-01",
            "department_code": "OPS",
        },
    )

    assert salary.status_code == 404
    assert employee.status_code == 404


def test_salary_for_unknown_employee_is_400(client):
    resp = client.post(
        "/api/salaries",
        json={"employee_number": 77, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid employee number"


def test_department_delete_guard(client):
    _seed_engineering(client)

    blocked = client.delete("/api/departments/ENG")
    missing = client.delete("/api/departments/OPS")

    assert blocked.status_code == 400
    assert blocked.get_json()["message"] == "Cannot delete department with existing employees"
    assert missing.status_code == 404


def test_crud_reads(client):
    number = _seed_engineering(client)
    client.post(
        "/api/salaries",
        json={"employee_number": number, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"},
    )

    assert client.get("/api/departments").get_json()["data"][0]["department_code"] == "ENG"
    assert client.get("/api/departments/eng").get_json()["data"]["department_name"] == "Engineering"
    assert client.get(f"/api/employees/{number}").get_json()["data"]["department_name"] == "Engineering"
    assert client.get("/api/employees/999").status_code == 404
    salaries = client.get("/api/salaries").get_json()["data"]
    assert salaries[0]["first_name"] == "Ada"
    assert salaries[0]["net_salary"] == "9.00"
    assert len(client.get(f"/api/salaries/employee/{number}").get_json()["data"]) == 1
    assert client.get("/api/salaries/999").status_code == 404


def test_update_and_delete_salary(client):
    number = _seed_engineering(client)
    salary_id = client.post(
        "/api/salaries",
        json={"employee_number": number, "gross_salary": 10, "total_deduction": 1, "month": "2024-03"},
    ).get_json()["data"]["salary_id"]

    updated = client.put(
        f"/api/salaries/{salary_id}",
        json={"employee_number": number, "gross_salary": 20, "total_deduction": 5, "month": "2024-03"},
    )
    assert updated.get_json()["data"]["net_salary"] == "15.00"

    assert client.delete(f"/api/salaries/{salary_id}").status_code == 200
    assert client.delete(f"/api/salaries/{salary_id}").status_code == 404
    assert client.delete(f"/api/employees/{number}").status_code == 200


def test_malformed_json_is_400(client):
    resp = client.post("/api/departments", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["status"] == "error"


def test_unknown_route_uses_envelope(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.get_json()["status"] == "error"


def test_unexpected_error_hides_detail(app, client, container, monkeypatch):
    def boom():
        raise RuntimeError("database exploded")

    monkeypatch.setattr(container.departments_repo, "list_all", boom)

    resp = client.get("/api/departments")

    assert resp.status_code == 500
    assert resp.get_json() == {"status": "error", "message": "Internal server error"}


def test_health_without_database(client):
    resp = client.get("/api/health")
    assert resp.get_json()["data"] == {"database": "not configured"}
