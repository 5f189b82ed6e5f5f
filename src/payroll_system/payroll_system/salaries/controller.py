from __future__ import annotations

from flask import Flask

from ..common.http import json_body, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route("/api/salaries", methods=["GET"], endpoint="salaries_list")
    def list_salaries():
        return success([s.to_dict() for s in service.list_all()])

    @app.route("/api/salaries/employee/<int:employee_id>", methods=["GET"], endpoint="salaries_for_employee")
    def list_employee_salaries(employee_id: int):
        return success([s.to_dict() for s in service.list_for_employee(employee_id)])

    @app.route("/api/salaries", methods=["POST"], endpoint="salaries_create")
    def create_salary():
        salary = service.create(json_body())
        return success(salary.to_dict(), message="Salary record created successfully", status=201)

    @app.route("/api/salaries/<int:salary_id>", methods=["GET"], endpoint="salaries_get")
    def get_salary(salary_id: int):
        return success(service.get(salary_id).to_dict())

    @app.route("/api/salaries/<int:salary_id>", methods=["PUT"], endpoint="salaries_update")
    def update_salary(salary_id: int):
        salary = service.update(salary_id, json_body())
        return success(salary.to_dict(), message="Salary record updated successfully")

    @app.route("/api/salaries/<int:salary_id>", methods=["DELETE"], endpoint="salaries_delete")
    def delete_salary(salary_id: int):
        service.delete(salary_id)
        return success(message="Salary record deleted successfully")
