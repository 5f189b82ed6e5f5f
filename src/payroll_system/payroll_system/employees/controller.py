from __future__ import annotations

from flask import Flask

from ..common.http import json_body, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def list_employees():
        return success([e.to_dict() for e in service.list_all()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def create_employee():
        emp = service.create(json_body())
        return success(emp.to_dict(), message="Employee created successfully", status=201)

    @app.route("/api/employees/<int:number>", methods=["GET"], endpoint="employees_get")
    def get_employee(number: int):
        return success(service.get(number).to_dict())

    @app.route("/api/employees/<int:number>", methods=["PUT"], endpoint="employees_update")
    def update_employee(number: int):
        emp = service.update(number, json_body())
        return success(emp.to_dict(), message="Employee updated successfully")

    @app.route("/api/employees/<int:number>", methods=["DELETE"], endpoint="employees_delete")
    def delete_employee(number: int):
        service.delete(number)
        return success(message="Employee deleted successfully")
