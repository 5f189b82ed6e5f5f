from __future__ import annotations

from flask import Flask

from ..common.http import json_body, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    def list_departments():
        return success([d.to_dict() for d in service.list_all()])

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    def create_department():
        dept = service.create(json_body())
        return success(dept.to_dict(), message="Department created successfully", status=201)

    @app.route("/api/departments/<code>", methods=["GET"], endpoint="departments_get")
    def get_department(code: str):
        return success(service.get(code).to_dict())

    @app.route("/api/departments/<code>", methods=["PUT"], endpoint="departments_update")
    def update_department(code: str):
        dept = service.update(code, json_body())
        return success(dept.to_dict(), message="Department updated successfully")

    @app.route("/api/departments/<code>", methods=["DELETE"], endpoint="departments_delete")
    def delete_department(code: str):
        service.delete(code)
        return success(message="Department deleted successfully")
