from __future__ import annotations

from flask import Flask, g

from ..common.http import json_body, success, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.auth_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        result = container.auth_service.login(json_body())
        return success(result, message="Login successful")

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @auth_required
    def me():
        return success({"user": g.current_user})
