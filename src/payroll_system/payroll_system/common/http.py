from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, ValidationError

logger = logging.getLogger(__name__)


def success(data: Any = None, *, message: Optional[str] = None, status: int = 200, metadata: Optional[dict] = None):
    body: dict[str, Any] = {"status": "success"}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if metadata is not None:
        body["metadata"] = metadata
    return jsonify(body), status


def error(message: str, *, status: int, errors: Optional[list] = None, detail: Optional[str] = None):
    body: dict[str, Any] = {"status": "error", "message": message}
    if errors:
        body["errors"] = errors
    if detail:
        body["error"] = detail
    return jsonify(body), status


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None and request.get_data():
        raise ValidationError("Request body must be valid JSON")
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def token_required(auth_service):
    """Decorator factory: require ``Authorization: Bearer <token>``.

    Decoded claims are stored on ``flask.g.current_user``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.current_user = auth_service.current_user(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error(e.message, status=e.status_code, errors=e.errors)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        detail = str(e) if bool(app.config.get("DEBUG", False)) else None
        return error("Internal server error", status=500, detail=detail)
