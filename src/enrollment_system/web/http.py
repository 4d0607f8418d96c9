from __future__ import annotations

from typing import Any, Dict, Type

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
)

STATUS_BY_ERROR: Dict[Type[DomainError], int] = {
    ValidationError: 400,
    ConflictError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
}


def json_body() -> Any:
    """Parsed JSON body, or None when it is missing or malformed (validation rejects None)."""
    return request.get_json(silent=True)


def error_response(message: str, status: int):
    resp = jsonify({"error": message})
    resp.status_code = status
    return resp


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in STATUS_BY_ERROR.items() if isinstance(e, cls)), 400)
        app.logger.info("%s %s -> %s: %s", request.method, request.path, status, e.message)

        resp = error_response(e.message, status)
        if status == 401:
            resp.headers["WWW-Authenticate"] = f'Basic realm="{app.config.get("AUTH_REALM", "enrollment")}"'
        return resp

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        # Not a caller error: the data file is unreadable or unwritable.
        app.logger.error("%s %s -> 500: %s", request.method, request.path, e, exc_info=e)
        return error_response("Erreur interne de stockage.", 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)
