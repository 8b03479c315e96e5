"""RFC 7807 problem responses for every error the API emits."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from forum.core.logger import ensure_request_id
from forum.services._shared.errors import ServiceError

log = logging.getLogger(__name__)

PROBLEM_MIMETYPE = "application/problem+json"

# Seconds clients should wait before retrying a 503
RETRY_AFTER_SECONDS = 1


def problem_response(
    status: int,
    code: str,
    detail: str,
    *,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    exc_info: bool = False,
) -> tuple[Response, int]:
    """
    Render and log a ``application/problem+json`` response.

    :param status: HTTP status code.
    :param code: Stable machine-readable error code (``not_found``, ``invalid_token``...).
    :param detail: Human-readable message, safe to show to clients.
    :param details: Optional structured payload (field errors).
    :param headers: Extra headers such as ``WWW-Authenticate`` or ``Retry-After``.
    :param exc_info: Attach the active traceback to the log record.
    :returns: ``(response, status)`` tuple for Flask.
    """
    status = int(status)
    body: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": status,
        "detail": detail,
        "instance": request.path,
        "code": code,
        "request_id": ensure_request_id(),
    }
    if details:
        body["details"] = details

    resp = jsonify(body)
    resp.mimetype = PROBLEM_MIMETYPE
    for name, value in (headers or {}).items():
        resp.headers[name] = value

    log.log(
        logging.ERROR if status >= 500 else logging.WARNING,
        "http.problem status=%s code=%s detail=%s",
        status,
        code,
        detail,
        exc_info=exc_info,
    )
    return resp, status


class APIError(Exception):
    """
    Error carrying everything needed to render a problem response.

    Subclasses fix ``status_code``, ``code`` and ``default_message``; callers
    may still override any of them per instance.
    """

    status_code: int = HTTPStatus.BAD_REQUEST
    code: str = "bad_request"
    default_message: str = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.status_code = int(status_code or self.status_code)
        self.code = code or self.code
        self.details = dict(details or {})
        self.headers = dict(headers or {})

    def to_response(self) -> tuple[Response, int]:
        return problem_response(
            self.status_code,
            self.code,
            self.message,
            details=self.details,
            headers=self.headers,
        )


class NotFound(APIError):
    status_code = HTTPStatus.NOT_FOUND
    code = "not_found"
    default_message = "Resource not found"


class Conflict(APIError):
    status_code = HTTPStatus.CONFLICT
    code = "conflict"
    default_message = "Conflict"


class Unauthorized(APIError):
    """401 with a ``WWW-Authenticate`` challenge.

    ``code`` separates "no credential" from "bad credential" without saying
    what was wrong with a bad one.
    """

    status_code = HTTPStatus.UNAUTHORIZED
    code = "unauthorized"
    default_message = "Unauthorized"

    def __init__(
        self, message: str | None = None, *, code: str | None = None, challenge: str = "Bearer"
    ) -> None:
        super().__init__(message, code=code, headers={"WWW-Authenticate": challenge})


class UnprocessableEntity(APIError):
    status_code = HTTPStatus.UNPROCESSABLE_ENTITY
    code = "validation_error"
    default_message = "Validation failed"


class ServiceUnavailable(APIError):
    """503 for storage failures the client may retry."""

    status_code = HTTPStatus.SERVICE_UNAVAILABLE
    code = "service_unavailable"
    default_message = "Service temporarily unavailable"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message, headers={"Retry-After": str(RETRY_AFTER_SECONDS)})


def _http_code(err: HTTPException) -> str:
    # "Method Not Allowed" -> "method_not_allowed"
    return (err.name or "error").lower().replace(" ", "_")


def init_app(app: Flask) -> None:
    """
    Register the problem+json error handlers.

    Service errors go through
    :meth:`forum.services._shared.base.BaseService.translate_exceptions`.
    Database and unexpected errors never expose their message to clients.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        return err.to_response()

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        from forum.services._shared.base import BaseService

        translated = BaseService.translate_exceptions(err)
        if not isinstance(translated, APIError):  # pragma: no cover - every ServiceError maps
            raise err
        return translated.to_response()

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(err: SchemaValidationError):
        return problem_response(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            "validation_error",
            "Validation failed",
            details={"errors": err.messages},
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        if status == HTTPStatus.NOT_FOUND:
            detail = f"Route '{request.path}' not found"
        else:
            detail = (err.description or err.name or "Error").strip()
        return problem_response(status, _http_code(err), detail)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        return problem_response(
            HTTPStatus.CONFLICT, "conflict", "Resource conflict", exc_info=True
        )

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: OperationalError):
        return ServiceUnavailable().to_response()

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        return problem_response(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "Unexpected error",
            exc_info=True,
        )
