"""
Error handlers that translate exceptions into RFC 7807 problem responses.

Every error leaving the API goes through here, so internal details
(tracebacks, exception class names) only ever reach the server log.
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from hr_app.core.exceptions import NotFoundError, RequestValidationError, ValidationError

logger = logging.getLogger(__name__)

PROBLEM_TYPE_BASE = "https://api.example.com/problems/"
PROBLEM_CONTENT_TYPE = "application/problem+json"
INTERNAL_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


def problem_response(
    status: int,
    title: str,
    problem_type: str,
    detail: str,
    extra: Optional[Dict[str, Any]] = None,
) -> Response:
    body: Dict[str, Any] = {
        "type": PROBLEM_TYPE_BASE + problem_type,
        "title": title,
        "status": status,
        "detail": detail,
        "path": request.path,
    }
    if extra:
        body.update(extra)
    response = jsonify(body)
    response.status_code = status
    response.content_type = PROBLEM_CONTENT_TYPE
    return response


def handle_not_found(error: NotFoundError) -> Response:
    logger.warning(
        f"Employee not found: {error.message}",
        extra={"context": {"path": request.path}},
    )
    return problem_response(404, "Employee Not Found", "employee-not-found", error.message)


def handle_request_validation(error: RequestValidationError) -> Response:
    logger.warning(
        f"Validation failed: {error.message}",
        extra={"context": {"path": request.path, "fields": error.field_errors}},
    )
    return problem_response(
        400,
        "Validation Failed",
        "validation-failed",
        error.message,
        {"validationErrors": error.field_errors},
    )


def handle_validation(error: ValidationError) -> Response:
    logger.warning(
        f"Illegal argument: {error.message}",
        extra={"context": {"path": request.path}},
    )
    return problem_response(400, "Invalid Request", "illegal-argument", error.message)


def handle_http_exception(error: HTTPException) -> Response:
    logger.info(
        f"HTTP {error.code} on {request.method} {request.path}",
        extra={"context": {"path": request.path, "status_code": error.code}},
    )
    response = problem_response(
        error.code or 500, error.name, "http-error", error.description or error.name
    )
    # Keep headers such as Allow (405) or Retry-After (429)
    for name, value in error.get_headers():
        if name.lower() != "content-type":
            response.headers[name] = value
    return response


def handle_unexpected(error: Exception) -> Response:
    logger.exception(
        "Unexpected error occurred",
        extra={"context": {"path": request.path, "method": request.method}},
    )
    return problem_response(
        500, "Internal Server Error", "internal-server-error", INTERNAL_ERROR_DETAIL
    )


def register_error_handlers(app: Flask) -> None:
    """Install the handlers; Flask picks the most specific class per error."""
    app.register_error_handler(NotFoundError, handle_not_found)
    app.register_error_handler(RequestValidationError, handle_request_validation)
    app.register_error_handler(ValidationError, handle_validation)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected)
