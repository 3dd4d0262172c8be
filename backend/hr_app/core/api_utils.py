"""
Common API utilities for consistent response formatting across all controllers.
"""

from typing import Any, Dict, Iterable, Optional
from urllib.parse import quote

from flask import Response, jsonify, request

from hr_app.core.exceptions import RequestValidationError
from hr_app.domain.entities import Employee


def api_response(
    data: Any, status_code: int = 200, headers: Optional[Dict[str, Any]] = None
) -> Response:
    """
    JSON response with optional metadata headers.

    Args:
        data: JSON-serializable payload
        status_code: HTTP status code
        headers: Extra headers; values are converted to strings

    Returns:
        Flask Response
    """
    response = jsonify(data)
    response.status_code = status_code
    for name, value in (headers or {}).items():
        response.headers[name] = str(value)
    return response


def header_value(text: str) -> str:
    """Percent-encode caller-supplied text so it is safe to echo in a header."""
    return quote(text, safe=" ")


def serialize_employees(employees: Iterable[Employee]) -> list:
    return [employee.to_dict() for employee in employees]


def get_json_body() -> Any:
    """Return the parsed JSON body or raise a request validation error."""
    data = request.get_json(silent=True)
    if data is None:
        raise RequestValidationError(
            "Request body must be valid JSON", {"body": "must be valid JSON"}
        )
    return data
