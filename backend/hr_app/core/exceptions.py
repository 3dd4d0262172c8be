"""
Custom exceptions for the application.
Centralized error taxonomy shared by the service and request layers.
"""

from typing import Dict, Optional


class DomainError(Exception):
    """Base class for errors raised on business grounds."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """
    Raised when caller-supplied data violates a business rule
    (salary out of range, non-positive raise, same-department transfer...).
    """

    pass


class NotFoundError(DomainError):
    """Raised when a referenced identifier does not exist."""

    pass


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int):
        super().__init__(f"Employee not found with ID: {employee_id}")
        self.employee_id = employee_id


class RequestValidationError(Exception):
    """
    Raised by the request layer when a payload or query parameter is
    malformed. Not a domain error: carries field-level messages only.
    """

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors or {}
