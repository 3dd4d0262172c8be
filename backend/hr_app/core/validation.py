"""
Common validation utilities for the request layer.

This module checks the SHAPE of incoming data (presence, type, length and
the field bounds of the Employee record). Business thresholds such as the
company salary range are enforced by the service layer, never here.
"""

import logging
import math
from typing import Any, Dict, Optional

from hr_app.core.exceptions import RequestValidationError
from hr_app.domain.entities import (
    DEPARTMENT_MAX_LENGTH,
    DEPARTMENT_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    SALARY_CEILING,
    SALARY_FLOOR,
    Employee,
    SearchCriteria,
)

logger = logging.getLogger(__name__)


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: Dict[str, str] = {}
        self.cleaned_data: Dict[str, Any] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, message: str, field: str):
        """Add validation error; the first error per field wins."""
        self.errors.setdefault(field, message)
        logger.debug(f"Validation error: {field}: {message}")

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise RequestValidationError(
                "Validation failed for one or more fields", dict(self.errors)
            )


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        raise NotImplementedError("Subclasses must implement validate")

    @staticmethod
    def validate_required_field(
        value: Any, field_name: str, result: ValidationResult
    ) -> bool:
        """Validate that a required field is present and not empty."""
        if value is None or (isinstance(value, str) and value.strip() == ""):
            result.add_error(f"{field_name} is required", field_name)
            return False
        return True

    @staticmethod
    def validate_number(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
    ) -> Optional[float]:
        """Validate and convert a numeric field."""
        if value is None or value == "":
            return None

        # bool is an int subclass, JSON true/false is never a number here
        if isinstance(value, bool):
            result.add_error(f"{field_name} must be a number", field_name)
            return None

        try:
            number = float(value)
        except (TypeError, ValueError):
            result.add_error(f"{field_name} must be a number", field_name)
            return None

        if not math.isfinite(number):
            result.add_error(f"{field_name} must be a finite number", field_name)
            return None

        if min_value is not None and number < min_value:
            result.add_error(f"{field_name} must be at least {min_value:g}", field_name)
            return None

        if max_value is not None and number > max_value:
            result.add_error(
                f"{field_name} cannot exceed {max_value:,.0f}", field_name
            )
            return None

        return number

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_value: Optional[int] = None,
    ) -> Optional[int]:
        """Validate and convert integer field."""
        if value is None or value == "" or isinstance(value, bool):
            return None

        try:
            int_value = int(value)
        except (ValueError, TypeError):
            result.add_error(f"{field_name} must be an integer", field_name)
            return None

        if min_value is not None and int_value < min_value:
            result.add_error(f"{field_name} must be at least {min_value}", field_name)
            return None

        return int_value

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        result: ValidationResult,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> Optional[str]:
        """Validate string field, returns the trimmed value."""
        if value is None:
            return None

        if not isinstance(value, str):
            result.add_error(f"{field_name} must be a string", field_name)
            return None

        value = value.strip()

        if min_length is not None and len(value) < min_length:
            result.add_error(
                f"{field_name} must be between {min_length} and {max_length} characters",
                field_name,
            )
            return None

        if max_length is not None and len(value) > max_length:
            result.add_error(
                f"{field_name} must be between {min_length} and {max_length} characters",
                field_name,
            )
            return None

        return value


class EmployeeValidator(BaseValidator):
    """Validator for employee create/update payloads."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if self.validate_required_field(data.get("name"), "name", result):
            name = self.validate_string(
                data.get("name"),
                "name",
                result,
                min_length=NAME_MIN_LENGTH,
                max_length=NAME_MAX_LENGTH,
            )
            if name is not None:
                result.cleaned_data["name"] = name

        if self.validate_required_field(data.get("department"), "department", result):
            department = self.validate_string(
                data.get("department"),
                "department",
                result,
                min_length=DEPARTMENT_MIN_LENGTH,
                max_length=DEPARTMENT_MAX_LENGTH,
            )
            if department is not None:
                result.cleaned_data["department"] = department

        if self.validate_required_field(data.get("salary"), "salary", result):
            salary = self.validate_number(
                data.get("salary"),
                "salary",
                result,
                min_value=SALARY_FLOOR,
                max_value=SALARY_CEILING,
            )
            if salary is not None:
                result.cleaned_data["salary"] = salary

        return result


class SearchCriteriaValidator(BaseValidator):
    """Validator for advanced search bodies. Every field is optional."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        department = self.validate_string(data.get("department"), "department", result)
        if department:
            result.cleaned_data["department"] = department

        for key, field in (("minSalary", "min_salary"), ("maxSalary", "max_salary")):
            value = self.validate_number(data.get(key), key, result)
            if value is not None:
                result.cleaned_data[field] = value

        name_contains = self.validate_string(
            data.get("nameContains"), "nameContains", result
        )
        if name_contains:
            result.cleaned_data["name_contains"] = name_contains

        return result


def parse_employee(data: Any) -> Employee:
    """Build a pending Employee (no id) from a JSON body or raise."""
    if not isinstance(data, dict):
        raise RequestValidationError(
            "Request body must be a JSON object", {"body": "must be a JSON object"}
        )
    result = EmployeeValidator().validate(data)
    result.raise_if_invalid()
    return Employee(**result.cleaned_data)


def parse_search_criteria(data: Any) -> SearchCriteria:
    if data is None:
        return SearchCriteria()
    if not isinstance(data, dict):
        raise RequestValidationError(
            "Request body must be a JSON object", {"body": "must be a JSON object"}
        )
    result = SearchCriteriaValidator().validate(data)
    result.raise_if_invalid()
    return SearchCriteria(**result.cleaned_data)


def _missing(name: str) -> RequestValidationError:
    return RequestValidationError(f"{name} is required", {name: f"{name} is required"})


def parse_number_param(
    raw: Optional[str], name: str, required: bool = False
) -> Optional[float]:
    """Convert a query-string value to float; ``None`` when optional and absent."""
    if raw is None or raw.strip() == "":
        if required:
            raise _missing(name)
        return None
    result = ValidationResult()
    value = BaseValidator.validate_number(raw.strip(), name, result)
    result.raise_if_invalid()
    return value


def parse_int_param(raw: Optional[str], name: str, default: int, min_value: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    result = ValidationResult()
    value = BaseValidator.validate_integer(raw.strip(), name, result, min_value=min_value)
    result.raise_if_invalid()
    return value


def require_text_param(raw: Optional[str], name: str) -> str:
    if raw is None or raw.strip() == "":
        raise _missing(name)
    return raw.strip()
