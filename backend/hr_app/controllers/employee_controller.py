"""
Employee controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Checks request shape, never business thresholds
- Lets domain errors propagate to the registered error handlers
"""

import logging

from flask import Blueprint, request, url_for

from hr_app.controllers import get_employee_service
from hr_app.core.api_utils import (
    api_response,
    get_json_body,
    header_value,
    serialize_employees,
)
from hr_app.core.exceptions import EmployeeNotFoundError
from hr_app.core.limiter_config import READ_LIMIT, WRITE_LIMIT, limiter
from hr_app.core.validation import (
    parse_employee,
    parse_int_param,
    parse_number_param,
    require_text_param,
)

logger = logging.getLogger(__name__)

employees_bp = Blueprint("employees", __name__, url_prefix="/api/employees")


@employees_bp.route("", methods=["GET"])
@limiter.limit(READ_LIMIT)
def list_employees():
    """List employees, optionally filtered.

    Query parameters:
    - department: exact department name (case-insensitive)
    - minSalary: salary floor; any filter routes through the service search
    """
    department = request.args.get("department", "").strip() or None
    min_salary = parse_number_param(request.args.get("minSalary"), "minSalary") or 0.0

    service = get_employee_service()
    if department is not None or min_salary > 0:
        employees = service.search_employees(department, min_salary)
        logger.info(f"Found {len(employees)} employees matching search criteria")
    else:
        employees = service.find_all()
        logger.info(f"Retrieved all {len(employees)} employees")

    return api_response(
        serialize_employees(employees), headers={"X-Total-Count": len(employees)}
    )


@employees_bp.route("/<int:employee_id>", methods=["GET"])
@limiter.limit(READ_LIMIT)
def get_employee(employee_id: int):
    employee = get_employee_service().find_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return api_response(employee.to_dict(), headers={"X-Employee-Version": "1.0"})


@employees_bp.route("", methods=["POST"])
@limiter.limit(WRITE_LIMIT)
def create_employee():
    """Hire a new employee. Any client-supplied id is ignored."""
    employee = parse_employee(get_json_body())
    saved = get_employee_service().save(employee)
    logger.info(f"Processed new hire with ID: {saved.id}")

    location = url_for("employees.get_employee", employee_id=saved.id, _external=True)
    return api_response(saved.to_dict(), 201, headers={"Location": location})


@employees_bp.route("/<int:employee_id>", methods=["PUT"])
@limiter.limit(WRITE_LIMIT)
def update_employee(employee_id: int):
    employee = parse_employee(get_json_body())
    updated = get_employee_service().update_employee(employee_id, employee)
    return api_response(updated.to_dict())


@employees_bp.route("/<int:employee_id>", methods=["DELETE"])
@limiter.limit(WRITE_LIMIT)
def delete_employee(employee_id: int):
    get_employee_service().terminate_employee(employee_id)
    return "", 204


@employees_bp.route("/department/<department>", methods=["GET"])
@limiter.limit(READ_LIMIT)
def list_by_department(department: str):
    employees = get_employee_service().find_by_department(department)
    return api_response(
        serialize_employees(employees),
        headers={"X-Department": header_value(department), "X-Count": len(employees)},
    )


@employees_bp.route("/department/<department>/expense", methods=["GET"])
@limiter.limit(READ_LIMIT)
def department_expense(department: str):
    total = get_employee_service().calculate_department_salary_expense(department)
    return api_response(
        {"department": department, "totalSalaryExpense": total},
        headers={"X-Department": header_value(department)},
    )


@employees_bp.route("/count", methods=["GET"])
@limiter.limit(READ_LIMIT)
def employee_count():
    return api_response({"count": get_employee_service().count()})


@employees_bp.route("/health", methods=["GET"])
@limiter.exempt
def health():
    """Liveness probe, exempt from rate limiting."""
    return api_response(
        {
            "status": "UP",
            "service": "EmployeeService",
            "employeeCount": str(get_employee_service().count()),
        }
    )


# ========== BUSINESS OPERATION ENDPOINTS ==========


@employees_bp.route("/<int:employee_id>/raise", methods=["PUT"])
@limiter.limit(WRITE_LIMIT)
def give_raise(employee_id: int):
    amount = parse_number_param(request.args.get("amount"), "amount", required=True)
    updated = get_employee_service().give_raise(employee_id, amount)
    return api_response(updated.to_dict(), headers={"X-Raise-Amount": amount})


@employees_bp.route("/<int:employee_id>/standard-raise", methods=["PUT"])
@limiter.limit(WRITE_LIMIT)
def give_standard_raise(employee_id: int):
    service = get_employee_service()
    updated = service.give_standard_raise(employee_id)
    percentage = f"{service.STANDARD_RAISE_PERCENTAGE * 100:g}%"
    return api_response(updated.to_dict(), headers={"X-Standard-Raise": percentage})


@employees_bp.route("/<int:employee_id>/transfer", methods=["PUT"])
@limiter.limit(WRITE_LIMIT)
def transfer_employee(employee_id: int):
    department = require_text_param(request.args.get("department"), "department")
    updated = get_employee_service().transfer_employee(employee_id, department)
    return api_response(
        updated.to_dict(), headers={"X-New-Department": header_value(department)}
    )


@employees_bp.route("/high-performers", methods=["GET"])
@limiter.limit(READ_LIMIT)
def high_performers():
    employees = get_employee_service().find_high_performers()
    return api_response(
        serialize_employees(employees),
        headers={"X-High-Performers-Count": len(employees)},
    )


@employees_bp.route("/find", methods=["GET"])
@limiter.limit(READ_LIMIT)
def find_employees():
    """Free-text search on employee names."""
    query = require_text_param(request.args.get("query"), "query")
    results = get_employee_service().search_by_name(query)
    return api_response(
        serialize_employees(results),
        headers={"X-Search-Query": header_value(query), "X-Result-Count": len(results)},
    )


@employees_bp.route("/search", methods=["GET"])
@limiter.limit(READ_LIMIT)
def search_employees():
    """Paginated name search.

    Query parameters:
    - name: required name fragment
    - page: zero-based page number (default 0)
    - size: page size (default 10)
    """
    name = require_text_param(request.args.get("name"), "name")
    page = parse_int_param(request.args.get("page"), "page", default=0, min_value=0)
    size = parse_int_param(request.args.get("size"), "size", default=10, min_value=1)

    matches = get_employee_service().search_by_name(name)
    start = page * size
    page_items = matches[start : start + size]

    return api_response(
        serialize_employees(page_items),
        headers={"X-Total-Count": len(matches), "X-Page": page, "X-Size": size},
    )
