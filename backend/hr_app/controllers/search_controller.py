import dataclasses
import logging

from flask import Blueprint, request

from hr_app.controllers import get_employee_service
from hr_app.core.api_utils import api_response, get_json_body, serialize_employees
from hr_app.core.limiter_config import READ_LIMIT, limiter
from hr_app.core.validation import parse_search_criteria

logger = logging.getLogger(__name__)

# Create blueprint for search routes
search_bp = Blueprint("search", __name__, url_prefix="/api/search")


@search_bp.route("/department/<department>", methods=["GET"])
@limiter.limit(READ_LIMIT)
def search_by_department(department: str):
    employees = get_employee_service().find_by_department(department)
    return api_response(serialize_employees(employees))


@search_bp.route("/advanced", methods=["POST"])
@limiter.limit(READ_LIMIT)
def advanced_search():
    """Multi-criteria search.

    JSON body (all fields optional, an empty body matches everyone):
    - department, minSalary, maxSalary, nameContains
    """
    body = get_json_body() if request.get_data() else None
    criteria = parse_search_criteria(body)
    employees = get_employee_service().advanced_search(criteria)
    logger.info(
        f"Advanced search returned {len(employees)} employees",
        extra={"context": {"criteria": dataclasses.asdict(criteria)}},
    )
    return api_response(
        serialize_employees(employees), headers={"X-Total-Count": len(employees)}
    )


@search_bp.route("/departments", methods=["GET"])
@limiter.limit(READ_LIMIT)
def list_departments():
    return api_response(get_employee_service().list_departments())
