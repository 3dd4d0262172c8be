# Controllers package: HTTP blueprints and service lookup helpers

from flask import current_app

from hr_app.services.employee_service import EmployeeService

SERVICE_EXTENSION_KEY = "employee_service"


def get_employee_service() -> EmployeeService:
    """Service instance wired into the current app by create_app()."""
    return current_app.extensions[SERVICE_EXTENSION_KEY]
