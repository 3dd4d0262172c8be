import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask

from hr_app.controllers import SERVICE_EXTENSION_KEY
from hr_app.controllers.employee_controller import employees_bp
from hr_app.controllers.search_controller import search_bp
from hr_app.core.config import load_settings
from hr_app.core.error_handlers import register_error_handlers
from hr_app.core.limiter_config import limiter
from hr_app.core.logging_config import setup_logging
from hr_app.db.seed import seed_sample_employees
from hr_app.domain.interfaces import IEmployeeRepository
from hr_app.repositories.employee_repo import InMemoryEmployeeRepository
from hr_app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)


def create_app(
    config_overrides: Optional[Dict[str, Any]] = None,
    repository: Optional[IEmployeeRepository] = None,
    service: Optional[EmployeeService] = None,
) -> Flask:
    """
    Application factory.

    Args:
        config_overrides: Values applied on top of the environment settings
        repository: Storage to use; a fresh in-memory store when omitted
        service: Fully built service, takes precedence over ``repository``

    Returns:
        Configured Flask app with the employee and search blueprints.
    """
    load_dotenv()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config.update(load_settings())
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(
        app,
        log_level=app.config["LOG_LEVEL"],
        log_to_file=app.config["LOG_TO_FILE"],
        use_json_format=app.config["LOG_JSON"],
    )

    if service is None:
        if repository is None:
            repository = InMemoryEmployeeRepository()
        if app.config["SEED_SAMPLE_DATA"]:
            seed_sample_employees(repository)
        service = EmployeeService(repository)
    app.extensions[SERVICE_EXTENSION_KEY] = service

    limiter.init_app(app)
    register_error_handlers(app)

    app.register_blueprint(employees_bp)
    app.register_blueprint(search_bp)

    logger.info(
        "Application created",
        extra={
            "context": {
                "testing": app.config["TESTING"],
                "rate_limit_enabled": app.config["RATELIMIT_ENABLED"],
                "seed_sample_data": app.config["SEED_SAMPLE_DATA"],
            }
        },
    )
    return app
