"""
Central pytest configuration for the HR employee service tests.

Provides markers plus fixtures for a fresh repository, service and Flask
app per test so no state leaks between tests.
"""

import logging
import os
from unittest.mock import Mock

import pytest

# Set before the app reads its settings
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["LOG_TO_FILE"] = "0"
os.environ["SEED_SAMPLE_DATA"] = "0"

from hr_app.domain.entities import Employee  # noqa: E402
from hr_app.main import create_app  # noqa: E402
from hr_app.repositories.employee_repo import InMemoryEmployeeRepository  # noqa: E402
from hr_app.services.employee_service import EmployeeService  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "logging: mark test as logging-related")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        if "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)


# =====================================================
# DOMAIN FIXTURES
# =====================================================


@pytest.fixture
def repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def service(repository) -> EmployeeService:
    return EmployeeService(repository)


@pytest.fixture
def sample_employees(repository):
    """Four persisted employees across two departments."""
    return [
        repository.save(Employee(name="John Doe", department="Engineering", salary=75000.0)),
        repository.save(Employee(name="Jane Smith", department="Marketing", salary=65000.0)),
        repository.save(Employee(name="Bob Johnson", department="Engineering", salary=80000.0)),
        repository.save(Employee(name="Eve Adams", department="Engineering", salary=50000.0)),
    ]


# =====================================================
# FLASK FIXTURES
# =====================================================


@pytest.fixture
def app(repository):
    """App wired to the per-test repository."""
    return create_app({"TESTING": True}, repository=repository)


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def mock_service() -> Mock:
    mock = Mock(spec=EmployeeService)
    mock.STANDARD_RAISE_PERCENTAGE = EmployeeService.STANDARD_RAISE_PERCENTAGE
    return mock


@pytest.fixture
def mock_client(mock_service):
    """Client for an app whose service is a Mock, for controller unit tests."""
    app = create_app({"TESTING": True}, service=mock_service)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_logging():
    """create_app() reconfigures the root logger; restore it after each test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
