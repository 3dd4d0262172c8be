"""
Sample data seeding.

Fills an empty repository with the demo employees so a freshly started
development server has something to show.
"""

import logging

from hr_app.domain.entities import Employee
from hr_app.domain.interfaces import IEmployeeRepository

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = (
    Employee(name="John Doe", department="Engineering", salary=75000.0),
    Employee(name="Jane Smith", department="Marketing", salary=65000.0),
    Employee(name="Bob Johnson", department="Engineering", salary=80000.0),
    Employee(name="Alice Wilson", department="Sales", salary=70000.0),
    Employee(name="Charlie Brown", department="HR", salary=60000.0),
)


def seed_sample_employees(repository: IEmployeeRepository) -> int:
    """
    Insert the sample employees when the repository is empty.

    This function is idempotent: a repository that already holds data is
    left untouched.

    Returns:
        Number of employees inserted.
    """
    if repository.count() > 0:
        logger.info(
            "Skipping sample data, repository already populated",
            extra={"context": {"employee_count": repository.count()}},
        )
        return 0

    for employee in SAMPLE_EMPLOYEES:
        repository.save(employee)

    logger.info(
        "Sample employees seeded",
        extra={"context": {"employee_count": len(SAMPLE_EMPLOYEES)}},
    )
    return len(SAMPLE_EMPLOYEES)
