"""
Domain entities - Pure business values, no framework dependencies.

Entities are immutable: every change produces a new value through one of
the ``with_*`` helpers, the original is never touched.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DEPARTMENT_MIN_LENGTH = 2
DEPARTMENT_MAX_LENGTH = 50
SALARY_FLOOR = 0.0
SALARY_CEILING = 1_000_000.0


@dataclass(frozen=True)
class Employee:
    """Domain entity representing an employee record.

    An employee without ``id`` is a pending new-hire request; the
    repository assigns the id on first save.
    """

    name: str
    department: str
    salary: float
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, employee_id: int) -> "Employee":
        return replace(self, id=employee_id)

    def with_salary(self, salary: float) -> "Employee":
        return replace(self, salary=salary)

    def with_department(self, department: str) -> "Employee":
        return replace(self, department=department)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "salary": self.salary,
        }


@dataclass(frozen=True)
class SearchCriteria:
    """Optional filters for an advanced search. ``None`` means no constraint."""

    department: Optional[str] = None
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    name_contains: Optional[str] = None

    def matches(self, employee: Employee) -> bool:
        if (
            self.department is not None
            and employee.department.lower() != self.department.lower()
        ):
            return False
        if self.min_salary is not None and employee.salary < self.min_salary:
            return False
        if self.max_salary is not None and employee.salary > self.max_salary:
            return False
        if (
            self.name_contains is not None
            and self.name_contains.lower() not in employee.name.lower()
        ):
            return False
        return True
