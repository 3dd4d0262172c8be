"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces define the storage contract without implementation details,
enabling dependency injection and easier testing. Absence is never an
error at this level: lookups return ``None`` or an empty list.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Employee


class IEmployeeReader(ABC):
    """Interface for employee read operations."""

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID, ``None`` when absent."""
        pass

    @abstractmethod
    def find_all(self) -> List[Employee]:
        """Snapshot of every stored employee."""
        pass

    @abstractmethod
    def find_by_department(self, department: str) -> List[Employee]:
        """Employees whose department matches, ignoring case."""
        pass

    @abstractmethod
    def find_by_salary_at_least(self, min_salary: float) -> List[Employee]:
        """Employees earning ``min_salary`` or more."""
        pass

    @abstractmethod
    def find_by_department_and_salary_at_least(
        self, department: Optional[str], min_salary: Optional[float]
    ) -> List[Employee]:
        """Combined filter; a ``None`` argument does not constrain."""
        pass

    @abstractmethod
    def exists_by_id(self, employee_id: int) -> bool:
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class IEmployeeWriter(ABC):
    """Interface for employee write operations."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert when ``employee.id`` is None, otherwise overwrite."""
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee; no-op when absent."""
        pass

    @abstractmethod
    def delete_all(self) -> None:
        """Clear storage and reset id generation. Test support only."""
        pass


class IEmployeeRepository(IEmployeeReader, IEmployeeWriter):
    """Complete employee repository interface combining read/write operations."""

    pass
