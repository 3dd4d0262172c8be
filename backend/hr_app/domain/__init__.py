"""
Domain package - Pure business representation.

This package contains:
- entities.py: Immutable domain values (Employee, SearchCriteria)
- interfaces.py: Repository contracts
"""

from .entities import Employee, SearchCriteria
from .interfaces import IEmployeeReader, IEmployeeRepository, IEmployeeWriter

__all__ = [
    "Employee",
    "SearchCriteria",
    "IEmployeeRepository",
    "IEmployeeReader",
    "IEmployeeWriter",
]
