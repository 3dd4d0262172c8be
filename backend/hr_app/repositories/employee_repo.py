import itertools
import logging
import threading
from typing import Dict, List, Optional

from hr_app.domain.entities import Employee
from hr_app.domain.interfaces import IEmployeeRepository

logger = logging.getLogger(__name__)

FIRST_EMPLOYEE_ID = 1


class InMemoryEmployeeRepository(IEmployeeRepository):
    """Thread-safe, process-lifetime employee storage.

    Single-key reads and writes are atomic. Read-modify-write sequences
    spanning several calls are not, callers that need that must serialize
    themselves.
    """

    def __init__(self):
        self._employees: Dict[int, Employee] = {}
        self._lock = threading.Lock()
        self._id_sequence = itertools.count(FIRST_EMPLOYEE_ID)

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            employee = self._employees.get(employee_id)
        if employee is None:
            logger.debug(f"Employee with ID {employee_id} not found")
        return employee

    def find_all(self) -> List[Employee]:
        with self._lock:
            return list(self._employees.values())

    def find_by_department(self, department: str) -> List[Employee]:
        wanted = department.lower()
        results = [e for e in self.find_all() if e.department.lower() == wanted]
        logger.debug(f"Found {len(results)} employees in {department} department")
        return results

    def find_by_salary_at_least(self, min_salary: float) -> List[Employee]:
        return [e for e in self.find_all() if e.salary >= min_salary]

    def find_by_department_and_salary_at_least(
        self, department: Optional[str], min_salary: Optional[float]
    ) -> List[Employee]:
        results = self.find_all()
        if department is not None:
            wanted = department.lower()
            results = [e for e in results if e.department.lower() == wanted]
        if min_salary is not None:
            results = [e for e in results if e.salary >= min_salary]
        logger.debug(
            f"Found {len(results)} employees for department={department!r}, "
            f"min_salary={min_salary}"
        )
        return results

    def save(self, employee: Employee) -> Employee:
        with self._lock:
            if employee.id is None:
                employee = employee.with_id(next(self._id_sequence))
                logger.debug(f"Creating new employee with ID: {employee.id}")
            else:
                logger.debug(f"Updating employee with ID: {employee.id}")
            self._employees[employee.id] = employee
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        with self._lock:
            removed = self._employees.pop(employee_id, None)
        if removed is None:
            logger.debug(f"Cannot delete - employee with ID {employee_id} not found")

    def exists_by_id(self, employee_id: int) -> bool:
        with self._lock:
            return employee_id in self._employees

    def count(self) -> int:
        with self._lock:
            return len(self._employees)

    def delete_all(self) -> None:
        logger.warning("Deleting all employees - this should only be used in tests!")
        with self._lock:
            self._employees.clear()
            self._id_sequence = itertools.count(FIRST_EMPLOYEE_ID)
