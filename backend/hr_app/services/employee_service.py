"""
Employee service for business logic following SOLID principles.

This service:
- Keeps business rules separate from controllers and repositories (Single Responsibility)
- Depends on the repository abstraction, not a concrete storage (Dependency Inversion)
- Is the only layer allowed to reject a request on business grounds
- Works with immutable domain entities: updates always save a new value
"""

import logging
from typing import List, Optional

from hr_app.core.exceptions import EmployeeNotFoundError, ValidationError
from hr_app.domain.entities import Employee, SearchCriteria
from hr_app.domain.interfaces import IEmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Application service for employee use-cases."""

    MIN_SALARY = 30000.0
    MAX_SALARY = 500000.0
    STANDARD_RAISE_PERCENTAGE = 0.05
    HIGH_PERFORMER_THRESHOLD = 80000.0

    def __init__(self, employee_repo: IEmployeeRepository) -> None:
        self.employee_repo = employee_repo

    # ========== BASIC OPERATIONS (delegating to repository) ==========

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employee_repo.find_by_id(employee_id)

    def find_all(self) -> List[Employee]:
        return self.employee_repo.find_all()

    def exists_by_id(self, employee_id: int) -> bool:
        return self.employee_repo.exists_by_id(employee_id)

    def count(self) -> int:
        return self.employee_repo.count()

    def find_by_department(self, department: str) -> List[Employee]:
        return self.employee_repo.find_by_department(department)

    def search_employees(
        self, department: Optional[str] = None, min_salary: Optional[float] = None
    ) -> List[Employee]:
        """Filter by department and salary floor.

        Business Rules:
        - A missing or non-positive ``min_salary`` falls back to MIN_SALARY
        """
        effective_min = (
            min_salary if min_salary is not None and min_salary > 0 else self.MIN_SALARY
        )
        return self.employee_repo.find_by_department_and_salary_at_least(
            department, effective_min
        )

    def advanced_search(self, criteria: SearchCriteria) -> List[Employee]:
        return [e for e in self.employee_repo.find_all() if criteria.matches(e)]

    def search_by_name(self, fragment: str) -> List[Employee]:
        return self.advanced_search(SearchCriteria(name_contains=fragment))

    def list_departments(self) -> List[str]:
        return sorted({e.department for e in self.employee_repo.find_all()})

    # ========== BUSINESS OPERATIONS ==========

    def save(self, employee: Employee) -> Employee:
        """Create when the employee has no id yet, otherwise update."""
        if employee.id is None:
            return self.process_new_hire(employee)
        return self.update_employee(employee.id, employee)

    def process_new_hire(self, employee: Employee) -> Employee:
        logger.info(f"Processing new hire: {employee.name}")
        self._validate_salary_range(employee.salary)

        saved = self.employee_repo.save(employee)
        logger.info(
            f"Successfully hired employee {saved.name} with ID: {saved.id} "
            f"in {saved.department} department"
        )
        return saved

    def update_employee(self, employee_id: int, employee: Employee) -> Employee:
        logger.info(f"Updating employee ID: {employee_id}")
        if not self.employee_repo.exists_by_id(employee_id):
            raise EmployeeNotFoundError(employee_id)

        updated = employee.with_id(employee_id)
        self._validate_salary_range(updated.salary)
        return self.employee_repo.save(updated)

    def give_raise(self, employee_id: int, amount: float) -> Employee:
        """Increase salary by ``amount``.

        Business Rules:
        - The raise must be strictly positive
        - The resulting salary may not exceed MAX_SALARY
        """
        logger.info(f"Processing raise of ${amount} for employee ID: {employee_id}")
        employee = self._get_existing(employee_id)

        if amount <= 0:
            raise ValidationError("Raise amount must be positive")

        new_salary = employee.salary + amount
        if new_salary > self.MAX_SALARY:
            raise ValidationError(
                f"New salary {new_salary:.2f} exceeds maximum of {self.MAX_SALARY:.2f}"
            )

        saved = self.employee_repo.save(employee.with_salary(new_salary))
        logger.info(
            f"Employee {employee.name} received raise: "
            f"${employee.salary} -> ${new_salary}"
        )
        return saved

    def give_standard_raise(self, employee_id: int) -> Employee:
        employee = self._get_existing(employee_id)
        amount = employee.salary * self.STANDARD_RAISE_PERCENTAGE
        return self.give_raise(employee_id, amount)

    def transfer_employee(self, employee_id: int, new_department: str) -> Employee:
        logger.info(
            f"Transferring employee ID: {employee_id} to {new_department} department"
        )
        employee = self._get_existing(employee_id)

        if new_department is None or not new_department.strip():
            raise ValidationError("Department cannot be null or empty")
        new_department = new_department.strip()

        if employee.department.lower() == new_department.lower():
            raise ValidationError(
                f"Employee is already in {new_department} department"
            )

        saved = self.employee_repo.save(employee.with_department(new_department))
        logger.info(
            f"Successfully transferred {employee.name} from "
            f"{employee.department} to {new_department} department"
        )
        return saved

    def find_high_performers(self) -> List[Employee]:
        high_performers = self.employee_repo.find_by_salary_at_least(
            self.HIGH_PERFORMER_THRESHOLD
        )
        logger.info(f"Found {len(high_performers)} high-performing employees")
        return high_performers

    def calculate_department_salary_expense(self, department: str) -> float:
        employees = self.employee_repo.find_by_department(department)
        total = sum(e.salary for e in employees)
        logger.info(
            f"{department} department has {len(employees)} employees "
            f"with total salary expense: ${total}"
        )
        return total

    def terminate_employee(self, employee_id: int) -> None:
        employee = self._get_existing(employee_id)
        logger.warning(
            f"Terminating employee: {employee.name} from {employee.department} department"
        )
        self.employee_repo.delete_by_id(employee_id)
        logger.info(f"Employee termination completed for ID: {employee_id}")

    # ========== TEST SUPPORT ==========

    def delete_all(self) -> None:
        logger.warning("Deleting all employees - this should only be used in tests!")
        self.employee_repo.delete_all()

    # ========== PRIVATE HELPERS ==========

    def _get_existing(self, employee_id: int) -> Employee:
        employee = self.employee_repo.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _validate_salary_range(self, salary: float) -> None:
        if salary < self.MIN_SALARY or salary > self.MAX_SALARY:
            raise ValidationError(
                f"Salary {salary:.2f} must be between "
                f"{self.MIN_SALARY:.2f} and {self.MAX_SALARY:.2f}"
            )
