from __future__ import annotations

import logging

from app.core.errors import EmployeeNotFoundError
from app.models.employee import Employee
from app.repositories.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    Employee(id=1, name="John Doe", position="Software Engineer", salary=75000),
    Employee(id=2, name="Jane Smith", position="Product Manager", salary=90000),
    Employee(id=3, name="Michael Johnson", position="Data Scientist", salary=85000),
]


class EmployeeService:
    """Entry point the HTTP layer uses to reach the employee store.

    Not-found errors from the store are logged and re-raised unchanged.
    """

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def seed_sample_employees(self) -> None:
        for employee in SAMPLE_EMPLOYEES:
            self.store.create(employee)
        logger.info("Seeded %d sample employees", len(SAMPLE_EMPLOYEES))

    def list_employees(self, page: int, page_size: int) -> list[Employee]:
        employees = self.store.list(page, page_size)
        logger.debug("Listed %d employees (page=%d, page_size=%d)", len(employees), page, page_size)
        return employees

    def create_employee(self, employee: Employee) -> None:
        self.store.create(employee)
        logger.info("Stored employee %d", employee.id)

    def get_employee(self, employee_id: int) -> Employee:
        try:
            return self.store.get_by_id(employee_id)
        except EmployeeNotFoundError:
            logger.warning("Lookup for missing employee %d", employee_id)
            raise

    def update_employee(self, employee_id: int, employee: Employee) -> None:
        try:
            self.store.update(employee_id, employee)
        except EmployeeNotFoundError:
            logger.warning("Update for missing employee %d", employee_id)
            raise
        logger.info("Updated employee %d", employee_id)

    def delete_employee(self, employee_id: int) -> None:
        try:
            self.store.delete(employee_id)
        except EmployeeNotFoundError:
            logger.warning("Delete for missing employee %d", employee_id)
            raise
        logger.info("Deleted employee %d", employee_id)
