from __future__ import annotations

from app.core.errors import EmployeeNotFoundError
from app.core.locking import ReadWriteLock
from app.models.employee import Employee


class EmployeeStore:
    """In-memory employee records keyed by id.

    Records are copied on the way in and on the way out, so callers never
    hold a reference to stored state. Mutations take the write lock, reads
    take the read lock for their whole duration.
    """

    def __init__(self) -> None:
        self.lock = ReadWriteLock()
        self._employees: dict[int, Employee] = {}

    def create(self, employee: Employee) -> None:
        with self.lock.write_locked():
            self._employees[employee.id] = employee.model_copy()

    def get_by_id(self, employee_id: int) -> Employee:
        with self.lock.read_locked():
            employee = self._employees.get(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            return employee.model_copy()

    def update(self, employee_id: int, employee: Employee) -> None:
        with self.lock.write_locked():
            if employee_id not in self._employees:
                raise EmployeeNotFoundError(employee_id)
            self._employees[employee_id] = employee.model_copy()

    def delete(self, employee_id: int) -> None:
        with self.lock.write_locked():
            if employee_id not in self._employees:
                raise EmployeeNotFoundError(employee_id)
            del self._employees[employee_id]

    def list(self, page: int, page_size: int) -> list[Employee]:
        """Return one page of employees ordered by ascending id.

        Out-of-range bounds are clamped rather than rejected: a start offset
        that is negative or past the end falls back to 0, so ``page <= 0``
        and overrunning pages both read from the first record.
        """
        with self.lock.read_locked():
            employees = sorted(self._employees.values(), key=lambda e: e.id)
            total = len(employees)

            start = (page - 1) * page_size
            end = page * page_size
            if start < 0 or start >= total:
                start = 0
            if end > total:
                end = total
            if start > total:
                start = total
            if end < 0:
                end = 0

            return [e.model_copy() for e in employees[start:end]]
