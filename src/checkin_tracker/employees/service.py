from __future__ import annotations

import logging
from typing import Optional, Sequence
from urllib.parse import quote

from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.constants import EMPLOYEE_NUMBER_PREFIX, EMPLOYEE_NUMBER_WIDTH
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def format_employee_number(sequence: int) -> str:
    return f"{EMPLOYEE_NUMBER_PREFIX}{sequence:0{EMPLOYEE_NUMBER_WIDTH}d}"


def avatar_url(name: str) -> str:
    return f"https://ui-avatars.com/api/?name={quote(name)}&background=random&color=fff"


class RosterService:
    """Use case: read and grow the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.load_employees()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        for employee in self._employees.load_employees():
            if employee.id == employee_id:
                return employee
        return None

    def require_employee(self, employee_id: str) -> Employee:
        employee = self.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def search(self, term: str, employees: Optional[Sequence[Employee]] = None) -> list[Employee]:
        """Case-insensitive match on name or employee number; blank term returns everything."""
        pool = list(employees if employees is not None else self._employees.load_employees())
        needle = (term or "").strip().lower()
        if not needle:
            return pool
        return [e for e in pool if needle in e.name.lower() or needle in e.employee_number.lower()]

    def add_employee(self, name: str, department: str, employee_number: Optional[str] = None) -> Employee:
        name = require_non_empty(name, "Name")
        department = require_non_empty(department, "Department")

        with self._employees.locked():
            roster = list(self._employees.load_employees())
            number = (employee_number or "").strip() or self._next_employee_number(roster)

            employee = Employee(
                id=new_id(),
                name=name,
                employee_number=number,
                department=department,
                avatar=avatar_url(name),
            )
            self._employees.save_employees([*roster, employee])

        logger.info("Added employee %s (%s) to %s", employee.employee_number, employee.id, department)
        return employee

    @staticmethod
    def _next_employee_number(roster: Sequence[Employee]) -> str:
        # Sequence follows roster size; skip forward if a hand-entered number already took it.
        taken = {e.employee_number for e in roster}
        sequence = len(roster) + 1
        while format_employee_number(sequence) in taken:
            sequence += 1
        return format_employee_number(sequence)
