from __future__ import annotations

import logging
from typing import Optional, Sequence

from .forms import parse_employee_form
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    async def create_employee(self, *, full_name: str, address: str, department: str) -> Employee:
        form = parse_employee_form(full_name=full_name, address=address, department=department)
        employee = await self._employees.add_employee(
            full_name=form.full_name,
            address=form.address,
            department=form.department,
        )
        logger.info("Created employee %s (%s)", employee.employee_id, employee.department.value)
        return employee

    async def list_employees(self) -> Sequence[Employee]:
        return await self._employees.list_employees()

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        return await self._employees.get_employee(employee_id)

    async def delete_employee(self, employee_id: str) -> None:
        """Deleting an unknown id is a no-op."""
        if not await self._employees.delete_employee(employee_id):
            logger.debug("Delete skipped, employee %s does not exist", employee_id)
