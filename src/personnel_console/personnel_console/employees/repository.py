from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Department
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    async def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    async def add_employee(self, *, full_name: str, address: str, department: Department) -> Employee:
        raise NotImplementedError

    async def delete_employee(self, employee_id: str) -> bool:
        """Remove the employee and every record that references it."""

        raise NotImplementedError
