from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Department


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, immutable once created. The store never updates it in place.
    """

    employee_id: str
    full_name: str
    address: str
    department: Department
    avatar_url: str

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "fullName": self.full_name,
            "address": self.address,
            "department": self.department.value,
            "avatarUrl": self.avatar_url,
        }
