from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus, Department, TodayStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance status per employee per day."""

    attendance_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class TodayAttendanceRow:
    """Read-model for the organization-wide view of a single day."""

    employee_id: str
    full_name: str
    department: Department
    avatar_url: str
    status: TodayStatus

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "fullName": self.full_name,
            "department": self.department.value,
            "avatarUrl": self.avatar_url,
            "status": self.status.value,
        }
