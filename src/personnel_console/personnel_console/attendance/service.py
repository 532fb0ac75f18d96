from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Union

from ..common.datetime_utils import coerce_date, today_local
from ..common.validators import parse_choice
from ..core.enums import AttendanceStatus, TodayStatus
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, TodayAttendanceRow
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    async def mark_attendance(
        self,
        employee_id: str,
        work_date: Union[date, str],
        status: Union[AttendanceStatus, str],
    ) -> AttendanceRecord:
        """Set the status for one day. Marking the same day again overwrites it."""
        day = coerce_date(work_date)
        status = parse_choice(status, AttendanceStatus, "status")
        return await self._attendance.upsert_attendance(employee_id=employee_id, work_date=day, status=status)

    async def history(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return await self._attendance.list_attendance(employee_id)

    async def today_overview(self, *, today: Optional[date] = None) -> list[TodayAttendanceRow]:
        today = today or today_local()
        employees = await self._employees.list_employees()
        records = await self._attendance.list_attendance()

        by_employee = {r.employee_id: r for r in records if r.work_date == today}

        rows = []
        for e in employees:
            rec = by_employee.get(e.employee_id)
            rows.append(
                TodayAttendanceRow(
                    employee_id=e.employee_id,
                    full_name=e.full_name,
                    department=e.department,
                    avatar_url=e.avatar_url,
                    status=TodayStatus(rec.status.value) if rec else TodayStatus.UNMARKED,
                )
            )
        return rows
