from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    async def upsert_attendance(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        """Create the record for (employee, day) or overwrite its status, keeping its id."""

        raise NotImplementedError

    async def list_attendance(self, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        """Newest day first; all employees when ``employee_id`` is None."""

        raise NotImplementedError
