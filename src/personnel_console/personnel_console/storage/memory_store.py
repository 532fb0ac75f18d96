from __future__ import annotations

import asyncio
import logging
import random
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_utc, today_local
from ..common.validators import parse_choice
from ..core.constants import AVATAR_URLS, DEFAULT_STORE_LATENCY_MS
from ..core.enums import AttendanceStatus, Department
from ..core.exceptions import InvariantViolation, NotFoundError
from ..employees.model import Employee
from ..insights.model import AIInsight, InsightPayload
from ..reviews.model import PerformanceReview

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class InMemoryEntityStore:
    """Volatile store owning employees, attendance, reviews and insights.

    Implements EmployeeRepository, AttendanceRepository, ReviewRepository and InsightRepository.

    Every coroutine awaits the simulated latency first and then mutates without suspending,
    so no caller can observe a half-applied change (e.g. an employee deleted but its
    attendance still present). There is no locking: racing upserts on the same
    (employee, day) resolve last-write-wins.
    """

    def __init__(self, *, latency_ms: int = DEFAULT_STORE_LATENCY_MS, rng: Optional[random.Random] = None):
        self._latency = max(0, int(latency_ms)) / 1000.0
        self._rng = rng or random.Random()
        self._employees: dict[str, Employee] = {}
        self._attendance: list[AttendanceRecord] = []
        self._reviews: list[PerformanceReview] = []
        self._insights: list[AIInsight] = []

    async def _io(self) -> None:
        if self._latency:
            await asyncio.sleep(self._latency)

    def _require_employee(self, employee_id: str) -> None:
        if employee_id not in self._employees:
            raise NotFoundError(f"Employee {employee_id} not found")

    def clear(self) -> None:
        self._employees.clear()
        self._attendance.clear()
        self._reviews.clear()
        self._insights.clear()

    # Employees
    async def list_employees(self) -> Sequence[Employee]:
        await self._io()
        return list(self._employees.values())

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        await self._io()
        return self._employees.get(employee_id)

    async def add_employee(
        self,
        *,
        full_name: str,
        address: str,
        department: Department,
        employee_id: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Employee:
        department = parse_choice(department, Department, "department")
        await self._io()

        employee = Employee(
            employee_id=employee_id or _new_id(),
            full_name=full_name,
            address=address,
            department=department,
            avatar_url=avatar_url or self._rng.choice(AVATAR_URLS),
        )
        if employee.employee_id in self._employees:
            raise InvariantViolation(f"Duplicate employee id {employee.employee_id}")
        self._employees[employee.employee_id] = employee
        return employee

    async def delete_employee(self, employee_id: str) -> bool:
        await self._io()
        removed = self._employees.pop(employee_id, None)
        if removed is None:
            return False

        self._attendance = [a for a in self._attendance if a.employee_id != employee_id]
        self._reviews = [r for r in self._reviews if r.employee_id != employee_id]
        self._insights = [i for i in self._insights if i.employee_id != employee_id]
        logger.info("Deleted employee %s with dependent records", employee_id)
        return True

    # Attendance
    async def upsert_attendance(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> AttendanceRecord:
        status = parse_choice(status, AttendanceStatus, "status")
        await self._io()
        self._require_employee(employee_id)

        matches = [
            idx
            for idx, rec in enumerate(self._attendance)
            if rec.employee_id == employee_id and rec.work_date == work_date
        ]
        if len(matches) > 1:
            logger.critical("Found %d attendance records for employee %s on %s", len(matches), employee_id, work_date)
            raise InvariantViolation(f"Duplicate attendance for employee {employee_id} on {work_date.isoformat()}")

        if matches:
            idx = matches[0]
            record = replace(self._attendance[idx], status=status)
            self._attendance[idx] = record
            return record

        record = AttendanceRecord(attendance_id=_new_id(), employee_id=employee_id, work_date=work_date, status=status)
        self._attendance.append(record)
        return record

    async def list_attendance(self, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        await self._io()
        items = [a for a in self._attendance if employee_id is None or a.employee_id == employee_id]
        items.sort(key=lambda a: a.work_date, reverse=True)
        return items

    # Reviews
    async def add_review(self, *, employee_id: str, summary: str, review_date: Optional[date] = None) -> PerformanceReview:
        await self._io()
        self._require_employee(employee_id)

        review = PerformanceReview(
            review_id=_new_id(),
            employee_id=employee_id,
            review_date=review_date or today_local(),
            summary=summary,
        )
        self._reviews.append(review)
        return review

    async def list_reviews(self, employee_id: str) -> Sequence[PerformanceReview]:
        await self._io()
        items = [r for r in self._reviews if r.employee_id == employee_id]
        items.sort(key=lambda r: r.review_date, reverse=True)
        return items

    # Insights
    async def add_insight(self, *, employee_id: str, payload: InsightPayload, created_at: Optional[datetime] = None) -> AIInsight:
        await self._io()
        self._require_employee(employee_id)

        insight = AIInsight(
            insight_id=_new_id(),
            employee_id=employee_id,
            summary=payload.summary,
            insights=tuple(payload.insights),
            areas_for_development=tuple(payload.areas_for_development),
            created_at=created_at or now_utc(),
        )
        self._insights.append(insight)
        return insight

    async def list_insights(self, employee_id: str) -> Sequence[AIInsight]:
        await self._io()
        items = [i for i in self._insights if i.employee_id == employee_id]
        items.sort(key=lambda i: i.created_at, reverse=True)
        return items
