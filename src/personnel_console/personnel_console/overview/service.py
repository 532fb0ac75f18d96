from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord, TodayAttendanceRow
from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..core.constants import DEFAULT_RECENT_REVIEWS
from ..core.enums import Department, TodayStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..insights.model import AIInsight
from ..insights.repository import InsightRepository
from ..reviews.model import PerformanceReview
from ..reviews.repository import ReviewRepository


@dataclass(frozen=True)
class EmployeeDetail:
    """Read-model for the employee detail view."""

    employee: Employee
    attendance: list[AttendanceRecord]
    latest_attendance: Optional[AttendanceRecord]
    recent_reviews: list[PerformanceReview]
    insights: list[AIInsight]

    def to_dict(self) -> dict:
        return {
            "employee": self.employee.to_dict(),
            "attendance": [a.to_dict() for a in self.attendance],
            "latestAttendance": self.latest_attendance.to_dict() if self.latest_attendance else None,
            "recentReviews": [r.to_dict() for r in self.recent_reviews],
            "insights": [i.to_dict() for i in self.insights],
        }


@dataclass(frozen=True)
class DashboardData:
    total_employees: int
    by_department: dict[str, int]
    today: dict[str, int]

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "byDepartment": dict(self.by_department),
            "today": dict(self.today),
        }


class OverviewService:
    """Read-only aggregations over the store. Nothing is cached."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        reviews: ReviewRepository,
        insights: InsightRepository,
        *,
        recent_reviews: int = DEFAULT_RECENT_REVIEWS,
    ):
        self._employees = employees
        self._attendance = attendance
        self._reviews = reviews
        self._insights = insights
        self._attendance_service = AttendanceService(attendance, employees)
        self._recent_reviews = int(recent_reviews)

    async def employee_detail(self, employee_id: str) -> Optional[EmployeeDetail]:
        employee = await self._employees.get_employee(employee_id)
        if not employee:
            return None

        attendance = list(await self._attendance.list_attendance(employee_id))
        reviews = list(await self._reviews.list_reviews(employee_id))
        insights = list(await self._insights.list_insights(employee_id))

        return EmployeeDetail(
            employee=employee,
            attendance=attendance,
            latest_attendance=attendance[0] if attendance else None,
            recent_reviews=reviews[: self._recent_reviews],
            insights=insights,
        )

    async def attendance_today(self, *, today: Optional[date] = None) -> list[TodayAttendanceRow]:
        return await self._attendance_service.today_overview(today=today)

    async def dashboard(self, *, today: Optional[date] = None) -> DashboardData:
        rows = await self.attendance_today(today=today)

        departments = Counter(r.department for r in rows)
        statuses = Counter(r.status for r in rows)

        return DashboardData(
            total_employees=len(rows),
            by_department={d.value: departments.get(d, 0) for d in Department},
            today={s.value: statuses.get(s, 0) for s in TodayStatus},
        )
