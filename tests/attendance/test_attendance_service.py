from __future__ import annotations

import asyncio
from datetime import date

import pytest

from personnel_console.attendance.service import AttendanceService
from personnel_console.core.enums import AttendanceStatus, Department, TodayStatus
from personnel_console.core.exceptions import NotFoundError, ValidationError


async def _seed_jane(store):
    jane = await store.add_employee(full_name="Jane Doe", address="123 Maple Street", department=Department.ENGINEERING)
    await store.upsert_attendance(employee_id=jane.employee_id, work_date=date(2024, 7, 20), status=AttendanceStatus.PRESENT)
    await store.upsert_attendance(employee_id=jane.employee_id, work_date=date(2024, 7, 21), status=AttendanceStatus.ABSENT)
    return jane


def test_remarking_a_day_updates_instead_of_duplicating(store):
    svc = AttendanceService(store, store)

    async def scenario():
        jane = await _seed_jane(store)
        record = await svc.mark_attendance(jane.employee_id, "2024-07-21", "late")
        return record, await svc.history(jane.employee_id)

    record, history = asyncio.run(scenario())

    assert record.status == AttendanceStatus.LATE
    assert len(history) == 2
    assert {r.work_date: r.status for r in history} == {
        date(2024, 7, 20): AttendanceStatus.PRESENT,
        date(2024, 7, 21): AttendanceStatus.LATE,
    }


def test_mark_attendance_rejects_bad_status(store):
    svc = AttendanceService(store, store)

    async def scenario():
        jane = await _seed_jane(store)
        await svc.mark_attendance(jane.employee_id, date(2024, 7, 22), "sick")

    with pytest.raises(ValidationError) as exc:
        asyncio.run(scenario())
    assert "status" in exc.value.errors


def test_mark_attendance_rejects_bad_date(store):
    svc = AttendanceService(store, store)

    async def scenario():
        jane = await _seed_jane(store)
        await svc.mark_attendance(jane.employee_id, "21/07/2024", AttendanceStatus.PRESENT)

    with pytest.raises(ValidationError) as exc:
        asyncio.run(scenario())
    assert "date" in exc.value.errors


def test_mark_attendance_unknown_employee(store):
    svc = AttendanceService(store, store)
    with pytest.raises(NotFoundError):
        asyncio.run(svc.mark_attendance("ghost", date(2024, 7, 22), AttendanceStatus.PRESENT))


def test_today_overview_reports_unmarked(store, fixed_today):
    svc = AttendanceService(store, store)

    async def scenario():
        jane = await _seed_jane(store)
        john = await store.add_employee(full_name="John Smith", address="456 Oak Avenue", department=Department.MARKETING)
        return jane, john, await svc.today_overview(today=fixed_today)

    jane, john, rows = asyncio.run(scenario())

    assert [r.employee_id for r in rows] == [jane.employee_id, john.employee_id]
    assert rows[0].status == TodayStatus.ABSENT
    assert rows[1].status == TodayStatus.UNMARKED
    assert rows[1].status.value == "Not Marked"
