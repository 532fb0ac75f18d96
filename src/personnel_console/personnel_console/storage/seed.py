from __future__ import annotations

import logging
from datetime import date

from ..core.constants import AVATAR_URLS
from ..core.enums import AttendanceStatus, Department
from .memory_store import InMemoryEntityStore

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    ("1", "Jane Doe", "123 Maple Street, Springfield", Department.ENGINEERING),
    ("2", "John Smith", "456 Oak Avenue, Metropolis", Department.MARKETING),
    ("3", "Alice Johnson", "789 Pine Lane, Gotham", Department.SALES),
)

DEMO_ATTENDANCE = (
    ("1", date(2024, 7, 20), AttendanceStatus.PRESENT),
    ("1", date(2024, 7, 21), AttendanceStatus.ABSENT),
    ("2", date(2024, 7, 20), AttendanceStatus.PRESENT),
)

DEMO_REVIEWS = (
    ("1", date(2024, 6, 1), "Exceeded expectations on the recent project, showing great leadership."),
)


async def seed_demo_data(store: InMemoryEntityStore) -> None:
    """Load a few demo employees with some history. Skips ids that already exist."""
    created = 0
    for idx, (employee_id, full_name, address, department) in enumerate(DEMO_EMPLOYEES):
        if await store.get_employee(employee_id):
            continue
        await store.add_employee(
            employee_id=employee_id,
            full_name=full_name,
            address=address,
            department=department,
            avatar_url=AVATAR_URLS[idx % len(AVATAR_URLS)],
        )
        created += 1

    for employee_id, work_date, status in DEMO_ATTENDANCE:
        await store.upsert_attendance(employee_id=employee_id, work_date=work_date, status=status)

    for employee_id, review_date, summary in DEMO_REVIEWS:
        existing = await store.list_reviews(employee_id)
        if not any(r.review_date == review_date and r.summary == summary for r in existing):
            await store.add_review(employee_id=employee_id, summary=summary, review_date=review_date)

    logger.info("Demo data ready (%d new employees)", created)
