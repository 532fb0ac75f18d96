from __future__ import annotations

import asyncio

from personnel_console.core.enums import AttendanceStatus
from personnel_console.storage.seed import seed_demo_data


def test_seed_is_repeatable(store):
    async def scenario():
        await seed_demo_data(store)
        await seed_demo_data(store)
        return (
            await store.list_employees(),
            await store.list_attendance("1"),
            await store.list_reviews("1"),
        )

    employees, jane_attendance, jane_reviews = asyncio.run(scenario())

    assert [e.full_name for e in employees] == ["Jane Doe", "John Smith", "Alice Johnson"]
    assert [a.status for a in jane_attendance] == [AttendanceStatus.ABSENT, AttendanceStatus.PRESENT]
    assert len(jane_reviews) == 1
