from __future__ import annotations

import random
from datetime import date

import pytest

from personnel_console.storage.memory_store import InMemoryEntityStore


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore(rng=random.Random(0))


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 7, 21)


