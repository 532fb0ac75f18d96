from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AIInsight, InsightPayload


class InsightRepository(Protocol):
    async def add_insight(self, *, employee_id: str, payload: InsightPayload, created_at: Optional[datetime] = None) -> AIInsight:
        raise NotImplementedError

    async def list_insights(self, employee_id: str) -> Sequence[AIInsight]:
        raise NotImplementedError
