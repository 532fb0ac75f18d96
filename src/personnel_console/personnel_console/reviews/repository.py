from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PerformanceReview


class ReviewRepository(Protocol):
    async def add_review(self, *, employee_id: str, summary: str, review_date: Optional[date] = None) -> PerformanceReview:
        raise NotImplementedError

    async def list_reviews(self, employee_id: str) -> Sequence[PerformanceReview]:
        raise NotImplementedError
