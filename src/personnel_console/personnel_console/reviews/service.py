from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from .model import PerformanceReview
from .repository import ReviewRepository


class ReviewService:
    def __init__(self, reviews: ReviewRepository):
        self._reviews = reviews

    async def add_review(self, employee_id: str, summary: str) -> PerformanceReview:
        summary = require_non_empty(summary, "summary")
        return await self._reviews.add_review(employee_id=employee_id, summary=summary)

    async def list_reviews(self, employee_id: str) -> Sequence[PerformanceReview]:
        return await self._reviews.list_reviews(employee_id)
