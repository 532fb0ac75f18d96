from __future__ import annotations

import asyncio

import pytest

from personnel_console.core.enums import Department
from personnel_console.core.exceptions import NotFoundError, ValidationError
from personnel_console.reviews.service import ReviewService


class RecordingReviews:
    def __init__(self):
        self.calls = []

    async def add_review(self, *, employee_id, summary, review_date=None):
        self.calls.append((employee_id, summary))

    async def list_reviews(self, employee_id):
        return []


@pytest.mark.parametrize("summary", ["", "   ", "\n\t"])
def test_blank_summary_never_reaches_store(summary):
    repo = RecordingReviews()
    svc = ReviewService(repo)

    with pytest.raises(ValidationError) as exc:
        asyncio.run(svc.add_review("1", summary))

    assert "summary" in exc.value.errors
    assert repo.calls == []


def test_review_text_is_stripped(store):
    svc = ReviewService(store)

    async def scenario():
        jane = await store.add_employee(full_name="Jane Doe", address="123 Maple Street", department=Department.HR)
        review = await svc.add_review(jane.employee_id, "  Great mentor.  ")
        return review, await svc.list_reviews(jane.employee_id)

    review, listed = asyncio.run(scenario())

    assert review.summary == "Great mentor."
    assert listed == [review]


def test_review_for_unknown_employee(store):
    with pytest.raises(NotFoundError):
        asyncio.run(ReviewService(store).add_review("ghost", "Fine"))


@pytest.mark.parametrize("summary", [5, ["Good"], {"text": "Good"}])
def test_non_text_summary_is_a_validation_error(summary):
    repo = RecordingReviews()

    with pytest.raises(ValidationError) as exc:
        asyncio.run(ReviewService(repo).add_review("1", summary))

    assert exc.value.errors == {"summary": ["Expected text."]}
    assert repo.calls == []
