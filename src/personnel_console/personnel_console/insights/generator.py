"""Contracts for the external text generator.

The workflow only talks to a generator through ``TextGenerator`` and only with the two
request/response shapes below. Responses are untrusted and go through ``model_validate``
before anything else looks at them.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Protocol

from pydantic import BaseModel, Field


class SummaryAttendanceItem(BaseModel):
    date: str
    status: Literal["present", "absent", "leave"]


class SummaryReviewItem(BaseModel):
    date: str
    summary: str


class SummaryRequest(BaseModel):
    fullName: str
    address: str
    department: str
    attendanceRecords: List[SummaryAttendanceItem] = Field(default_factory=list)
    performanceReviews: List[SummaryReviewItem] = Field(default_factory=list)


class SummaryResult(BaseModel):
    summary: str


class InsightAttendanceItem(BaseModel):
    date: str
    status: Literal["present", "absent", "late"]


class InsightRequest(BaseModel):
    employeeName: str
    attendanceRecords: List[InsightAttendanceItem] = Field(default_factory=list)
    performanceReviews: List[str] = Field(default_factory=list)


class InsightResult(BaseModel):
    summary: str
    insights: List[str]
    areasForDevelopment: List[str]


class TextGenerator(Protocol):
    async def summarize_overview(self, request: dict) -> Optional[Any]:
        """Return a mapping shaped like ``SummaryResult``."""

        raise NotImplementedError

    async def identify_insights(self, request: dict) -> Optional[Any]:
        """Return a mapping shaped like ``InsightResult``."""

        raise NotImplementedError
