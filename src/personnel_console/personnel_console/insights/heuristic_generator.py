from __future__ import annotations

from collections import Counter

from ..core.constants import SUMMARY_ATTENDANCE_LIMIT, SUMMARY_REVIEW_LIMIT
from .generator import InsightRequest, SummaryRequest


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


class HeuristicTextGenerator:
    """Offline generator that writes plain rule-based text from the request data.

    Deterministic for a given request, so it doubles as the default development backend.
    """

    async def summarize_overview(self, request: dict) -> dict:
        req = SummaryRequest.model_validate(request)
        recent = req.attendanceRecords[:SUMMARY_ATTENDANCE_LIMIT]
        reviews = req.performanceReviews[:SUMMARY_REVIEW_LIMIT]

        parts = [f"{req.fullName} works in the {req.department} department."]
        if recent:
            counts = Counter(a.status for a in recent)
            parts.append(
                f"Over the last {_plural(len(recent), 'recorded day')} they were present "
                f"{counts['present']}, absent {counts['absent']} and on leave {counts['leave']}."
            )
        else:
            parts.append("No attendance records are available.")

        if reviews:
            latest = reviews[0]
            parts.append(f"The most recent review ({latest.date}) notes: {latest.summary}")
            if len(reviews) > 1:
                parts.append(f"Earlier reviews on file: {len(reviews) - 1}.")
        else:
            parts.append("No performance reviews are available.")

        return {"summary": " ".join(parts)}

    async def identify_insights(self, request: dict) -> dict:
        req = InsightRequest.model_validate(request)
        counts = Counter(a.status for a in req.attendanceRecords)
        total = len(req.attendanceRecords)

        insights: list[str] = []
        areas: list[str] = []

        if total:
            rate = 100 * (counts["present"] + counts["late"]) // total
            insights.append(f"Attended {rate}% of {_plural(total, 'recorded day')}.")
            if counts["late"]:
                insights.append(f"Arrived late on {_plural(counts['late'], 'day')}.")
                areas.append("Punctuality: aim to arrive on time consistently.")
            if counts["absent"]:
                insights.append(f"Absent on {_plural(counts['absent'], 'day')}.")
                areas.append("Attendance consistency: reduce unplanned absences.")

        if req.performanceReviews:
            insights.append(f"{_plural(len(req.performanceReviews), 'performance review')} on file.")
        else:
            areas.append("Schedule a performance review to establish a baseline.")

        if total or req.performanceReviews:
            summary = f"Analysis of {req.employeeName} based on {_plural(total, 'attendance record')} and {_plural(len(req.performanceReviews), 'review')}."
        else:
            summary = f"Not enough data is available yet to analyze {req.employeeName}."

        return {"summary": summary, "insights": insights, "areasForDevelopment": areas}
