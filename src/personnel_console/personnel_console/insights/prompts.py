# ==============================================================================
# Prompt texts for language-model generators
# ==============================================================================
# Rendered from the validated request contracts in ``generator.py``, so an adapter
# for a hosted model only has to send the text and parse the JSON answer.

from __future__ import annotations

from ..core.constants import SUMMARY_ATTENDANCE_LIMIT, SUMMARY_REVIEW_LIMIT
from .generator import InsightRequest, SummaryRequest

SUMMARY_PROMPT = """
You are an intelligent HR assistant tasked with summarizing an employee's overall profile.

Generate a concise summary of the employee's information, attendance trends, and performance.
Highlight key strengths, areas for improvement, and any notable patterns.

Employee Information:
- Full Name: {full_name}
- Address: {address}
- Department: {department}

Attendance Records (most recent {attendance_limit}, if available):
{attendance}

Performance Reviews (most recent {review_limit}, if available):
{reviews}

Provide an overall summary that is easy to understand and provides a quick overview for an
HR admin. The summary should be approximately 3-5 sentences long.
Answer with JSON: {{"summary": "..."}}
""".strip()

INSIGHT_PROMPT = """
You are an intelligent HR assistant. Your task is to analyze an employee's historical data
and identify key insights and areas for development.

Employee Name: {employee_name}

## Attendance Records:
Analyze the following attendance records for patterns, such as frequent absences,
punctuality, or consistent presence.
{attendance}

## Performance Reviews:
Analyze the following performance review summaries to identify recurring strengths,
weaknesses, and overall performance trends.
{reviews}

Based on the provided data, generate a concise summary of the employee analysis, key
insights, and specific areas for development. Keep insights actionable and areas for
development clear and constructive.
Answer with JSON: {{"summary": "...", "insights": ["..."], "areasForDevelopment": ["..."]}}
""".strip()


def _bullets(lines: list[str], empty: str) -> str:
    return "\n".join(f"- {line}" for line in lines) if lines else empty


def render_summary_prompt(request: dict) -> str:
    req = SummaryRequest.model_validate(request)
    return SUMMARY_PROMPT.format(
        full_name=req.fullName,
        address=req.address,
        department=req.department,
        attendance_limit=SUMMARY_ATTENDANCE_LIMIT,
        review_limit=SUMMARY_REVIEW_LIMIT,
        attendance=_bullets(
            [f"Date: {a.date}, Status: {a.status}" for a in req.attendanceRecords[:SUMMARY_ATTENDANCE_LIMIT]],
            "No attendance records available.",
        ),
        reviews=_bullets(
            [f"Date: {r.date}, Summary: {r.summary}" for r in req.performanceReviews[:SUMMARY_REVIEW_LIMIT]],
            "No performance reviews available.",
        ),
    )


def render_insight_prompt(request: dict) -> str:
    req = InsightRequest.model_validate(request)
    return INSIGHT_PROMPT.format(
        employee_name=req.employeeName,
        attendance=_bullets(
            [f"Date: {a.date}, Status: {a.status}" for a in req.attendanceRecords],
            "No attendance records available.",
        ),
        reviews=_bullets(list(req.performanceReviews), "No performance reviews available."),
    )
