from __future__ import annotations

from enum import Enum


class Department(str, Enum):
    """Closed set of departments an employee can belong to."""

    ENGINEERING = "Engineering"
    HR = "HR"
    MARKETING = "Marketing"
    SALES = "Sales"
    FINANCE = "Finance"


class AttendanceStatus(str, Enum):
    """Status recorded for one employee on one calendar day."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"


class TodayStatus(str, Enum):
    """Status shown in the organization-wide view.

    UNMARKED is reported when no record exists for the day; it is never folded into ABSENT.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"
    UNMARKED = "Not Marked"


class GenerationMode(str, Enum):
    SUMMARY = "summary"
    INSIGHTS = "insights"


class WorkflowState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    DRAFT_READY = "draft_ready"


class WorkflowOutcome(str, Enum):
    """Terminal transitions; the workflow is back in IDLE after each of them."""

    APPROVED = "approved"
    DISCARDED = "discarded"
    FAILED = "failed"
