from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..attendance.repository import AttendanceRepository
from ..common.validators import field_errors
from ..core.constants import INSIGHT_STATUS_MAP, SUMMARY_STATUS_MAP
from ..core.enums import GenerationMode, WorkflowOutcome, WorkflowState
from ..core.exceptions import ExternalServiceFailure, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..reviews.repository import ReviewRepository
from .generator import InsightRequest, InsightResult, SummaryRequest, SummaryResult, TextGenerator
from .model import NO_DRAFT, AIInsight, Draft, DraftSlot, InsightPayload
from .repository import InsightRepository

logger = logging.getLogger(__name__)


class InsightWorkflow:
    """Draft-then-approve flow around the text generator, for one reviewer session.

    Generation only fills the in-memory draft slot. The store is written exclusively by
    ``approve``; a failed or discarded draft leaves the insight history untouched.
    """

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        reviews: ReviewRepository,
        insights: InsightRepository,
        generator: TextGenerator,
    ):
        self._employees = employees
        self._attendance = attendance
        self._reviews = reviews
        self._insights = insights
        self._generator = generator

        self._state = WorkflowState.IDLE
        self._draft: DraftSlot = NO_DRAFT
        self._last_outcome: Optional[WorkflowOutcome] = None
        self._generation = 0

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def draft(self) -> DraftSlot:
        return self._draft

    @property
    def last_outcome(self) -> Optional[WorkflowOutcome]:
        return self._last_outcome

    async def request_summary(self, employee_id: str) -> Draft:
        return await self._generate(employee_id, GenerationMode.SUMMARY)

    async def request_insights(self, employee_id: str) -> Draft:
        return await self._generate(employee_id, GenerationMode.INSIGHTS)

    async def _build_request(self, employee: Employee, mode: GenerationMode) -> dict:
        attendance = await self._attendance.list_attendance(employee.employee_id)
        reviews = await self._reviews.list_reviews(employee.employee_id)

        if mode == GenerationMode.SUMMARY:
            return SummaryRequest(
                fullName=employee.full_name,
                address=employee.address,
                department=employee.department.value,
                attendanceRecords=[
                    {"date": a.work_date.isoformat(), "status": SUMMARY_STATUS_MAP[a.status]} for a in attendance
                ],
                performanceReviews=[{"date": r.review_date.isoformat(), "summary": r.summary} for r in reviews],
            ).model_dump()

        return InsightRequest(
            employeeName=employee.full_name,
            attendanceRecords=[
                {"date": a.work_date.isoformat(), "status": INSIGHT_STATUS_MAP[a.status]} for a in attendance
            ],
            performanceReviews=[r.summary for r in reviews],
        ).model_dump()

    async def _call_generator(self, mode: GenerationMode, request: dict) -> InsightPayload:
        if mode == GenerationMode.SUMMARY:
            raw = await self._generator.summarize_overview(request)
            if raw is None:
                raise ValueError("generator returned no output")
            return InsightPayload(summary=SummaryResult.model_validate(raw).summary)

        raw = await self._generator.identify_insights(request)
        if raw is None:
            raise ValueError("generator returned no output")
        result = InsightResult.model_validate(raw)
        return InsightPayload(
            summary=result.summary,
            insights=tuple(result.insights),
            areas_for_development=tuple(result.areasForDevelopment),
        )

    async def _generate(self, employee_id: str, mode: GenerationMode) -> Draft:
        employee = await self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found.")

        self._generation += 1
        token = self._generation
        self._draft = NO_DRAFT
        self._state = WorkflowState.GENERATING
        logger.info("Generating %s draft for employee %s", mode.value, employee_id)

        try:
            request = await self._build_request(employee, mode)
            payload = await self._call_generator(mode, request)
        except Exception as e:
            if token == self._generation:
                self._draft = NO_DRAFT
                self._state = WorkflowState.IDLE
                self._last_outcome = WorkflowOutcome.FAILED
            logger.warning("Generating %s draft for employee %s failed", mode.value, employee_id, exc_info=True)
            label = "summary" if mode == GenerationMode.SUMMARY else "insights"
            raise ExternalServiceFailure(f"Failed to generate {label}.") from e

        draft = Draft(employee_id=employee_id, mode=mode, payload=payload)
        if token != self._generation:
            # A newer generation owns the slot.
            logger.info("Dropping superseded %s draft for employee %s", mode.value, employee_id)
            return draft

        self._draft = draft
        self._state = WorkflowState.DRAFT_READY
        return draft

    async def approve(
        self,
        employee_id: str,
        payload: Union[InsightPayload, Mapping, None] = None,
    ) -> AIInsight:
        """Persist the current draft, optionally with reviewer-edited content."""
        draft = self._draft
        if not isinstance(draft, Draft):
            raise ValidationError("There is no draft to approve.")
        if draft.employee_id != employee_id:
            raise ValidationError("The current draft belongs to a different employee.", {"employeeId": ["Mismatch."]})

        content = draft.payload
        if payload is not None:
            content = self._coerce_payload(payload)

        try:
            insight = await self._insights.add_insight(employee_id=employee_id, payload=content)
        except NotFoundError:
            if self._draft is draft:
                self._clear(WorkflowOutcome.FAILED)
            raise

        if self._draft is draft:
            self._clear(WorkflowOutcome.APPROVED)
        logger.info("Approved insight %s for employee %s", insight.insight_id, employee_id)
        return insight

    def discard(self) -> None:
        if isinstance(self._draft, Draft):
            logger.info("Discarded %s draft for employee %s", self._draft.mode.value, self._draft.employee_id)
            self._clear(WorkflowOutcome.DISCARDED)

    def _clear(self, outcome: WorkflowOutcome) -> None:
        self._draft = NO_DRAFT
        self._state = WorkflowState.IDLE
        self._last_outcome = outcome

    @staticmethod
    def _coerce_payload(payload: Union[InsightPayload, Mapping]) -> InsightPayload:
        if isinstance(payload, InsightPayload):
            return payload
        try:
            result = InsightResult.model_validate(dict(payload))
        except (PydanticValidationError, TypeError, ValueError) as e:
            errors = field_errors(e) if isinstance(e, PydanticValidationError) else {}
            raise ValidationError("Invalid insight payload.", errors)
        if not result.summary.strip():
            raise ValidationError("Invalid insight payload.", {"summary": ["This field is required."]})
        return InsightPayload(
            summary=result.summary,
            insights=tuple(result.insights),
            areas_for_development=tuple(result.areasForDevelopment),
        )


class InsightWorkflowRegistry:
    """Hands out one InsightWorkflow per session id."""

    def __init__(self, factory: Callable[[], InsightWorkflow]):
        self._factory = factory
        self._sessions: dict[str, InsightWorkflow] = {}

    def get(self, session_id: str) -> InsightWorkflow:
        wf = self._sessions.get(session_id)
        if wf is None:
            wf = self._factory()
            self._sessions[session_id] = wf
        return wf

    def find(self, session_id: Optional[str]) -> Optional[InsightWorkflow]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def release(self, session_id: str) -> None:
        """Forget the session's workflow once it holds nothing worth keeping."""
        wf = self._sessions.get(session_id)
        if wf is not None and wf.state == WorkflowState.IDLE:
            del self._sessions[session_id]

    def __len__(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()
