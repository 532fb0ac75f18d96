from __future__ import annotations

import uuid
from typing import Optional

from flask import Flask, jsonify, session

from ..common.http_utils import json_object
from ..container import Container
from ..core.exceptions import ValidationError
from .model import NO_DRAFT, Draft
from .workflow import InsightWorkflow


def register(app: Flask, container: Container) -> None:
    def session_id() -> str:
        sid = session.get("workflow_id")
        if not sid:
            sid = uuid.uuid4().hex
            session["workflow_id"] = sid
        return sid

    def existing_workflow() -> Optional[InsightWorkflow]:
        return container.workflows.find(session.get("workflow_id"))

    def workflow_state(wf: Optional[InsightWorkflow], employee_id: str) -> dict:
        if wf is None:
            return {"state": "idle", "lastOutcome": None, "draft": NO_DRAFT.to_dict()}
        state, draft = wf.state.value, wf.draft
        if isinstance(draft, Draft) and draft.employee_id != employee_id:
            # Another employee's draft is not shown on this one's page.
            state, draft = "idle", NO_DRAFT
        return {
            "state": state,
            "lastOutcome": wf.last_outcome.value if wf.last_outcome else None,
            "draft": draft.to_dict(),
        }

    async def generate(employee_id: str, summary: bool):
        sid = session_id()
        wf = container.workflows.get(sid)
        try:
            if summary:
                draft = await wf.request_summary(employee_id)
            else:
                draft = await wf.request_insights(employee_id)
        finally:
            container.workflows.release(sid)
        return jsonify({"data": draft.payload.to_dict(), "draft": draft.to_dict()})

    @app.get("/api/employees/<employee_id>/insights", endpoint="list_insights")
    async def list_insights(employee_id: str):
        insights = await container.store.list_insights(employee_id)
        return jsonify([i.to_dict() for i in insights])

    @app.post("/api/employees/<employee_id>/insights/summary", endpoint="request_summary")
    async def request_summary(employee_id: str):
        return await generate(employee_id, summary=True)

    @app.post("/api/employees/<employee_id>/insights/generate", endpoint="request_insights")
    async def request_insights(employee_id: str):
        return await generate(employee_id, summary=False)

    @app.get("/api/employees/<employee_id>/insights/draft", endpoint="current_draft")
    async def current_draft(employee_id: str):
        return jsonify(workflow_state(existing_workflow(), employee_id))

    @app.post("/api/employees/<employee_id>/insights/approve", endpoint="approve_insight")
    async def approve_insight(employee_id: str):
        wf = existing_workflow()
        if wf is None:
            raise ValidationError("There is no draft to approve.")
        data = json_object() or None
        try:
            insight = await wf.approve(employee_id, data)
        finally:
            container.workflows.release(session.get("workflow_id"))
        return jsonify({"message": "Insights saved successfully.", "insight": insight.to_dict()}), 201

    @app.post("/api/employees/<employee_id>/insights/discard", endpoint="discard_insight")
    async def discard_insight(employee_id: str):
        wf = existing_workflow()
        if wf is not None and isinstance(wf.draft, Draft) and wf.draft.employee_id == employee_id:
            wf.discard()
        state = workflow_state(wf, employee_id)
        if wf is not None:
            container.workflows.release(session.get("workflow_id"))
        return jsonify(state)
