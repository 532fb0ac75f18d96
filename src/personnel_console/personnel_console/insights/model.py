from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union

from ..core.enums import GenerationMode


@dataclass(frozen=True)
class InsightPayload:
    """Content of an insight, before or after it is persisted."""

    summary: str
    insights: Tuple[str, ...] = ()
    areas_for_development: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "insights": list(self.insights),
            "areasForDevelopment": list(self.areas_for_development),
        }


@dataclass(frozen=True)
class AIInsight:
    """Domain entity: an approved, immutable historical insight."""

    insight_id: str
    employee_id: str
    summary: str
    insights: Tuple[str, ...]
    areas_for_development: Tuple[str, ...]
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.insight_id,
            "employeeId": self.employee_id,
            "summary": self.summary,
            "insights": list(self.insights),
            "areasForDevelopment": list(self.areas_for_development),
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class NoDraft:
    """Empty draft slot."""

    def to_dict(self) -> dict:
        return {"state": "none"}


NO_DRAFT = NoDraft()


@dataclass(frozen=True)
class Draft:
    """Unsaved candidate insight waiting for a reviewer."""

    employee_id: str
    mode: GenerationMode
    payload: InsightPayload

    def to_dict(self) -> dict:
        return {"state": "ready", "employeeId": self.employee_id, "mode": self.mode.value, **self.payload.to_dict()}


DraftSlot = Union[NoDraft, Draft]
