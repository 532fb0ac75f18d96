from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PerformanceReview:
    review_id: str
    employee_id: str
    review_date: date
    summary: str

    def to_dict(self) -> dict:
        return {
            "id": self.review_id,
            "employeeId": self.employee_id,
            "date": self.review_date.isoformat(),
            "summary": self.summary,
        }
