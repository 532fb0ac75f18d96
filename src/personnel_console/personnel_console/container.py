from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .employees.service import EmployeeService
from .insights.generator import TextGenerator
from .insights.heuristic_generator import HeuristicTextGenerator
from .insights.workflow import InsightWorkflow, InsightWorkflowRegistry
from .overview.service import OverviewService
from .reviews.service import ReviewService
from .storage.memory_store import InMemoryEntityStore

GENERATORS = {
    "heuristic": HeuristicTextGenerator,
}


@dataclass(frozen=True)
class Container:
    store: InMemoryEntityStore
    generator: TextGenerator

    employee_service: EmployeeService
    attendance_service: AttendanceService
    review_service: ReviewService
    overview_service: OverviewService
    workflows: InsightWorkflowRegistry

    def close(self) -> None:
        self.workflows.clear()
        self.store.clear()


def build_generator(name: str) -> TextGenerator:
    try:
        return GENERATORS[name]()
    except KeyError:
        raise ValueError(f"Unknown text generator: {name!r}")


def build_container(
    *,
    latency_ms: int = 0,
    text_generator: str = "heuristic",
    generator: Optional[TextGenerator] = None,
    store: Optional[InMemoryEntityStore] = None,
) -> Container:
    store = store or InMemoryEntityStore(latency_ms=latency_ms)
    generator = generator or build_generator(text_generator)

    def new_workflow() -> InsightWorkflow:
        return InsightWorkflow(
            employees=store,
            attendance=store,
            reviews=store,
            insights=store,
            generator=generator,
        )

    return Container(
        store=store,
        generator=generator,
        employee_service=EmployeeService(store),
        attendance_service=AttendanceService(store, store),
        review_service=ReviewService(store),
        overview_service=OverviewService(store, store, store, store),
        workflows=InsightWorkflowRegistry(new_workflow),
    )
