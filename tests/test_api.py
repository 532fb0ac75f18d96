from __future__ import annotations

import pytest

from personnel_console.main import create_app


class FailingGenerator:
    async def summarize_overview(self, request):
        raise ConnectionError("unreachable")

    async def identify_insights(self, request):
        raise ConnectionError("unreachable")


@pytest.fixture
def app():
    return create_app("personnel_console.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def _create_jane(client):
    resp = client.post(
        "/api/employees",
        json={"fullName": "Jane Doe", "address": "123 Maple Street, Springfield", "department": "Engineering"},
    )
    assert resp.status_code == 201
    return resp.get_json()["id"]


def test_create_employee_validation_errors(client):
    resp = client.post("/api/employees", json={"fullName": "J", "address": "", "department": "Legal"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert set(body["errors"]) == {"full_name", "address", "department"}


def test_employee_lifecycle(client):
    eid = _create_jane(client)

    assert [e["id"] for e in client.get("/api/employees").get_json()] == [eid]

    resp = client.post(f"/api/employees/{eid}/attendance", json={"date": "2024-07-21", "status": "absent"})
    assert resp.status_code == 200
    client.post(f"/api/employees/{eid}/attendance", json={"date": "2024-07-21", "status": "late"})
    history = client.get(f"/api/employees/{eid}/attendance").get_json()
    assert [(r["date"], r["status"]) for r in history] == [("2024-07-21", "late")]

    assert client.post(f"/api/employees/{eid}/reviews", json={"summary": "   "}).status_code == 400
    assert client.post(f"/api/employees/{eid}/reviews", json={"summary": "Solid."}).status_code == 201

    detail = client.get(f"/api/employees/{eid}").get_json()
    assert detail["recentReviews"][0]["summary"] == "Solid."

    assert client.delete(f"/api/employees/{eid}").status_code == 200
    assert client.delete(f"/api/employees/{eid}").status_code == 200
    assert client.get(f"/api/employees/{eid}").status_code == 404
    assert client.get(f"/api/employees/{eid}/attendance").get_json() == []


def test_mark_attendance_unknown_employee(client):
    resp = client.post("/api/employees/ghost/attendance", json={"date": "2024-07-21", "status": "present"})
    assert resp.status_code == 404


def test_insight_draft_then_approve(client):
    eid = _create_jane(client)

    resp = client.post(f"/api/employees/{eid}/insights/generate")
    assert resp.status_code == 200
    assert set(resp.get_json()["data"]) == {"summary", "insights", "areasForDevelopment"}
    assert client.get(f"/api/employees/{eid}/insights").get_json() == []

    state = client.get(f"/api/employees/{eid}/insights/draft").get_json()
    assert state["state"] == "draft_ready"

    resp = client.post(f"/api/employees/{eid}/insights/approve")
    assert resp.status_code == 201
    assert len(client.get(f"/api/employees/{eid}/insights").get_json()) == 1

    assert client.post(f"/api/employees/{eid}/insights/approve").status_code == 400


def test_discard_draft(client):
    eid = _create_jane(client)
    client.post(f"/api/employees/{eid}/insights/summary")

    state = client.post(f"/api/employees/{eid}/insights/discard").get_json()

    assert state["state"] == "idle"
    assert state["lastOutcome"] == "discarded"
    assert client.get(f"/api/employees/{eid}/insights").get_json() == []


def test_generator_failure_is_retryable():
    app = create_app("personnel_console.config.testing", generator=FailingGenerator())
    client = app.test_client()
    eid = _create_jane(client)

    resp = client.post(f"/api/employees/{eid}/insights/generate")

    assert resp.status_code == 503
    assert resp.get_json()["retryable"] is True


def test_attendance_today_and_dashboard(client):
    _create_jane(client)

    rows = client.get("/api/attendance/today").get_json()
    assert rows[0]["status"] == "Not Marked"

    dashboard = client.get("/api/dashboard").get_json()
    assert dashboard["totalEmployees"] == 1
    assert dashboard["byDepartment"]["Engineering"] == 1


def test_read_only_insight_routes_hold_no_sessions(app):
    container = app.extensions["personnel_console"]

    for _ in range(50):
        client = app.test_client()
        assert client.get("/api/employees/x/insights").status_code == 200
        assert client.get("/api/employees/x/insights/draft").get_json()["draft"] == {"state": "none"}

    assert len(container.workflows) == 0


def test_session_released_after_approve_discard_and_failure(app, client):
    container = app.extensions["personnel_console"]
    eid = _create_jane(client)

    client.post(f"/api/employees/{eid}/insights/generate")
    assert len(container.workflows) == 1
    client.post(f"/api/employees/{eid}/insights/approve")
    assert len(container.workflows) == 0

    client.post(f"/api/employees/{eid}/insights/summary")
    client.post(f"/api/employees/{eid}/insights/discard")
    assert len(container.workflows) == 0

    assert client.post("/api/employees/ghost/insights/generate").status_code == 404
    assert len(container.workflows) == 0


def test_draft_route_only_shows_that_employees_draft(client):
    jane = _create_jane(client)
    resp = client.post(
        "/api/employees",
        json={"fullName": "John Smith", "address": "456 Oak Avenue, Metropolis", "department": "Sales"},
    )
    john = resp.get_json()["id"]

    client.post(f"/api/employees/{jane}/insights/generate")

    assert client.get(f"/api/employees/{john}/insights/draft").get_json()["draft"] == {"state": "none"}
    assert client.get(f"/api/employees/{jane}/insights/draft").get_json()["draft"]["employeeId"] == jane

    client.post(f"/api/employees/{john}/insights/discard")
    assert client.get(f"/api/employees/{jane}/insights/draft").get_json()["state"] == "draft_ready"


def test_non_text_review_summary_is_rejected(client):
    eid = _create_jane(client)

    resp = client.post(f"/api/employees/{eid}/reviews", json={"summary": 5})

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {"summary": ["Expected text."]}
    assert client.get(f"/api/employees/{eid}/reviews").get_json() == []


def test_non_object_json_body_is_a_validation_error(client):
    eid = _create_jane(client)

    assert client.post(f"/api/employees/{eid}/reviews", json=["Solid."]).status_code == 400
    assert client.post("/api/employees", json=["Jane"]).status_code == 400
