from __future__ import annotations

from flask import Flask, jsonify

from ..common.http_utils import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/employees/<employee_id>/attendance", endpoint="attendance_history")
    async def attendance_history(employee_id: str):
        records = await container.attendance_service.history(employee_id)
        return jsonify([r.to_dict() for r in records])

    @app.post("/api/employees/<employee_id>/attendance", endpoint="mark_attendance")
    async def mark_attendance(employee_id: str):
        data = json_object()
        record = await container.attendance_service.mark_attendance(employee_id, data.get("date"), data.get("status"))
        return jsonify(
            {
                "message": f"Attendance marked as {record.status.value}.",
                "record": record.to_dict(),
            }
        )

    @app.get("/api/attendance/today", endpoint="attendance_today")
    async def attendance_today():
        rows = await container.overview_service.attendance_today()
        return jsonify([r.to_dict() for r in rows])
