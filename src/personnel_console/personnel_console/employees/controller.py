from __future__ import annotations

from flask import Flask, jsonify

from ..common.http_utils import json_object
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    @app.get("/api/employees", endpoint="list_employees")
    async def list_employees():
        employees = await container.employee_service.list_employees()
        return jsonify([e.to_dict() for e in employees])

    @app.post("/api/employees", endpoint="create_employee")
    async def create_employee():
        data = json_object()
        employee = await container.employee_service.create_employee(
            full_name=data.get("fullName"),
            address=data.get("address"),
            department=data.get("department"),
        )
        return jsonify(employee.to_dict()), 201

    @app.get("/api/employees/<employee_id>", endpoint="employee_detail")
    async def employee_detail(employee_id: str):
        detail = await container.overview_service.employee_detail(employee_id)
        if detail is None:
            raise NotFoundError("Employee not found.")
        return jsonify(detail.to_dict())

    @app.delete("/api/employees/<employee_id>", endpoint="delete_employee")
    async def delete_employee(employee_id: str):
        await container.employee_service.delete_employee(employee_id)
        return jsonify({"message": "Employee deleted successfully."})
