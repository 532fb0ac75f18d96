from __future__ import annotations

from flask import Flask, jsonify

from ..common.http_utils import json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/employees/<employee_id>/reviews", endpoint="list_reviews")
    async def list_reviews(employee_id: str):
        reviews = await container.review_service.list_reviews(employee_id)
        return jsonify([r.to_dict() for r in reviews])

    @app.post("/api/employees/<employee_id>/reviews", endpoint="add_review")
    async def add_review(employee_id: str):
        data = json_object()
        review = await container.review_service.add_review(employee_id, data.get("summary") or "")
        return jsonify({"message": "Performance review added.", "review": review.to_dict()}), 201
