from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/dashboard", endpoint="dashboard")
    async def dashboard():
        data = await container.overview_service.dashboard()
        return jsonify(data.to_dict())
