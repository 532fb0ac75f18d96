from __future__ import annotations

import asyncio
import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .common.logging_config import configure_logging
from .config import get_settings_module
from .container import build_container
from .core.exceptions import ExternalServiceFailure, InvariantViolation, NotFoundError, ValidationError
from .employees.controller import register as register_employees
from .insights.controller import register as register_insights
from .insights.generator import TextGenerator
from .overview.controller import register as register_overview
from .reviews.controller import register as register_reviews
from .storage.seed import seed_demo_data

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"message": str(e), "errors": e.errors}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(ExternalServiceFailure)
    def handle_external(e: ExternalServiceFailure):
        return jsonify({"error": str(e), "retryable": e.retryable}), 503

    @app.errorhandler(InvariantViolation)
    def handle_invariant(e: InvariantViolation):
        logger.critical("Invariant violation: %s", e)
        return jsonify({"error": "Internal error"}), 500


def create_app(settings_module: Optional[str] = None, *, generator: Optional[TextGenerator] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    container = build_container(
        latency_ms=int(getattr(settings, "STORE_LATENCY_MS", 0)),
        text_generator=str(getattr(settings, "TEXT_GENERATOR", "heuristic")),
        generator=generator,
    )
    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        asyncio.run(seed_demo_data(container.store))

    app.extensions["personnel_console"] = container
    atexit.register(container.close)

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_reviews(app, container)
    register_insights(app, container)
    register_overview(app, container)

    return app
