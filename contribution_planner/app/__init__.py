"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from contribution_planner.app.api.routes import api_bp
from contribution_planner.config import PlannerSettings
from contribution_planner.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[PlannerSettings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or PlannerSettings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["PLANNER_SETTINGS"] = settings
    app.config["TESTING"] = settings.environment == "test"

    CORS(
        app,
        resources={rf"{settings.api.url_prefix}/*": {"origins": settings.api.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix=settings.api.url_prefix)
    logger.info(
        "planner api ready at %s (environment=%s)", settings.api.url_prefix, settings.environment
    )
    return app
