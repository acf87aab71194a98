"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from contribution_planner.app.api.routes import STORE_EXTENSION, api_bp
from contribution_planner.config import Settings
from contribution_planner.logging import configure_logging, get_logger
from contribution_planner.persistence import JsonPlanStateStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[JsonPlanStateStore] = None,
) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings()
    configure_logging(level=settings.log_level, format_json=settings.log_json)

    app = Flask(__name__)
    app.config["PLANNER_SETTINGS"] = settings
    app.extensions[STORE_EXTENSION] = store or JsonPlanStateStore(settings.data_file)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    get_logger(__name__).info("Application created", data_file=settings.data_file)
    return app
