"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import structlog

from contribution_planner.app import create_app
from contribution_planner.app.api.routes import STORE_EXTENSION
from contribution_planner.config import Settings
from contribution_planner.logging import configure_logging


def test_default_settings():
    settings = Settings()
    assert settings.data_file == "data/plan_state.json"
    assert settings.retirement_age == 65
    assert settings.annual_return_rate == 0.07


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CONTRIBUTION_PLANNER_RETIREMENT_AGE", "62")
    monkeypatch.setenv("CONTRIBUTION_PLANNER_LOG_LEVEL", "DEBUG")

    settings = Settings()
    assert settings.retirement_age == 62
    assert settings.log_level == "DEBUG"


def test_app_factory_builds_store_from_settings(tmp_path):
    data_file = tmp_path / "nested" / "state.json"
    app = create_app(Settings(data_file=str(data_file), log_level="WARNING"))

    store = app.extensions[STORE_EXTENSION]
    store.load()
    assert data_file.exists()


def test_configure_logging_selects_renderer():
    configure_logging(level="WARNING", format_json=True)
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    configure_logging(level="WARNING", format_json=False)
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
