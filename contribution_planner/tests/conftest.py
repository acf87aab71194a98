from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from contribution_planner.app import create_app
from contribution_planner.config import Settings
from contribution_planner.persistence import JsonPlanStateStore
from contribution_planner.schemas.plan_state import DEFAULT_PLAN_STATE, PlanState


@pytest.fixture()
def default_state() -> PlanState:
    return DEFAULT_PLAN_STATE


@pytest.fixture()
def store(tmp_path) -> JsonPlanStateStore:
    return JsonPlanStateStore(tmp_path / "plan_state.json")


@pytest.fixture()
def app(tmp_path, store) -> Flask:
    settings = Settings(data_file=str(tmp_path / "plan_state.json"), log_level="WARNING")
    return create_app(settings, store=store)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
