"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from contribution_planner.config import Settings
from contribution_planner.core.bounds import contribution_bounds
from contribution_planner.core.errors import (
    ArithmeticDegenerate,
    InvalidHorizon,
    InvalidState,
    StateStoreError,
)
from contribution_planner.core.retirement import project_retirement
from contribution_planner.core.year_end import summarize_year_end
from contribution_planner.logging import get_logger
from contribution_planner.persistence import JsonPlanStateStore
from contribution_planner.schemas.plan_state import ContributionUpdate
from contribution_planner.schemas.projection import ProjectionQuery

STORE_EXTENSION = "plan_state_store"

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


def _store() -> JsonPlanStateStore:
    return current_app.extensions[STORE_EXTENSION]


def _settings() -> Settings:
    return current_app.config["PLANNER_SETTINGS"]


def _describe(errors: List[Dict[str, Any]]) -> str:
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    errors = exc.errors(include_url=False, include_context=False)
    message = _describe(errors)
    logger.info("Request rejected", reason=message, path=request.path)
    return jsonify({"error": message, "detail": errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidHorizon)
@api_bp.errorhandler(InvalidState)
@api_bp.errorhandler(ArithmeticDegenerate)
def _handle_calculation_error(exc: Exception):
    logger.info("Calculation rejected", reason=str(exc), path=request.path)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(StateStoreError)
def _handle_store_error(exc: StateStoreError):
    logger.error("Plan state store failed", path=request.path, exc_info=exc)
    return jsonify({"error": str(exc)}), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/user")
def read_plan_state() -> Any:
    """Return the full stored plan state."""
    state = _store().load()
    return jsonify(state.model_dump(mode="json"))


@api_bp.post("/contribution")
def update_contribution() -> Any:
    """Validate a contribution selection, merge it into the stored state, and return the result."""
    raw_payload = request.get_json(force=True, silent=True)
    update = ContributionUpdate.model_validate(raw_payload)
    store = _store()
    # a selection whose year-end figures overflow is rejected before it is saved
    summarize_year_end(update.apply_to(store.load()))
    state = store.update_contribution(update)
    return jsonify(state.model_dump(mode="json"))


@api_bp.get("/summary")
def year_end_summary() -> Any:
    """Current-year projection for the stored state plus the input range of its mode."""
    state = _store().load()
    summary = summarize_year_end(state)
    if summary.exceedsAnnualLimit:
        logger.warning(
            "Projected contribution exceeds annual limit",
            projected_user_contribution=summary.projectedUserContribution,
        )
    bounds = contribution_bounds(state.contributionMode, state.salary, state.payFrequency)
    return jsonify(
        {
            "state": state.model_dump(mode="json"),
            "summary": summary.model_dump(mode="json"),
            "bounds": bounds.model_dump(mode="json"),
        }
    )


@api_bp.get("/projection")
def retirement_projection() -> Any:
    """Compound the stored state forward to the requested retirement age."""
    query = ProjectionQuery.model_validate(request.args.to_dict())
    settings = _settings()
    state = _store().load()
    projection = project_retirement(
        state,
        current_age=query.currentAge if query.currentAge is not None else settings.current_age,
        retirement_age=(
            query.retirementAge if query.retirementAge is not None else settings.retirement_age
        ),
        annual_return_rate=(
            query.annualReturnRate
            if query.annualReturnRate is not None
            else settings.annual_return_rate
        ),
    )
    return jsonify(projection.model_dump(mode="json"))
