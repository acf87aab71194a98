"""Persistence for the plan state record."""

from contribution_planner.persistence.json_store import JsonPlanStateStore

__all__ = ["JsonPlanStateStore"]
