"""Single-record JSON persistence for the plan state."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from contribution_planner.core.errors import StateStoreError
from contribution_planner.logging import get_logger
from contribution_planner.schemas.plan_state import DEFAULT_PLAN_STATE, ContributionUpdate, PlanState


class JsonPlanStateStore:
    """Keeps one plan state record in a JSON file.

    Writers are serialized with a lock and each write replaces the file
    atomically, so readers never see a half-written record.
    """

    def __init__(self, path: Union[str, Path], default: PlanState = DEFAULT_PLAN_STATE):
        self.path = Path(path)
        self.default = default
        self.logger = get_logger("plan_state.store").bind(path=str(self.path))
        self._lock = threading.RLock()

    def load(self) -> PlanState:
        """Return the stored record, seeding it with the default when missing."""
        with self._lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                self.logger.info("Seeding default plan state")
                return self._write(self.default)
            except OSError as exc:
                raise StateStoreError(f"Failed to read plan state: {exc}") from exc

            try:
                state = PlanState.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError) as exc:
                raise StateStoreError(f"Stored plan state is malformed: {exc}") from exc

            self.logger.debug("Loaded plan state")
            return state

    def save(self, state: PlanState) -> PlanState:
        with self._lock:
            return self._write(state)

    def update_contribution(self, update: ContributionUpdate) -> PlanState:
        """Merge a contribution selection into the stored record and persist it."""
        with self._lock:
            updated = update.apply_to(self.load())
            self._write(updated)

        self.logger.info(
            "Contribution updated",
            contribution_mode=updated.contributionMode.value,
            contribution_value=updated.contributionValue,
        )
        return updated

    def _write(self, state: PlanState) -> PlanState:
        payload = json.dumps(state.model_dump(mode="json"), indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StateStoreError(f"Failed to write plan state: {exc}") from exc

        self.logger.debug("Saved plan state")
        return state
