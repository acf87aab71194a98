from __future__ import annotations

import json

import pytest

from contribution_planner.core.errors import StateStoreError
from contribution_planner.persistence import JsonPlanStateStore
from contribution_planner.schemas.plan_state import (
    DEFAULT_PLAN_STATE,
    ContributionMode,
    ContributionUpdate,
)


def test_load_seeds_default_record_when_missing(store):
    assert not store.path.exists()

    state = store.load()

    assert state == DEFAULT_PLAN_STATE
    assert json.loads(store.path.read_text())["contributionMode"] == "PERCENT"


def test_save_then_load_returns_saved_state(store):
    changed = DEFAULT_PLAN_STATE.model_copy(update={"remainingPaychecks": 3, "ytdEmployerMatch": 2500.0})

    store.save(changed)

    assert store.load() == changed


def test_update_contribution_merges_and_persists(store):
    update = ContributionUpdate(contributionMode=ContributionMode.FIXED, contributionValue=650.0)

    updated = store.update_contribution(update)

    assert updated.contributionMode == ContributionMode.FIXED
    assert updated.contributionValue == 650.0
    assert updated.salary == DEFAULT_PLAN_STATE.salary
    assert JsonPlanStateStore(store.path).load() == updated


def test_write_leaves_no_temporary_files(store):
    store.load()
    store.save(DEFAULT_PLAN_STATE)

    assert [path.name for path in store.path.parent.iterdir()] == [store.path.name]


def test_malformed_record_raises_store_error(store):
    store.path.write_text("{not json")

    with pytest.raises(StateStoreError):
        store.load()


def test_invalid_record_raises_store_error(store):
    store.path.write_text(json.dumps({**DEFAULT_PLAN_STATE.model_dump(mode="json"), "payFrequency": 0}))

    with pytest.raises(StateStoreError):
        store.load()


def test_unwritable_location_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = JsonPlanStateStore(blocker / "plan_state.json")

    with pytest.raises(StateStoreError):
        store.save(DEFAULT_PLAN_STATE)
