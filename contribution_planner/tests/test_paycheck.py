from __future__ import annotations

from math import isclose

import pytest

from contribution_planner.core.errors import ArithmeticDegenerate, InvalidState
from contribution_planner.core.paycheck import (
    fixed_to_percent,
    per_paycheck_contribution,
    percent_to_fixed,
)
from contribution_planner.schemas.plan_state import ContributionMode


def test_percent_mode_takes_share_of_gross_pay(default_state):
    assert isclose(per_paycheck_contribution(default_state), 200.0)


def test_fixed_mode_returns_value_unchanged(default_state):
    state = default_state.model_copy(
        update={"contributionMode": ContributionMode.FIXED, "contributionValue": 500.0}
    )
    assert per_paycheck_contribution(state) == 500.0


def test_percent_mode_uses_gross_pay_not_salary(default_state):
    # gross pay per period is taken as supplied even when it disagrees with salary / payFrequency
    state = default_state.model_copy(update={"grossPayPerPeriod": 5000.0})
    assert isclose(per_paycheck_contribution(state), 250.0)


def test_percent_to_fixed_rounds_to_whole_dollars():
    assert percent_to_fixed(5, 104000, 26) == 200.0
    assert percent_to_fixed(6, 100000, 26) == 231.0


def test_percent_to_fixed_rounds_halves_up():
    # 325 / 26 == 12.5 per paycheck
    assert percent_to_fixed(100, 325, 26) == 13.0


def test_fixed_to_percent_rounds_to_one_decimal():
    assert fixed_to_percent(200, 104000, 26) == 5.0
    assert fixed_to_percent(500, 104000, 26) == 12.5
    assert fixed_to_percent(231, 100000, 26) == 6.0


@pytest.mark.parametrize(
    "percent, salary",
    [(5.0, 104000.0), (6.0, 100000.0), (12.5, 75000.0), (3.3, 61000.0), (0.0, 50000.0)],
)
def test_percent_survives_conversion_to_fixed_and_back(percent, salary):
    fixed = percent_to_fixed(percent, salary, 26)
    assert isclose(fixed_to_percent(fixed, salary, 26), percent, abs_tol=0.1)


def test_fixed_to_percent_rejects_zero_salary():
    with pytest.raises(ArithmeticDegenerate):
        fixed_to_percent(200, 0, 26)


@pytest.mark.parametrize("pay_frequency", [0, -26])
def test_conversions_reject_non_positive_pay_frequency(pay_frequency):
    with pytest.raises(ArithmeticDegenerate):
        percent_to_fixed(5, 104000, pay_frequency)
    with pytest.raises(ArithmeticDegenerate):
        fixed_to_percent(200, 104000, pay_frequency)


def test_conversions_reject_negative_or_non_finite_input():
    with pytest.raises(InvalidState):
        percent_to_fixed(-1, 104000, 26)
    with pytest.raises(InvalidState):
        fixed_to_percent(float("nan"), 104000, 26)
    with pytest.raises(InvalidState):
        percent_to_fixed(5, float("inf"), 26)


def test_conversions_reject_results_that_overflow():
    with pytest.raises(InvalidState):
        fixed_to_percent(1e308, 1.0, 26)
    with pytest.raises(InvalidState):
        percent_to_fixed(1e308, 1e308, 26)
