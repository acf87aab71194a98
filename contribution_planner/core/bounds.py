"""Input ranges for the contribution slider.

These bounds are for simulation and sit above the statutory limits on
purpose, so a user can dial in an over-limit contribution and see the warning.
"""

from __future__ import annotations

import math

from contribution_planner.core.limits import MAX_PERCENT_CONTRIBUTION
from contribution_planner.core.paycheck import require_non_negative, require_pay_frequency
from contribution_planner.schemas.plan_state import ContributionMode
from contribution_planner.schemas.projection import ContributionBounds

PERCENT_STEP = 0.1
FIXED_STEP = 50.0


def max_contribution_value(mode: ContributionMode, salary: float, pay_frequency: int = 26) -> float:
    """100 for percent mode, one full paycheck (whole dollars) for fixed mode."""
    if mode == ContributionMode.PERCENT:
        return MAX_PERCENT_CONTRIBUTION
    require_non_negative("salary", salary)
    require_pay_frequency(pay_frequency)
    return float(math.floor(salary / pay_frequency))


def contribution_bounds(mode: ContributionMode, salary: float, pay_frequency: int = 26) -> ContributionBounds:
    return ContributionBounds(
        mode=mode,
        minValue=0.0,
        maxValue=max_contribution_value(mode, salary, pay_frequency),
        step=PERCENT_STEP if mode == ContributionMode.PERCENT else FIXED_STEP,
    )


__all__ = ["max_contribution_value", "contribution_bounds", "PERCENT_STEP", "FIXED_STEP"]
