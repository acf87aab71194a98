"""Per-paycheck contribution and percent/fixed conversions."""

from __future__ import annotations

import math

from contribution_planner.core.errors import ArithmeticDegenerate, InvalidState
from contribution_planner.schemas.plan_state import ContributionMode, PlanState


def _round_half_up(field: str, value: float, digits: int = 0) -> float:
    # halves round up, matching how the amounts are shown in the UI
    scale = 10 ** digits
    shifted = require_finite(field, value * scale + 0.5)
    return math.floor(shifted) / scale


def require_finite(field: str, value: float) -> float:
    """Reject a result that overflowed to infinity or degenerated to NaN."""
    if not math.isfinite(value):
        raise InvalidState(field, value, "result is not a finite number")
    return value


def require_non_negative(field: str, value: float) -> float:
    """Reject negative or non-finite numbers before they reach a formula."""
    if not math.isfinite(value):
        raise InvalidState(field, value, "must be finite")
    if value < 0:
        raise InvalidState(field, value, "must not be negative")
    return value


def require_pay_frequency(pay_frequency: int) -> int:
    if pay_frequency <= 0:
        raise ArithmeticDegenerate(f"payFrequency must be positive, got {pay_frequency}")
    return pay_frequency


def per_paycheck_contribution(state: PlanState) -> float:
    """Employee contribution taken from a single paycheck."""
    if state.contributionMode == ContributionMode.PERCENT:
        return require_finite(
            "perPaycheckContribution", state.grossPayPerPeriod * state.contributionValue / 100
        )
    return state.contributionValue


def percent_to_fixed(percent: float, salary: float, pay_frequency: int = 26) -> float:
    """Per-paycheck amount equivalent to ``percent`` of salary, to the nearest dollar."""
    require_non_negative("percent", percent)
    require_non_negative("salary", salary)
    require_pay_frequency(pay_frequency)
    annual_contribution = salary * percent / 100
    return _round_half_up("fixedAmount", annual_contribution / pay_frequency)


def fixed_to_percent(fixed_amount: float, salary: float, pay_frequency: int = 26) -> float:
    """Percent of salary equivalent to ``fixed_amount`` per paycheck, to one decimal.

    Raises ArithmeticDegenerate when salary is zero.
    """
    require_non_negative("fixedAmount", fixed_amount)
    require_non_negative("salary", salary)
    require_pay_frequency(pay_frequency)
    if salary == 0:
        raise ArithmeticDegenerate("cannot express a fixed amount as a percent of a zero salary")
    annual_contribution = fixed_amount * pay_frequency
    return _round_half_up("percent", annual_contribution / salary * 100, 1)


__all__ = [
    "per_paycheck_contribution",
    "percent_to_fixed",
    "fixed_to_percent",
    "require_finite",
    "require_non_negative",
    "require_pay_frequency",
]
