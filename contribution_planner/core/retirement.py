"""Long-horizon compound growth projection to a retirement age.

Conventions:
  - The current balance grows with annual compounding.
  - Future contributions are a level monthly annuity at ``annual_return_rate / 12``.
  - Years after the current one assume the annualized steady-state
    contribution and match, each capped by statute.
  - The "growth" display bucket is the remainder of the total after the
    other three buckets, so the buckets always add up to the total.
"""

from __future__ import annotations

import math

from contribution_planner.core.errors import InvalidHorizon, InvalidState
from contribution_planner.core.limits import (
    COMBINED_ANNUAL_LIMIT,
    DEFAULT_ANNUAL_RETURN_RATE,
    ELECTIVE_DEFERRAL_LIMIT,
)
from contribution_planner.core.paycheck import per_paycheck_contribution, require_finite
from contribution_planner.core.year_end import matchable_per_paycheck
from contribution_planner.schemas.plan_state import PlanState
from contribution_planner.schemas.projection import ProjectionBuckets, RetirementProjection


def annualized_contribution(state: PlanState) -> float:
    """Steady-state yearly employee contribution, capped at the elective-deferral limit."""
    return min(per_paycheck_contribution(state) * state.payFrequency, ELECTIVE_DEFERRAL_LIMIT)


def annualized_employer_match(state: PlanState) -> float:
    return matchable_per_paycheck(state) * state.payFrequency


def future_value_of_contributions(monthly_contribution: float, monthly_return: float, total_months: int) -> float:
    """Future value of a level monthly annuity; a zero rate degrades to the plain sum."""
    if monthly_return == 0:
        return monthly_contribution * total_months
    return monthly_contribution * ((1 + monthly_return) ** total_months - 1) / monthly_return


def project_retirement(
    state: PlanState,
    current_age: int,
    retirement_age: int,
    annual_return_rate: float = DEFAULT_ANNUAL_RETURN_RATE,
) -> RetirementProjection:
    if retirement_age <= current_age:
        raise InvalidHorizon(current_age, retirement_age)
    if not math.isfinite(annual_return_rate) or annual_return_rate <= -1:
        raise InvalidState("annualReturnRate", annual_return_rate, "must be finite and above -100%")

    real_current_balance = (
        state.currentTotalBalance + state.ytdUserContribution + state.ytdEmployerMatch
    )

    annual_contribution = annualized_contribution(state)
    annual_match = annualized_employer_match(state)
    annual_total = min(annual_contribution + annual_match, COMBINED_ANNUAL_LIMIT)

    years_to_retirement = retirement_age - current_age
    total_months = years_to_retirement * 12
    monthly_return = annual_return_rate / 12
    monthly_contribution = annual_total / 12

    try:
        fv_balance = real_current_balance * (1 + annual_return_rate) ** years_to_retirement
        fv_contributions = future_value_of_contributions(monthly_contribution, monthly_return, total_months)
    except OverflowError as exc:
        raise InvalidState("yearsToRetirement", years_to_retirement, "projection overflowed") from exc
    total_at_retirement = fv_balance + fv_contributions

    if not math.isfinite(total_at_retirement):
        raise InvalidState("totalAtRetirement", total_at_retirement, "projection overflowed")

    # remaining paychecks this year, then full annualized years until retirement
    full_years = years_to_retirement - 1
    contributions_bucket = require_finite(
        "futureContributions",
        per_paycheck_contribution(state) * state.remainingPaychecks + annual_contribution * full_years,
    )
    match_bucket = require_finite(
        "futureEmployerMatch",
        matchable_per_paycheck(state) * state.remainingPaychecks + annual_match * full_years,
    )
    growth_bucket = require_finite(
        "growth",
        total_at_retirement - (real_current_balance + contributions_bucket + match_bucket),
    )

    return RetirementProjection(
        currentAge=current_age,
        retirementAge=retirement_age,
        annualReturnRate=annual_return_rate,
        yearsToRetirement=years_to_retirement,
        realCurrentBalance=real_current_balance,
        annualizedContribution=annual_contribution,
        annualizedEmployerMatch=annual_match,
        annualTotalForProjection=annual_total,
        monthlyContribution=monthly_contribution,
        futureValueOfBalance=fv_balance,
        futureValueOfContributions=fv_contributions,
        totalAtRetirement=total_at_retirement,
        buckets=ProjectionBuckets(
            currentBalance=real_current_balance,
            futureContributions=contributions_bucket,
            futureEmployerMatch=match_bucket,
            growth=growth_bucket,
        ),
    )


__all__ = [
    "annualized_contribution",
    "annualized_employer_match",
    "future_value_of_contributions",
    "project_retirement",
]
