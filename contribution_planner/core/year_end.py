"""Year-end projection of employee contributions and employer match.

The projected employee contribution is deliberately left uncapped so callers
can warn when it passes the elective-deferral limit. The combined
(employee + employer) limit is applied only where the two are summed.
"""

from __future__ import annotations

from contribution_planner.core.limits import (
    COMBINED_ANNUAL_LIMIT,
    ELECTIVE_DEFERRAL_LIMIT,
    EMPLOYER_MATCH_MULTIPLIER,
    EMPLOYER_MATCH_RATE,
)
from contribution_planner.core.paycheck import (
    per_paycheck_contribution,
    require_finite,
    require_non_negative,
)
from contribution_planner.schemas.plan_state import PlanState
from contribution_planner.schemas.projection import YearEndSummary


def projected_user_contribution(state: PlanState) -> float:
    """YTD contribution plus the per-paycheck amount for each remaining paycheck."""
    future_contributions = per_paycheck_contribution(state) * state.remainingPaychecks
    return require_finite(
        "projectedUserContribution", state.ytdUserContribution + future_contributions
    )


def per_paycheck_match_cap(gross_pay_per_period: float) -> float:
    require_non_negative("grossPayPerPeriod", gross_pay_per_period)
    return gross_pay_per_period * EMPLOYER_MATCH_RATE


def matchable_per_paycheck(state: PlanState) -> float:
    """Employer match earned on one paycheck.

    The match follows what the employee actually contributes, up to the
    per-paycheck cap.
    """
    matchable = min(per_paycheck_contribution(state), per_paycheck_match_cap(state.grossPayPerPeriod))
    return matchable * EMPLOYER_MATCH_MULTIPLIER


def projected_employer_match(state: PlanState) -> float:
    future_match = matchable_per_paycheck(state) * state.remainingPaychecks
    return require_finite("projectedEmployerMatch", state.ytdEmployerMatch + future_match)


def exceeds_annual_limit(projected_contribution: float) -> bool:
    return projected_contribution > ELECTIVE_DEFERRAL_LIMIT


def combined_projected_total(state: PlanState) -> float:
    return min(
        projected_user_contribution(state) + projected_employer_match(state),
        COMBINED_ANNUAL_LIMIT,
    )


def summarize_year_end(state: PlanState) -> YearEndSummary:
    """Collect every current-year figure in one result.

    The uncapped employee projection and the capped combined total are
    reported side by side so a consumer can show the limit warning next to
    capped totals without recomputing anything.
    """
    per_paycheck = per_paycheck_contribution(state)
    user_total = projected_user_contribution(state)
    match_total = projected_employer_match(state)
    uncapped_combined = require_finite("uncappedCombinedTotal", user_total + match_total)

    return YearEndSummary(
        perPaycheckContribution=per_paycheck,
        perPaycheckMatchCap=per_paycheck_match_cap(state.grossPayPerPeriod),
        matchablePerPaycheck=matchable_per_paycheck(state),
        projectedUserContribution=user_total,
        projectedEmployerMatch=match_total,
        exceedsAnnualLimit=exceeds_annual_limit(user_total),
        uncappedCombinedTotal=uncapped_combined,
        combinedProjectedTotal=min(uncapped_combined, COMBINED_ANNUAL_LIMIT),
    )


__all__ = [
    "projected_user_contribution",
    "per_paycheck_match_cap",
    "matchable_per_paycheck",
    "projected_employer_match",
    "exceeds_annual_limit",
    "combined_projected_total",
    "summarize_year_end",
]
