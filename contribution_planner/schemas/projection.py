"""Response contracts for year-end, retirement, and input-bound calculations."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from contribution_planner.schemas.plan_state import ContributionMode


class YearEndSummary(BaseModel):
    """Current-year figures.

    ``projectedUserContribution`` is the raw projection and may exceed the
    elective-deferral limit; ``exceedsAnnualLimit`` flags that case while
    ``combinedProjectedTotal`` is always capped at the combined limit.
    """

    model_config = ConfigDict(frozen=True)

    perPaycheckContribution: float
    perPaycheckMatchCap: float
    matchablePerPaycheck: float
    projectedUserContribution: float
    projectedEmployerMatch: float
    exceedsAnnualLimit: bool
    uncappedCombinedTotal: float
    combinedProjectedTotal: float


class ProjectionBuckets(BaseModel):
    """Additive display components of the total at retirement."""

    model_config = ConfigDict(frozen=True)

    currentBalance: float
    futureContributions: float
    futureEmployerMatch: float
    growth: float

    @property
    def total(self) -> float:
        return self.currentBalance + self.futureContributions + self.futureEmployerMatch + self.growth


class RetirementProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    currentAge: int
    retirementAge: int
    annualReturnRate: float
    yearsToRetirement: int
    realCurrentBalance: float
    annualizedContribution: float
    annualizedEmployerMatch: float
    annualTotalForProjection: float
    monthlyContribution: float
    futureValueOfBalance: float
    futureValueOfContributions: float
    totalAtRetirement: float
    buckets: ProjectionBuckets


class ContributionBounds(BaseModel):
    """Slider/input range for a contribution mode (not a statutory cap)."""

    model_config = ConfigDict(frozen=True)

    mode: ContributionMode
    minValue: float = 0.0
    maxValue: float
    step: float


class ProjectionQuery(BaseModel):
    """Query parameters of the projection endpoint; unset values fall back to settings."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    currentAge: Optional[int] = Field(default=None, ge=0, le=120)
    retirementAge: Optional[int] = Field(default=None, ge=0, le=120)
    annualReturnRate: Optional[float] = Field(default=None, ge=-0.99, le=1.0)


__all__ = [
    "YearEndSummary",
    "ProjectionBuckets",
    "RetirementProjection",
    "ContributionBounds",
    "ProjectionQuery",
]
