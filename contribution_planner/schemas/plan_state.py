"""Data contracts for the plan state and contribution updates."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contribution_planner.core.limits import MAX_PERCENT_CONTRIBUTION


class ContributionMode(str, Enum):
    PERCENT = "PERCENT"
    FIXED = "FIXED"


class PlanState(BaseModel):
    """Financial snapshot every calculation runs against.

    ``grossPayPerPeriod`` is supplied independently of ``salary / payFrequency``;
    the two are never reconciled here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    salary: float = Field(..., ge=0, description="Annual gross salary.")
    ytdUserContribution: float = Field(0.0, ge=0)
    ytdEmployerMatch: float = Field(0.0, ge=0)
    currentTotalBalance: float = Field(
        0.0, ge=0, description="Prior-period ending balance of the account."
    )
    contributionMode: ContributionMode = ContributionMode.PERCENT
    contributionValue: float = Field(
        0.0,
        ge=0,
        description="Percent of pay in PERCENT mode, amount per paycheck in FIXED mode.",
    )
    payFrequency: int = Field(26, gt=0, description="Paychecks per year.")
    remainingPaychecks: int = Field(0, ge=0)
    grossPayPerPeriod: float = Field(..., gt=0)

    @model_validator(mode="after")
    def check_remaining_paychecks(self) -> "PlanState":
        if self.remainingPaychecks > self.payFrequency:
            raise ValueError("remainingPaychecks cannot exceed payFrequency")
        return self


DEFAULT_PLAN_STATE = PlanState(
    salary=104000.0,
    ytdUserContribution=10500.0,
    ytdEmployerMatch=2000.0,
    currentTotalBalance=58500.0,
    contributionMode=ContributionMode.PERCENT,
    contributionValue=5.0,
    payFrequency=26,
    remainingPaychecks=5,
    grossPayPerPeriod=4000.0,
)


class ContributionUpdate(BaseModel):
    """Payload accepted by the contribution update endpoint."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    contributionMode: ContributionMode
    # strict keeps strings and booleans from being coerced into numbers
    contributionValue: float = Field(..., ge=0, strict=True)

    @model_validator(mode="after")
    def check_percent_ceiling(self) -> "ContributionUpdate":
        if (
            self.contributionMode == ContributionMode.PERCENT
            and self.contributionValue > MAX_PERCENT_CONTRIBUTION
        ):
            raise ValueError("Percentage cannot exceed 100%")
        return self

    def apply_to(self, state: PlanState) -> PlanState:
        """Return a copy of ``state`` carrying this contribution selection."""
        return state.model_copy(
            update={
                "contributionMode": self.contributionMode,
                "contributionValue": self.contributionValue,
            }
        )


__all__ = [
    "ContributionMode",
    "PlanState",
    "DEFAULT_PLAN_STATE",
    "ContributionUpdate",
]
