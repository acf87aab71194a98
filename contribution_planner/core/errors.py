"""Exception hierarchy for the contribution planner."""

from __future__ import annotations

from typing import Optional


class ContributionPlannerError(Exception):
    """Base exception for all contribution planner errors."""


class InvalidHorizon(ContributionPlannerError, ValueError):
    """Retirement age is not strictly after the current age."""

    def __init__(self, current_age: int, retirement_age: int) -> None:
        self.current_age = current_age
        self.retirement_age = retirement_age
        super().__init__(
            f"retirementAge ({retirement_age}) must be greater than currentAge ({current_age})"
        )


class ArithmeticDegenerate(ContributionPlannerError, ArithmeticError):
    """A conversion would divide by zero (zero salary or pay frequency)."""


class InvalidState(ContributionPlannerError, ValueError):
    """A calculation received a structurally invalid number."""

    def __init__(self, field: str, value: object, reason: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        message = f"{field}={value!r} is invalid"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class StateStoreError(ContributionPlannerError):
    """The persisted plan state could not be read or written."""
