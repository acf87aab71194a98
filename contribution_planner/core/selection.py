"""Contribution selection held by a form while the user toggles modes.

Each mode keeps its own saved value so switching back and forth does not
lose what the user typed. Only the resolved ``(mode, value)`` pair is ever
handed to the calculations or the update endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from contribution_planner.core.paycheck import fixed_to_percent, percent_to_fixed
from contribution_planner.schemas.plan_state import ContributionMode, ContributionUpdate, PlanState


@dataclass(frozen=True)
class ContributionSelection:
    mode: ContributionMode
    saved_percent: Optional[float] = None
    saved_fixed: Optional[float] = None

    @classmethod
    def from_state(cls, state: PlanState) -> "ContributionSelection":
        if state.contributionMode == ContributionMode.PERCENT:
            return cls(mode=state.contributionMode, saved_percent=state.contributionValue)
        return cls(mode=state.contributionMode, saved_fixed=state.contributionValue)

    def resolved(self) -> Tuple[ContributionMode, float]:
        value = self.saved_percent if self.mode == ContributionMode.PERCENT else self.saved_fixed
        return self.mode, value or 0.0

    def with_value(self, value: float) -> "ContributionSelection":
        if self.mode == ContributionMode.PERCENT:
            return replace(self, saved_percent=value)
        return replace(self, saved_fixed=value)

    def switch_mode(self, mode: ContributionMode, state: PlanState) -> "ContributionSelection":
        """Switch to ``mode``, seeding an unsaved value from the other mode's equivalent."""
        if mode == self.mode:
            return self

        if mode == ContributionMode.FIXED and self.saved_fixed is None:
            seeded = percent_to_fixed(self.saved_percent or 0.0, state.salary, state.payFrequency)
            return replace(self, mode=mode, saved_fixed=seeded)

        if mode == ContributionMode.PERCENT and self.saved_percent is None:
            if state.salary == 0:
                seeded = 0.0
            else:
                seeded = fixed_to_percent(self.saved_fixed or 0.0, state.salary, state.payFrequency)
            return replace(self, mode=mode, saved_percent=seeded)

        return replace(self, mode=mode)

    def to_update(self) -> ContributionUpdate:
        mode, value = self.resolved()
        return ContributionUpdate(contributionMode=mode, contributionValue=value)


__all__ = ["ContributionSelection"]
