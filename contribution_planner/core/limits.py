"""Statutory limits and plan rates used by the calculation engine (2025 plan year)."""

# IRS elective-deferral limit on the employee's own contributions
ELECTIVE_DEFERRAL_LIMIT = 23500.0

# IRS Section 415(c) limit on employee + employer contributions combined
COMBINED_ANNUAL_LIMIT = 70000.0

# Employer matches 100% of contributions up to 4% of gross pay
EMPLOYER_MATCH_RATE = 0.04
EMPLOYER_MATCH_MULTIPLIER = 1.0

DEFAULT_ANNUAL_RETURN_RATE = 0.07

# UI simulation ceiling for percent mode; not a legal cap
MAX_PERCENT_CONTRIBUTION = 100.0

__all__ = [
    "ELECTIVE_DEFERRAL_LIMIT",
    "COMBINED_ANNUAL_LIMIT",
    "EMPLOYER_MATCH_RATE",
    "EMPLOYER_MATCH_MULTIPLIER",
    "DEFAULT_ANNUAL_RETURN_RATE",
    "MAX_PERCENT_CONTRIBUTION",
]
