from __future__ import annotations

import math
from typing import Optional

CONTINUOUS = "continuously"

# Compounding periods per year; None marks continuous compounding.
FREQUENCIES: dict[str, Optional[int]] = {
    "annually": 1,
    "semiannually": 2,
    "quarterly": 4,
    "monthly": 12,
    "semimonthly": 24,
    "biweekly": 26,
    "weekly": 52,
    "daily": 365,
    CONTINUOUS: None,
}


def periods_per_year(frequency: str) -> Optional[int]:
    key = frequency.lower()
    if key not in FREQUENCIES:
        raise ValueError(f"Unknown compounding frequency: {frequency!r}.")
    return FREQUENCIES[key]


def monthly_rate_from_nominal(apr: float, frequency: str) -> float:
    """Equivalent monthly rate for a nominal annual rate compounded at `frequency`."""
    periods = periods_per_year(frequency)
    if not math.isfinite(apr):
        return 0.0
    if periods is None:
        return math.exp(apr / 12.0) - 1
    return (1 + apr / periods) ** (periods / 12.0) - 1


def effective_annual_rate(apr: float, frequency: str) -> float:
    """APY: the annual growth actually earned once compounding is applied."""
    periods = periods_per_year(frequency)
    if not math.isfinite(apr):
        return 0.0
    if periods is None:
        return math.exp(apr) - 1
    return (1 + apr / periods) ** periods - 1
