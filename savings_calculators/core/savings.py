from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from savings_calculators.validation.checks import validate_savings_inputs

from .engine import inflation_rate, monthly_savings_path
from .formatting import round2
from .inputs import SavingsInputs

logger = logging.getLogger(__name__)


@dataclass
class SavingsResult:
    end_balance: float
    total_contributions: float
    total_contributions_ex_initial: float
    total_interest: float
    schedule: pd.DataFrame
    monthly_schedule: pd.DataFrame
    real_end_balance: float


def real_value(nominal: float, inflation: float, years: float) -> float:
    """Deflate a future balance back to today's purchasing power."""
    if inflation <= 0:
        return nominal
    return round2(nominal / (1 + inflation) ** years)


def yearly_rollup(path: pd.DataFrame) -> pd.DataFrame:
    return (
        path.groupby("year", sort=True)
        .agg(deposit=("deposit", "sum"), interest=("interest", "sum"), ending_balance=("ending_balance", "last"))
    )


def compute_savings(inputs: SavingsInputs) -> SavingsResult:
    """Savings projection with annual and monthly contributions, tax on interest and inflation.

    Tax is taken out of each month's interest before it is credited. Inflation
    never touches the nominal schedule; it only produces `real_end_balance`.
    """
    validate_savings_inputs(inputs)
    inputs = inputs.sanitized()

    years = inputs.whole_years()
    path = monthly_savings_path(inputs)

    initial = float(inputs.initial_deposit)
    if path.empty:
        balance = initial
    else:
        balance = float(path["ending_balance"].iloc[-1])
    deposits = float(path["deposit"].sum())
    interest = float(path["interest"].sum())

    monthly_schedule = path.copy()
    monthly_schedule[["deposit", "interest", "ending_balance"]] = round2(
        monthly_schedule[["deposit", "interest", "ending_balance"]].astype(float)
    )
    schedule = round2(yearly_rollup(path).astype(float))

    end_balance = round2(balance)
    logger.debug("Savings over %d years ended at %.2f", years, end_balance)

    return SavingsResult(
        end_balance=end_balance,
        total_contributions=round2(initial + deposits),
        total_contributions_ex_initial=round2(deposits),
        total_interest=round2(interest),
        schedule=schedule,
        monthly_schedule=monthly_schedule,
        real_end_balance=real_value(end_balance, inflation_rate(inputs), years),
    )
