from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from savings_calculators.validation.checks import validate_balance_over_time_inputs

from .engine import daily_savings_path, inflation_rate, monthly_savings_path
from .formatting import round2
from .inputs import BalanceOverTimeInputs
from .savings import real_value

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ["index", "label", "deposits", "interest", "balance", "real_balance"]

# chart period -> (label prefix, points per year)
CHART_PERIODS = {
    "monthly": ("M", 12),
    "quarterly": ("Q", 4),
    "yearly": ("Y", 1),
}


@dataclass
class BalanceOverTimeResult:
    end_balance: float
    real_end_balance: float
    total_deposits_ex_initial: float
    total_interest: float
    series: pd.DataFrame


def _period_number(path: pd.DataFrame, points_per_year: int) -> pd.Series:
    """1-based chart period of each monthly row, counted across the whole horizon."""
    months_per_point = 12 // points_per_year
    within_year = (path["month"].astype(int) - 1) // months_per_point
    return (path["year"].astype(int) - 1) * points_per_year + within_year + 1


def build_series(path: pd.DataFrame, chart_period: str, inflation: float) -> pd.DataFrame:
    prefix, points_per_year = CHART_PERIODS[chart_period.lower()]
    if path.empty:
        return pd.DataFrame(columns=SERIES_COLUMNS)

    grouped = (
        path.assign(period=_period_number(path, points_per_year))
        .groupby("period", sort=True)
        .agg(deposits=("deposit", "sum"), interest=("interest", "sum"), balance=("ending_balance", "last"))
    )

    series = pd.DataFrame(
        {
            "index": grouped.index.to_numpy() - 1,
            "label": [f"{prefix}{n}" for n in grouped.index],
            "deposits": round2(grouped["deposits"].to_numpy(dtype=float)),
            "interest": round2(grouped["interest"].to_numpy(dtype=float)),
            "balance": round2(grouped["balance"].to_numpy(dtype=float)),
        }
    )
    if inflation > 0:
        years_elapsed = (series["index"] + 1) / points_per_year
        series["real_balance"] = round2(series["balance"] / np.power(1 + inflation, years_elapsed))
    else:
        series["real_balance"] = series["balance"]
    return series[SERIES_COLUMNS]


def compute_balance_over_time(inputs: BalanceOverTimeInputs) -> BalanceOverTimeResult:
    """Projected balance at the end of every chart period.

    Daily compounding is simulated one day at a time at apr / 365; every other
    frequency runs month by month on its equivalent monthly rate.
    """
    validate_balance_over_time_inputs(inputs)
    inputs = inputs.sanitized()

    years = inputs.whole_years()
    inflation = inflation_rate(inputs)
    if inputs.frequency.lower() == "daily":
        path = daily_savings_path(inputs)
    else:
        path = monthly_savings_path(inputs)

    if path.empty:
        balance = float(inputs.initial_deposit)
    else:
        balance = float(path["ending_balance"].iloc[-1])

    end_balance = round2(balance)
    logger.debug(
        "Balance over %d years (%s, %s points) ended at %.2f", years, inputs.frequency, inputs.chart_period, end_balance
    )

    return BalanceOverTimeResult(
        end_balance=end_balance,
        real_end_balance=real_value(end_balance, inflation, years),
        total_deposits_ex_initial=round2(float(path["deposit"].sum())),
        total_interest=round2(float(path["interest"].sum())),
        series=build_series(path, inputs.chart_period, inflation),
    )
