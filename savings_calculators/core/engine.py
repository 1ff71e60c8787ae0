from __future__ import annotations

import math

import pandas as pd

from .inputs import SavingsInputs
from .rates import monthly_rate_from_nominal

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = round(DAYS_PER_YEAR / 12)  # 30

PATH_COLUMNS = ["year", "month", "deposit", "interest", "ending_balance"]


def _path_frame(records: list[dict]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(
            {
                "year": pd.Series(dtype="int64"),
                "month": pd.Series(dtype="int64"),
                "deposit": pd.Series(dtype="float64"),
                "interest": pd.Series(dtype="float64"),
                "ending_balance": pd.Series(dtype="float64"),
            }
        )
    return pd.DataFrame.from_records(records, columns=PATH_COLUMNS)


def tax_rate(inputs: SavingsInputs) -> float:
    return inputs.tax_rate_pct / 100.0


def inflation_rate(inputs: SavingsInputs) -> float:
    return inputs.inflation_rate_pct / 100.0


def _growth_factors(inputs: SavingsInputs) -> tuple[float, float]:
    """(annual, monthly) contribution multipliers applied after each year."""
    return (
        1 + inputs.annual_contribution_growth_pct / 100.0,
        1 + inputs.monthly_contribution_growth_pct / 100.0,
    )


def monthly_savings_path(inputs: SavingsInputs) -> pd.DataFrame:
    """Walk the account month by month at the frequency-equivalent monthly rate.

    Expects sanitized inputs. Values are left unrounded; callers round for
    presentation.
    """
    apr = inputs.annual_interest_rate_pct / 100.0
    rate = monthly_rate_from_nominal(apr, inputs.frequency)
    tax = tax_rate(inputs)
    annual_growth, monthly_growth = _growth_factors(inputs)
    at_end = inputs.contributions_at_period_end

    balance = float(inputs.initial_deposit)
    annual_contribution = float(inputs.annual_contribution)
    monthly_contribution = float(inputs.monthly_contribution)

    records: list[dict] = []
    for year in range(1, inputs.whole_years() + 1):
        for month in range(1, 13):
            deposit = 0.0

            if not at_end:
                if month == 1:
                    balance += annual_contribution
                    deposit += annual_contribution
                balance += monthly_contribution
                deposit += monthly_contribution

            interest = balance * rate * (1 - tax)
            balance += interest

            if at_end:
                balance += monthly_contribution
                deposit += monthly_contribution
                if month == 12:
                    balance += annual_contribution
                    deposit += annual_contribution

            records.append(
                {
                    "year": year,
                    "month": month,
                    "deposit": deposit,
                    "interest": interest,
                    "ending_balance": balance,
                }
            )

        annual_contribution *= annual_growth
        monthly_contribution *= monthly_growth

    return _path_frame(records)


def daily_savings_path(inputs: SavingsInputs) -> pd.DataFrame:
    """Day-by-day walk at the simple daily rate apr / 365, rolled up into months.

    Monthly contributions post every 30th day (days 30..360). Days 361-365 are
    counted in month 12 so each year still closes on its last day.
    """
    apr = inputs.annual_interest_rate_pct / 100.0
    rate = apr / DAYS_PER_YEAR
    tax = tax_rate(inputs)
    annual_growth, monthly_growth = _growth_factors(inputs)
    at_end = inputs.contributions_at_period_end

    balance = float(inputs.initial_deposit)
    annual_contribution = float(inputs.annual_contribution)
    monthly_contribution = float(inputs.monthly_contribution)

    records: list[dict] = []
    for year in range(1, inputs.whole_years() + 1):
        for day in range(1, DAYS_PER_YEAR + 1):
            month_boundary = day % DAYS_PER_MONTH == 0
            deposit = 0.0

            if not at_end:
                if day == 1:
                    balance += annual_contribution
                    deposit += annual_contribution
                if month_boundary:
                    balance += monthly_contribution
                    deposit += monthly_contribution

            interest = balance * rate * (1 - tax)
            balance += interest

            if at_end:
                if month_boundary:
                    balance += monthly_contribution
                    deposit += monthly_contribution
                if day == DAYS_PER_YEAR:
                    balance += annual_contribution
                    deposit += annual_contribution

            records.append(
                {
                    "year": year,
                    "month": min(math.ceil(day / DAYS_PER_MONTH), 12),
                    "deposit": deposit,
                    "interest": interest,
                    "ending_balance": balance,
                }
            )

        annual_contribution *= annual_growth
        monthly_contribution *= monthly_growth

    days = _path_frame(records)
    if days.empty:
        return days
    return (
        days.groupby(["year", "month"], sort=True)
        .agg(deposit=("deposit", "sum"), interest=("interest", "sum"), ending_balance=("ending_balance", "last"))
        .reset_index()
    )
