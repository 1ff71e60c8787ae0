from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from savings_calculators.validation.checks import validate_compound_inputs

from .inputs import CompoundInputs
from .rates import effective_annual_rate, monthly_rate_from_nominal

logger = logging.getLogger(__name__)

YEARLY_COLUMNS = ["year", "starting_balance", "additions", "interest", "ending_balance"]
MONTHLY_COLUMNS = ["year", "month", "starting_balance", "addition", "interest", "ending_balance"]


@dataclass
class CompoundResult:
    end_balance: float
    total_interest: float
    total_additions: float
    total_contributions: float  # initial + additions
    growth_multiple: float
    effective_annual_rate_pct: float
    schedule: pd.DataFrame
    monthly_schedule: pd.DataFrame


def _addition_for_month(inputs: CompoundInputs, base: float, month_idx: int) -> float:
    """Monthly addition after contribution growth and the initial delay."""
    if month_idx < inputs.delay_months():
        return 0.0

    growth_pct = inputs.contribution_growth_annual_pct
    if growth_pct <= 0:
        return base

    factor = 1 + growth_pct / 100.0
    if inputs.contribution_growth_frequency.lower() == "monthly":
        # 12 months of smooth growth compound to the annual factor
        return base * factor ** (month_idx / 12.0)
    return base * factor ** (month_idx // 12)


def compute_compound_growth(inputs: CompoundInputs) -> CompoundResult:
    """Compound growth with optional regular monthly additions.

    The chosen compounding frequency is converted into an equivalent monthly
    rate and the balance is walked month by month. Yearly rows aggregate the
    monthly rows so schedules and totals always agree.
    """
    validate_compound_inputs(inputs)
    inputs = inputs.sanitized()

    total_months = inputs.total_months()
    apr = inputs.annual_interest_rate_pct / 100.0
    monthly_rate = monthly_rate_from_nominal(apr, inputs.frequency)
    add_at_start = inputs.contribution_timing.lower() == "start"

    principal = float(inputs.initial_investment)
    base_addition = float(inputs.regular_addition)

    balance = principal
    total_interest = 0.0
    total_additions = 0.0
    monthly_records: list[dict] = []
    yearly_records: list[dict] = []

    month_idx = 0
    for year in range(1, -(-total_months // 12) + 1):
        months_this_year = min(12, total_months - month_idx)
        year_start_balance = balance
        interest_this_year = 0.0
        additions_this_year = 0.0

        for month in range(1, months_this_year + 1):
            starting = balance
            addition = _addition_for_month(inputs, base_addition, month_idx)

            if add_at_start:
                balance += addition
                interest = balance * monthly_rate
                balance += interest
            else:
                # the addition earns nothing until next month
                interest = balance * monthly_rate
                balance += interest
                balance += addition

            additions_this_year += addition
            interest_this_year += interest
            total_additions += addition
            total_interest += interest

            monthly_records.append(
                {
                    "year": year,
                    "month": month,
                    "starting_balance": starting,
                    "addition": addition,
                    "interest": interest,
                    "ending_balance": balance,
                }
            )
            month_idx += 1

        yearly_records.append(
            {
                "year": year,
                "starting_balance": year_start_balance,
                "additions": additions_this_year,
                "interest": interest_this_year,
                "ending_balance": balance,
            }
        )

    logger.debug("Compound growth over %d months ended at %.2f", total_months, balance)

    return CompoundResult(
        end_balance=balance,
        total_interest=total_interest,
        total_additions=total_additions,
        total_contributions=principal + total_additions,
        growth_multiple=balance / principal if principal > 0 else 0.0,
        effective_annual_rate_pct=effective_annual_rate(apr, inputs.frequency) * 100,
        schedule=pd.DataFrame.from_records(yearly_records, columns=YEARLY_COLUMNS).set_index("year"),
        monthly_schedule=pd.DataFrame.from_records(monthly_records, columns=MONTHLY_COLUMNS),
    )
