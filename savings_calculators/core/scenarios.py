from __future__ import annotations

from .inputs import BalanceOverTimeInputs, CompoundInputs, SavingsInputs


def default_compound_inputs() -> CompoundInputs:
    """Starting point for the compound interest calculator."""
    return CompoundInputs(
        initial_investment=10_000,
        regular_addition=100,
        annual_interest_rate_pct=5.0,
        frequency="monthly",
        horizon_unit="years",
        horizon_value=10,
    )


def default_savings_inputs() -> SavingsInputs:
    return SavingsInputs(
        initial_deposit=20_000,
        annual_contribution=5_000,
        annual_contribution_growth_pct=3.0,
        monthly_contribution=0.0,
        monthly_contribution_growth_pct=0.0,
        annual_interest_rate_pct=3.0,
        frequency="daily",
        years=10,
        tax_rate_pct=25.0,
        inflation_rate_pct=3.0,
        contributions_at_period_end=False,
    )


def default_balance_over_time_inputs() -> BalanceOverTimeInputs:
    return BalanceOverTimeInputs(
        initial_deposit=20_000,
        monthly_contribution=500,
        annual_interest_rate_pct=4.0,
        frequency="monthly",
        years=10,
        tax_rate_pct=0.0,
        inflation_rate_pct=2.5,
        chart_period="yearly",
    )
