from __future__ import annotations

from savings_calculators.core.inputs import BalanceOverTimeInputs, CompoundInputs, SavingsInputs
from savings_calculators.core.rates import FREQUENCIES


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _one_of(value: str, options, label: str) -> None:
    _require(
        isinstance(value, str) and value.lower() in options,
        f"{label} must be one of {', '.join(repr(o) for o in options)}.",
    )


def validate_frequency(frequency: str) -> None:
    _one_of(frequency, FREQUENCIES, "Compounding frequency")


def validate_compound_inputs(inputs: CompoundInputs) -> None:
    validate_frequency(inputs.frequency)
    _one_of(inputs.horizon_unit, ("years", "months"), "Horizon unit")
    _one_of(inputs.contribution_timing, ("start", "end"), "Contribution timing")
    _one_of(inputs.contribution_growth_frequency, ("annual", "monthly"), "Contribution growth frequency")


def validate_savings_inputs(inputs: SavingsInputs) -> None:
    validate_frequency(inputs.frequency)
    _require(
        isinstance(inputs.contributions_at_period_end, bool),
        "Contribution timing flag must be True or False.",
    )


def validate_balance_over_time_inputs(inputs: BalanceOverTimeInputs) -> None:
    validate_savings_inputs(inputs)
    _one_of(inputs.chart_period, ("monthly", "quarterly", "yearly"), "Chart period")
