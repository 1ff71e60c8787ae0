import pytest

from savings_calculators.core.balance_over_time import compute_balance_over_time
from savings_calculators.core.compound import compute_compound_growth
from savings_calculators.core.savings import compute_savings
from savings_calculators.core.scenarios import (
    default_balance_over_time_inputs,
    default_compound_inputs,
    default_savings_inputs,
)
from savings_calculators.validation.checks import (
    validate_balance_over_time_inputs,
    validate_compound_inputs,
    validate_savings_inputs,
)


def test_defaults_pass_validation():
    validate_compound_inputs(default_compound_inputs())
    validate_savings_inputs(default_savings_inputs())
    validate_balance_over_time_inputs(default_balance_over_time_inputs())


def test_default_compound_run():
    result = compute_compound_growth(default_compound_inputs())

    assert len(result.schedule) == 10
    assert len(result.monthly_schedule) == 120
    assert result.end_balance > result.total_contributions
    assert result.effective_annual_rate_pct == pytest.approx((1 + 0.05 / 12) ** 12 * 100 - 100)


def test_default_savings_run():
    inputs = default_savings_inputs()
    result = compute_savings(inputs)

    assert len(result.schedule) == inputs.years
    assert result.real_end_balance < result.end_balance


def test_default_balance_over_time_run():
    result = compute_balance_over_time(default_balance_over_time_inputs())

    assert list(result.series.columns) == ["index", "label", "deposits", "interest", "balance", "real_balance"]
    assert result.series["balance"].is_monotonic_increasing


def test_categorical_inputs_are_case_insensitive():
    inputs = default_compound_inputs()
    inputs.frequency = "Quarterly"
    inputs.contribution_timing = "END"
    compute_compound_growth(inputs)


def test_non_bool_timing_flag_rejected():
    inputs = default_savings_inputs()
    inputs.contributions_at_period_end = "yes"
    with pytest.raises(ValueError):
        validate_savings_inputs(inputs)
