import math

import pytest

from savings_calculators.core.rates import effective_annual_rate, monthly_rate_from_nominal, periods_per_year


def test_periods_per_year_known_frequencies():
    assert periods_per_year("annually") == 1
    assert periods_per_year("biweekly") == 26
    assert periods_per_year("Daily") == 365
    assert periods_per_year("continuously") is None


def test_unknown_frequency_raises():
    with pytest.raises(ValueError):
        periods_per_year("fortnightly-ish")


def test_monthly_compounding_is_apr_over_twelve():
    assert monthly_rate_from_nominal(0.12, "monthly") == pytest.approx(0.01)


def test_annual_compounding_spreads_rate_geometrically():
    assert monthly_rate_from_nominal(0.12, "annually") == pytest.approx(1.12 ** (1 / 12) - 1)
    assert (1 + monthly_rate_from_nominal(0.12, "annually")) ** 12 == pytest.approx(1.12)


def test_continuous_compounding():
    assert monthly_rate_from_nominal(0.12, "continuously") == pytest.approx(math.exp(0.01) - 1)
    assert effective_annual_rate(0.05, "continuously") == pytest.approx(math.exp(0.05) - 1)


def test_effective_annual_rate_exceeds_apr_with_more_compounding():
    assert effective_annual_rate(0.12, "annually") == pytest.approx(0.12)
    assert effective_annual_rate(0.12, "monthly") == pytest.approx(1.01**12 - 1)
    assert effective_annual_rate(0.12, "daily") > effective_annual_rate(0.12, "monthly")


def test_non_finite_rate_is_zero():
    assert monthly_rate_from_nominal(float("nan"), "monthly") == 0.0
    assert effective_annual_rate(float("inf"), "quarterly") == 0.0
