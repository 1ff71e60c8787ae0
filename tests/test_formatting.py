import numpy as np
import pytest

from savings_calculators.core.formatting import (
    clamp,
    compute_percents,
    finite_or_zero,
    format_percent_loose,
    round2,
    to_currency,
)


def test_round2_rounds_half_up():
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.12
    assert round2(1.234) == 1.23


def test_round2_vectorised():
    np.testing.assert_allclose(round2(np.array([0.125, 1.234, 10.0])), [0.13, 1.23, 10.0])


def test_clamp_and_finite():
    assert clamp(1.5, 0, 1) == 1
    assert clamp(-0.2, 0, 1) == 0
    assert finite_or_zero(float("nan")) == 0.0
    assert finite_or_zero(3) == 3.0


def test_to_currency():
    assert to_currency(1234.5) == "$1,234.50"
    assert to_currency(-3) == "-$3.00"
    assert to_currency(0) == "$0.00"


def test_format_percent_loose():
    assert format_percent_loose(5.0) == "5"
    assert format_percent_loose(1234.5) == "1,234.5"
    assert format_percent_loose(0.1234567) == "0.123457"
    assert format_percent_loose(float("nan")) == "0"


def test_compute_percents_sums_to_hundred():
    assert compute_percents([1, 1, 1]) == [34, 33, 33]
    assert compute_percents([50, 25, 25]) == [50, 25, 25]
    assert sum(compute_percents([3, 7, 11])) == 100


def test_compute_percents_without_positive_total():
    assert compute_percents([0, 0]) == [0, 0]
    assert compute_percents([]) == []


@pytest.mark.parametrize("values", [[1, 2], [0.3, 0.3, 0.4], [10_000, 1, 1]])
def test_compute_percents_gives_remainder_to_largest_fraction(values):
    out = compute_percents(values)
    assert sum(out) == 100
    raw = [v / sum(values) * 100 for v in values]
    for pct, exact in zip(out, raw):
        assert abs(pct - exact) < 1
