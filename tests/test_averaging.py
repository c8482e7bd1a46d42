"""Tests for rate averaging (compound and simple)."""

from datetime import date

import pytest

from fixings.averaging import AccrualPeriod, RateAveraging, average
from fixings.errors import EmptyAveragingWindow, InvalidAccrualFraction, InvalidAccrualPeriod


def test_single_period_compound_equals_simple() -> None:
    """One period: (1 + a*r) - 1 = a*r for both conventions."""
    periods = [(0.5, 0.04)]
    compound = average(RateAveraging.COMPOUND, periods)
    simple = average(RateAveraging.SIMPLE, periods)
    assert abs(compound - 0.02) < 1e-15
    assert abs(simple - 0.02) < 1e-15


def test_simple_averaging_example() -> None:
    """0.5*0.02 + 0.5*0.03 = 0.025."""
    assert abs(average(RateAveraging.SIMPLE, [(0.5, 0.02), (0.5, 0.03)]) - 0.025) < 1e-15


def test_compound_averaging_example() -> None:
    """(1.01)(1.015) - 1 = 0.02515."""
    assert abs(average(RateAveraging.COMPOUND, [(0.5, 0.02), (0.5, 0.03)]) - 0.02515) < 1e-15


def test_compound_exceeds_simple_for_positive_rates() -> None:
    periods = [(0.5, 0.04), (0.5, 0.05), (0.5, 0.06)]
    assert average(RateAveraging.COMPOUND, periods) > average(RateAveraging.SIMPLE, periods)


def test_permutation_does_not_change_aggregate() -> None:
    """Reordering periods changes the result by rounding only."""
    periods = [(0.25, 0.01), (0.5, 0.03), (0.25, 0.05), (0.1, -0.002)]
    shuffled = [periods[2], periods[0], periods[3], periods[1]]
    for averaging in RateAveraging:
        assert abs(average(averaging, periods) - average(averaging, shuffled)) < 1e-14


def test_zero_fraction_is_allowed() -> None:
    assert average(RateAveraging.COMPOUND, [(0.0, 0.05), (0.5, 0.02)]) == pytest.approx(0.01)


def test_empty_window_raises() -> None:
    for averaging in RateAveraging:
        with pytest.raises(EmptyAveragingWindow, match="empty"):
            average(averaging, [])


def test_empty_window_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        average(RateAveraging.SIMPLE, iter(()))


def test_negative_fraction_raises() -> None:
    with pytest.raises(InvalidAccrualFraction, match=">= 0"):
        average(RateAveraging.COMPOUND, [(0.5, 0.02), (-0.1, 0.03)])
    with pytest.raises(InvalidAccrualFraction):
        average(RateAveraging.SIMPLE, [(-0.5, 0.02)])


def test_accrual_period_validation() -> None:
    """Zero-length periods and negative fractions are rejected."""
    AccrualPeriod(date(2024, 1, 15), date(2024, 7, 15), 0.5)
    with pytest.raises(InvalidAccrualPeriod):
        AccrualPeriod(date(2024, 1, 15), date(2024, 1, 15), 0.0)
    with pytest.raises(InvalidAccrualPeriod):
        AccrualPeriod(date(2024, 7, 15), date(2024, 1, 15), 0.5)
    with pytest.raises(InvalidAccrualFraction):
        AccrualPeriod(date(2024, 1, 15), date(2024, 7, 15), -0.5)
