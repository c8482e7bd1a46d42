"""Tests for calendars, rolling conventions, periods and day counters."""

from datetime import date, timedelta

import pytest

from fixings.dates import (
    Actual360,
    Actual365Fixed,
    BusinessDayConvention,
    Period,
    Thirty360,
    TimeUnit,
    day_counter,
    named_calendar,
    null_calendar,
    target_calendar,
    weekends_only,
)
from fixings.indexes import EquityIndex


def test_weekends_are_holidays() -> None:
    cal = weekends_only()
    assert cal.is_business_day(date(2024, 3, 15))  # Friday
    assert not cal.is_business_day(date(2024, 3, 16))  # Saturday
    assert not cal.is_business_day(date(2024, 3, 17))  # Sunday
    assert null_calendar().is_business_day(date(2024, 3, 16))


def test_target_easter_holidays() -> None:
    """Good Friday and Easter Monday 2024 are TARGET holidays."""
    cal = target_calendar()
    assert not cal.is_business_day(date(2024, 3, 29))
    assert not cal.is_business_day(date(2024, 4, 1))
    assert not cal.is_business_day(date(2024, 12, 25))
    assert cal.is_business_day(date(2024, 4, 2))


def test_valid_fixing_date_matches_business_day() -> None:
    """is_valid_fixing_date(d) == calendar.is_business_day(d) on every day."""
    cal = target_calendar().with_holidays([date(2024, 6, 12)])
    index = EquityIndex(name="SX5E", currency="EUR", fixing_calendar=cal)
    d = date(2024, 1, 1)
    while d < date(2025, 1, 1):
        assert index.is_valid_fixing_date(d) == cal.is_business_day(d)
        d += timedelta(days=1)


def test_adjust_conventions() -> None:
    cal = weekends_only()
    saturday = date(2024, 8, 31)
    assert cal.adjust(saturday, BusinessDayConvention.FOLLOWING) == date(2024, 9, 2)
    assert cal.adjust(saturday, BusinessDayConvention.MODIFIED_FOLLOWING) == date(2024, 8, 30)
    assert cal.adjust(date(2024, 9, 1), BusinessDayConvention.PRECEDING) == date(2024, 8, 30)
    assert cal.adjust(date(2024, 6, 1), BusinessDayConvention.MODIFIED_PRECEDING) == date(2024, 6, 3)
    assert cal.adjust(saturday, BusinessDayConvention.UNADJUSTED) == saturday


def test_advance_business_days() -> None:
    cal = weekends_only()
    assert cal.advance(date(2024, 3, 15), 1) == date(2024, 3, 18)
    assert cal.advance(date(2024, 1, 15), -2) == date(2024, 1, 11)
    # Zero days only adjusts.
    assert cal.advance(date(2024, 3, 16), 0) == date(2024, 3, 18)


def test_advance_months_and_end_of_month() -> None:
    cal = weekends_only()
    assert cal.advance(date(2024, 1, 31), 1, TimeUnit.MONTHS) == date(2024, 2, 29)
    assert cal.advance(date(2024, 1, 15), Period.parse("6M")) == date(2024, 7, 15)
    assert cal.advance(date(2024, 1, 15), Period.parse("1Y")) == date(2025, 1, 15)
    assert cal.advance(date(2024, 4, 30), 1, TimeUnit.MONTHS, end_of_month=True) == date(2024, 5, 31)
    assert cal.advance(date(2024, 3, 15), 1, TimeUnit.WEEKS) == date(2024, 3, 22)


def test_period_parse() -> None:
    assert Period.parse("6M") == Period(6, TimeUnit.MONTHS)
    assert Period.parse("1y") == Period(1, TimeUnit.YEARS)
    assert -Period.parse("2D") == Period(-2, TimeUnit.DAYS)
    assert Period.parse("3M") * 2 == Period(6, TimeUnit.MONTHS)
    assert str(Period(6, TimeUnit.MONTHS)) == "6M"
    with pytest.raises(ValueError, match="cannot parse"):
        Period.parse("six months")


def test_day_counters() -> None:
    start, end = date(2024, 1, 1), date(2024, 7, 1)
    assert Actual360().year_fraction(start, end) == 182 / 360
    assert Actual365Fixed().year_fraction(start, end) == 182 / 365
    assert Thirty360().year_fraction(date(2024, 1, 31), date(2024, 3, 31)) == 60 / 360
    assert Thirty360().year_fraction(date(2024, 1, 15), date(2026, 1, 15)) == 2.0


def test_day_counter_lookup() -> None:
    assert day_counter("act/360") == Actual360()
    with pytest.raises(ValueError, match="Unsupported day counter"):
        day_counter("ACT/ACT")


def test_target_holidays_without_year_range() -> None:
    """Holiday rules apply to any year, not only a precomputed window."""
    cal = target_calendar()
    assert not cal.is_business_day(date(2099, 5, 1))  # Friday, Labour Day
    assert cal.is_business_day(date(2099, 4, 30))


def test_extra_holidays_do_not_leak_into_base_calendar() -> None:
    extended = target_calendar().with_holidays([date(2024, 6, 12)])
    assert not extended.is_business_day(date(2024, 6, 12))
    assert target_calendar().is_business_day(date(2024, 6, 12))
    assert extended.advance(date(2024, 6, 11), 1) == date(2024, 6, 13)


def test_named_calendar_lookup() -> None:
    assert named_calendar("target").name == target_calendar().name
    assert not named_calendar("WeekendsOnly").is_business_day(date(2024, 3, 16))
    with pytest.raises(ValueError, match="Unknown calendar"):
        named_calendar("NYSE")
