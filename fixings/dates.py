"""
Date arithmetic collaborators backed by QuantLib: business-day calendars,
rolling conventions, tenor periods and day-count fractions.

The rest of the library works with `datetime.date`; conversion to and from
`ql.Date` happens only inside this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable

import QuantLib as ql


def to_ql_date(d: date) -> ql.Date:
    return ql.Date(d.day, d.month, d.year)


def from_ql_date(d: ql.Date) -> date:
    return date(d.year(), d.month(), d.dayOfMonth())


class BusinessDayConvention(str, Enum):
    """Rule for rolling a non-business day onto a business day."""

    FOLLOWING = "following"
    MODIFIED_FOLLOWING = "modified_following"
    PRECEDING = "preceding"
    MODIFIED_PRECEDING = "modified_preceding"
    UNADJUSTED = "unadjusted"


_QL_CONVENTIONS = {
    BusinessDayConvention.FOLLOWING: ql.Following,
    BusinessDayConvention.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayConvention.PRECEDING: ql.Preceding,
    BusinessDayConvention.MODIFIED_PRECEDING: ql.ModifiedPreceding,
    BusinessDayConvention.UNADJUSTED: ql.Unadjusted,
}


class TimeUnit(str, Enum):
    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


_QL_UNITS = {
    TimeUnit.DAYS: ql.Days,
    TimeUnit.WEEKS: ql.Weeks,
    TimeUnit.MONTHS: ql.Months,
    TimeUnit.YEARS: ql.Years,
}

_PERIOD_RE = re.compile(r"^\s*(-?\d+)\s*([DWMY])\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Period:
    """A tenor such as 6M or 1Y."""

    length: int
    unit: TimeUnit

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse '3M', '1Y', '2W', '5D' (case-insensitive)."""
        m = _PERIOD_RE.match(text)
        if m is None:
            raise ValueError(f"cannot parse period '{text}'")
        return cls(int(m.group(1)), TimeUnit(m.group(2).upper()))

    def to_ql(self) -> ql.Period:
        return ql.Period(self.length, _QL_UNITS[self.unit])

    def __neg__(self) -> Period:
        return Period(-self.length, self.unit)

    def __mul__(self, n: int) -> Period:
        return Period(self.length * n, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"


@dataclass(frozen=True, eq=False)
class Calendar:
    """
    Business-day calendar: a QuantLib calendar plus optional extra holidays.

    Extra holidays live in a private bespoke calendar joined to the base one,
    so adding them never touches the holiday set QuantLib shares between all
    instances of a named calendar such as TARGET.
    """

    base: ql.Calendar
    extra_holidays: frozenset[date] = frozenset()
    _ql: ql.Calendar = field(init=False, repr=False)

    def __post_init__(self) -> None:
        calendar = self.base
        if self.extra_holidays:
            extra = ql.BespokeCalendar(f"{self.base.name()} extra holidays")
            for d in sorted(self.extra_holidays):
                extra.addHoliday(to_ql_date(d))
            calendar = ql.JointCalendar(self.base, extra, ql.JoinHolidays)
        object.__setattr__(self, "_ql", calendar)

    @property
    def name(self) -> str:
        return self._ql.name()

    def is_holiday(self, d: date) -> bool:
        """True for any non-business day (weekend or holiday)."""
        return self._ql.isHoliday(to_ql_date(d))

    def is_business_day(self, d: date) -> bool:
        return self._ql.isBusinessDay(to_ql_date(d))

    def with_holidays(self, holidays: Iterable[date]) -> Calendar:
        """Return a new calendar with extra holidays added."""
        return Calendar(self.base, self.extra_holidays | frozenset(holidays))

    def adjust(
        self,
        d: date,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> date:
        """Roll `d` onto a business day according to `convention`."""
        return from_ql_date(self._ql.adjust(to_ql_date(d), _QL_CONVENTIONS[convention]))

    def advance(
        self,
        d: date,
        n: int | Period,
        unit: TimeUnit = TimeUnit.DAYS,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """
        Move `d` by `n` units (or by a Period).

        Days are counted in business days; zero days just adjusts `d`.
        Weeks, months and years move on the calendar and then adjust; with
        `end_of_month` a start on the last business day of a month lands on
        the last business day of the target month.
        """
        period = n if isinstance(n, Period) else Period(n, unit)
        moved = self._ql.advance(
            to_ql_date(d),
            period.to_ql(),
            _QL_CONVENTIONS[convention],
            end_of_month,
        )
        return from_ql_date(moved)


def weekends_only() -> Calendar:
    """Calendar whose only holidays are Saturdays and Sundays."""
    return Calendar(ql.WeekendsOnly())


def null_calendar() -> Calendar:
    """Calendar in which every day is a business day."""
    return Calendar(ql.NullCalendar())


def target_calendar() -> Calendar:
    """TARGET (euro settlement) calendar."""
    return Calendar(ql.TARGET())


_CALENDARS = {
    "WEEKENDSONLY": weekends_only,
    "TARGET": target_calendar,
    "NULL": null_calendar,
}


def named_calendar(name: str) -> Calendar:
    """Look up a calendar by name ('WeekendsOnly', 'TARGET', 'Null')."""
    try:
        return _CALENDARS[name.upper()]()
    except KeyError:
        raise ValueError(
            f"Unknown calendar '{name}'. Available calendars: ['WeekendsOnly', 'TARGET', 'Null']"
        ) from None


# --- Day counters ---


@dataclass(frozen=True)
class DayCounter:
    """Day-count convention: `year_fraction(start, end)` through QuantLib."""

    name: str = ""

    def to_ql(self) -> ql.DayCounter:
        raise NotImplementedError

    def day_count(self, start: date, end: date) -> int:
        return self.to_ql().dayCount(to_ql_date(start), to_ql_date(end))

    def year_fraction(self, start: date, end: date) -> float:
        return self.to_ql().yearFraction(to_ql_date(start), to_ql_date(end))


@dataclass(frozen=True)
class Actual360(DayCounter):
    name: str = "Actual/360"

    def to_ql(self) -> ql.DayCounter:
        return ql.Actual360()


@dataclass(frozen=True)
class Actual365Fixed(DayCounter):
    name: str = "Actual/365 (Fixed)"

    def to_ql(self) -> ql.DayCounter:
        return ql.Actual365Fixed()


@dataclass(frozen=True)
class Thirty360(DayCounter):
    """30/360 bond basis."""

    name: str = "30/360 (Bond Basis)"

    def to_ql(self) -> ql.DayCounter:
        return ql.Thirty360(ql.Thirty360.BondBasis)


_DAY_COUNTERS: dict[str, DayCounter] = {
    "ACT/360": Actual360(),
    "ACT/365F": Actual365Fixed(),
    "30/360": Thirty360(),
}


def day_counter(code: str) -> DayCounter:
    """Look up a day counter by short code ('ACT/360', 'ACT/365F', '30/360')."""
    try:
        return _DAY_COUNTERS[code.upper()]
    except KeyError:
        raise ValueError(
            f"Unsupported day counter '{code}'. Available: {list(_DAY_COUNTERS)}"
        ) from None
