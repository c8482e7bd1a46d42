"""
Index definitions and their forecasting strategies.

Two index kinds exist:

- `EquityIndex` forecasts its own future level from an interest curve and a
  dividend curve: ``S(d) = S0 * P_div(d) / P_int(d)``, where ``S0`` is the
  published level on the interest curve's reference date.
- `InterestRateIndex` is a published rate (IBOR-style term rate, or an
  overnight rate with a 1D tenor). Forecasts come from a forwarding curve as
  simple forward rates over the index tenor.

Indexes are immutable values. `forecast_fixing`/`past_fixing` are plain
functions picked from a table keyed by `IndexKind`; `clone()` builds a new
index with different curve handles and leaves the original alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Callable, Optional, Union

from fixings.curves import CurveHandle
from fixings.dates import (
    Actual360,
    BusinessDayConvention,
    Calendar,
    DayCounter,
    Period,
    TimeUnit,
)
from fixings.errors import MissingFixing, MissingTermStructure
from fixings.history import FixingHistory


class IndexKind(str, Enum):
    EQUITY = "equity"
    INTEREST_RATE = "interest_rate"


@dataclass(frozen=True)
class EquityIndex:
    """Equity index forecasting its level from interest and dividend curves."""

    name: str
    currency: str
    fixing_calendar: Calendar
    interest: CurveHandle = field(default_factory=CurveHandle)
    dividend: CurveHandle = field(default_factory=CurveHandle)

    @property
    def kind(self) -> IndexKind:
        return IndexKind.EQUITY

    def is_valid_fixing_date(self, d: date) -> bool:
        return self.fixing_calendar.is_business_day(d)

    def curve_handles(self) -> tuple[CurveHandle, ...]:
        return (self.interest, self.dividend)

    def clone(self, interest: CurveHandle, dividend: CurveHandle) -> EquityIndex:
        """Same index (name, calendar, currency, history) on different curves."""
        return replace(self, interest=interest, dividend=dividend)


@dataclass(frozen=True)
class InterestRateIndex:
    """
    Published interest-rate index (e.g. EURIBOR 6M, or an overnight rate).

    `fixing_days` separates the fixing date from the value date; the rate
    accrues from the value date over `tenor`.
    """

    name: str
    currency: str
    fixing_calendar: Calendar
    tenor: Period
    fixing_days: int = 2
    day_counter: DayCounter = field(default_factory=Actual360)
    convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    end_of_month: bool = False
    forwarding: CurveHandle = field(default_factory=CurveHandle)

    @property
    def kind(self) -> IndexKind:
        return IndexKind.INTEREST_RATE

    def is_valid_fixing_date(self, d: date) -> bool:
        return self.fixing_calendar.is_business_day(d)

    def curve_handles(self) -> tuple[CurveHandle, ...]:
        return (self.forwarding,)

    def fixing_date(self, value_date: date) -> date:
        return self.fixing_calendar.advance(value_date, -self.fixing_days, TimeUnit.DAYS)

    def value_date(self, fixing_date: date) -> date:
        return self.fixing_calendar.advance(fixing_date, self.fixing_days, TimeUnit.DAYS)

    def maturity_date(self, value_date: date) -> date:
        return self.fixing_calendar.advance(
            value_date,
            self.tenor,
            convention=self.convention,
            end_of_month=self.end_of_month,
        )

    def clone(self, forwarding: CurveHandle) -> InterestRateIndex:
        """Same index linked to a different forwarding curve."""
        return replace(self, forwarding=forwarding)


AnyIndex = Union[EquityIndex, InterestRateIndex]


def _require_linked(handle: CurveHandle, what: str, index_name: str) -> None:
    if handle.empty:
        raise MissingTermStructure(f"null {what} curve set for {index_name}")


def _forecast_equity(index: EquityIndex, d: date, history: FixingHistory) -> float:
    _require_linked(index.interest, "interest rate", index.name)
    _require_linked(index.dividend, "dividend", index.name)
    base_date = index.interest.reference_date
    spot = history.lookup(index.name, base_date)
    if spot is None:
        raise MissingFixing(
            f"Cannot forecast {index.name}: missing spot fixing on {base_date.isoformat()}"
        )
    return spot * index.dividend.discount(d) / index.interest.discount(d)


def _forecast_rate(index: InterestRateIndex, d: date, history: FixingHistory) -> float:
    _require_linked(index.forwarding, "forwarding", index.name)
    start = index.value_date(d)
    end = index.maturity_date(start)
    accrual = index.day_counter.year_fraction(start, end)
    if accrual <= 0:
        raise ValueError(f"{index.name}: non-positive accrual between {start} and {end}")
    return (index.forwarding.discount(start) / index.forwarding.discount(end) - 1.0) / accrual


_FORECASTERS: dict[IndexKind, Callable[..., float]] = {
    IndexKind.EQUITY: _forecast_equity,
    IndexKind.INTEREST_RATE: _forecast_rate,
}


def forecast_fixing(index: AnyIndex, d: date, history: FixingHistory) -> float:
    """Forecast the fixing of `index` on `d` from its current curve links."""
    try:
        forecaster = _FORECASTERS[index.kind]
    except KeyError:
        raise ValueError(f"No forecasting strategy for index kind {index.kind!r}") from None
    return forecaster(index, d, history)


def past_fixing(index: AnyIndex, d: date, history: FixingHistory) -> Optional[float]:
    """Published fixing of `index` on `d`, or None when not stored."""
    return history.lookup(index.name, d)


def clone(index: AnyIndex, **handles: CurveHandle) -> AnyIndex:
    """
    Return a copy of `index` with some curve handles replaced.

    Accepts the handle field names of the index kind (`interest`, `dividend`
    for equities; `forwarding` for rates).
    """
    return replace(index, **handles)
