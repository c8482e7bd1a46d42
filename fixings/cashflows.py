"""
Cash-flow descriptors used by the zero-coupon swap legs.

- `SimpleCashFlow`: a known amount paid on a date (the fixed leg).
- `SubPeriodsCashFlow`: one payment whose amount is the notional times the
  averaged rate of several index sub-periods (the floating leg).

Descriptors are immutable: the sub-period schedule is built once, and only the
*value* of the floating amount changes with market inputs, because it is
recomputed through a `FixingResolver` every time it is asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from fixings.averaging import AccrualPeriod, RateAveraging, average
from fixings.indexes import InterestRateIndex
from fixings.resolver import FixingResolver


@dataclass(frozen=True)
class SimpleCashFlow:
    """Known amount paid on `payment_date`."""

    payment_date: date
    amount_value: float

    def amount(self, resolver: FixingResolver | None = None) -> float:
        return self.amount_value

    def has_occurred(self, ref_date: date) -> bool:
        return self.payment_date <= ref_date


@dataclass(frozen=True)
class SubPeriod:
    """One averaging sub-period: its accrual and the date its rate fixes."""

    accrual: AccrualPeriod
    fixing_date: date


def sub_period_schedule(
    index: InterestRateIndex,
    start: date,
    end: date,
) -> list[date]:
    """
    Boundary dates from `start` to `end` stepping by the index tenor.

    Intermediate dates are rolled with the index calendar and convention; the
    final period is a short stub when the tenor does not divide the window.
    """
    if end <= start:
        raise ValueError(f"schedule end {end} must be after start {start}")
    dates = [start]
    k = 1
    while True:
        nxt = index.fixing_calendar.advance(
            start,
            index.tenor * k,
            convention=index.convention,
            end_of_month=index.end_of_month,
        )
        if nxt >= end:
            break
        if nxt > dates[-1]:
            dates.append(nxt)
        k += 1
    dates.append(end)
    return dates


def _build_sub_periods(index: InterestRateIndex, start: date, end: date) -> tuple[SubPeriod, ...]:
    dates = sub_period_schedule(index, start, end)
    periods = []
    for d0, d1 in zip(dates[:-1], dates[1:]):
        periods.append(
            SubPeriod(
                accrual=AccrualPeriod(d0, d1, index.day_counter.year_fraction(d0, d1)),
                fixing_date=index.fixing_date(d0),
            )
        )
    return tuple(periods)


@dataclass(frozen=True)
class SubPeriodsCashFlow:
    """
    Single floating payment built from averaged index sub-period fixings.

    amount = nominal * average(averaging, [(alpha_i, L_i)])
    """

    payment_date: date
    nominal: float
    index: InterestRateIndex
    accrual_start: date
    accrual_end: date
    averaging: RateAveraging = RateAveraging.COMPOUND
    sub_periods: tuple[SubPeriod, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "sub_periods",
            _build_sub_periods(self.index, self.accrual_start, self.accrual_end),
        )

    @property
    def fixing_dates(self) -> list[date]:
        return [p.fixing_date for p in self.sub_periods]

    def fixings(self, resolver: FixingResolver) -> list[float]:
        """Resolve every sub-period fixing, in chronological order."""
        return [resolver.fixing(self.index, p.fixing_date) for p in self.sub_periods]

    def rate(self, resolver: FixingResolver) -> float:
        """Aggregate rate over the sub-periods."""
        fractions = [p.accrual.fraction for p in self.sub_periods]
        return average(self.averaging, zip(fractions, self.fixings(resolver)))

    def amount(self, resolver: FixingResolver) -> float:
        return self.nominal * self.rate(resolver)

    def has_occurred(self, ref_date: date) -> bool:
        return self.payment_date <= ref_date
