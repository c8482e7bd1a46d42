"""
Yield term structures and relinkable curve handles.

Curve math stays minimal and explicit, as in the rest of the library:
- Curves are anchored at a `reference_date`; dates are turned into year
  fractions with the curve's own day counter.
- `ZeroRateCurve` holds **continuously compounded zero rates**, interpolated
  linearly between pillar times with flat extrapolation.
- `FlatForward` is a single continuously compounded rate.

Curves are immutable. What changes over time is which curve a `CurveHandle`
points to; every relink bumps the handle's `revision`, which is how holders of
a handle detect that anything derived from the old curve is stale.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from fixings.dates import Actual365Fixed, DayCounter
from fixings.errors import MissingTermStructure
from fixings.interfaces import YieldTermStructure


@dataclass
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions from `reference_date`).
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.

    Implements YieldTermStructure structurally (no explicit inheritance).
    """

    name: str
    reference_date: date
    pillars: list[float]
    zero_rates_cc: list[float]
    day_counter: DayCounter = field(default_factory=Actual365Fixed)

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        for i in range(1, len(self.pillars)):
            if self.pillars[i] <= self.pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")

    def time_from_reference(self, d: date) -> float:
        return self.day_counter.year_fraction(self.reference_date, d)

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates. t must be >= 0.
        """
        if t < 0:
            raise ValueError("t must be >= 0")
        if t <= self.pillars[0]:
            return self.zero_rates_cc[0]
        if t >= self.pillars[-1]:
            return self.zero_rates_cc[-1]
        for i in range(len(self.pillars) - 1):
            if self.pillars[i] <= t <= self.pillars[i + 1]:
                t0, t1 = self.pillars[i], self.pillars[i + 1]
                r0, r1 = self.zero_rates_cc[i], self.zero_rates_cc[i + 1]
                return r0 + (r1 - r0) * (t - t0) / (t1 - t0)
        return self.zero_rates_cc[-1]

    def df(self, t: float) -> float:
        r"""
        Discount factor to time t.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        r = self.zero_rate_cc(t)
        return math.exp(-r * t)

    def discount(self, d: date) -> float:
        """Discount factor from `reference_date` to `d`."""
        return self.df(self.time_from_reference(d))


@dataclass
class FlatForward:
    """Flat continuously compounded curve: DF(t) = exp(-rate*t)."""

    name: str
    reference_date: date
    rate: float
    day_counter: DayCounter = field(default_factory=Actual365Fixed)

    def time_from_reference(self, d: date) -> float:
        return self.day_counter.year_fraction(self.reference_date, d)

    def df(self, t: float) -> float:
        return math.exp(-self.rate * t)

    def discount(self, d: date) -> float:
        return self.df(self.time_from_reference(d))


class CurveHandle:
    """
    Shared, relinkable reference to a term structure.

    Indexes and instruments keep handles rather than curves so that a market
    update is a single `link_to` seen by every holder. `revision` increases
    monotonically on each relink; nothing is pushed to holders.
    """

    def __init__(self, curve: Optional[YieldTermStructure] = None) -> None:
        self._curve = curve
        self._revision = 0

    def __repr__(self) -> str:
        name = getattr(self._curve, "name", None)
        return f"CurveHandle({name!r}, revision={self._revision})"

    @property
    def empty(self) -> bool:
        return self._curve is None

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def current_link(self) -> YieldTermStructure:
        """Return the linked curve. Raises MissingTermStructure if empty."""
        if self._curve is None:
            raise MissingTermStructure("curve handle is empty (no term structure linked)")
        return self._curve

    def link_to(self, curve: Optional[YieldTermStructure]) -> None:
        """Point the handle at a new curve (or unlink with None)."""
        self._curve = curve
        self._revision += 1

    @property
    def reference_date(self) -> date:
        return self.current_link.reference_date

    def discount(self, d: date) -> float:
        return self.current_link.discount(d)
