"""
Reduction of a sequence of period fixings into one aggregate rate.

Given chronologically ordered pairs ``(alpha_i, r_i)``:

- compound: ``prod(1 + alpha_i * r_i) - 1``
- simple:   ``sum(alpha_i * r_i)``

The caller multiplies the aggregate by the notional for both conventions; the
simple sum is not converted into a growth factor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence

from fixings.errors import EmptyAveragingWindow, InvalidAccrualFraction, InvalidAccrualPeriod


class RateAveraging(str, Enum):
    COMPOUND = "compound"
    SIMPLE = "simple"


@dataclass(frozen=True)
class AccrualPeriod:
    """Accrual period [start, end) with its day-count fraction."""

    start: date
    end: date
    fraction: float

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidAccrualPeriod(
                f"accrual period must have positive length: {self.start} -> {self.end}"
            )
        if self.fraction < 0:
            raise InvalidAccrualFraction(f"accrual fraction must be >= 0, got {self.fraction}")


def average(
    averaging: RateAveraging,
    periods: Iterable[tuple[float, float]],
) -> float:
    """
    Aggregate ``(fraction, fixing)`` pairs under `averaging`.

    Pairs are consumed in the order given, which must be chronological.
    """
    pairs: Sequence[tuple[float, float]] = list(periods)
    if not pairs:
        raise EmptyAveragingWindow("cannot average an empty sequence of periods")
    for fraction, _ in pairs:
        if fraction < 0:
            raise InvalidAccrualFraction(f"accrual fraction must be >= 0, got {fraction}")
    if averaging is RateAveraging.COMPOUND:
        factor = 1.0
        for fraction, rate in pairs:
            factor *= 1.0 + fraction * rate
        return factor - 1.0
    if averaging is RateAveraging.SIMPLE:
        total = 0.0
        for fraction, rate in pairs:
            total += fraction * rate
        return total
    raise ValueError(f"unknown rate averaging {averaging!r}")
