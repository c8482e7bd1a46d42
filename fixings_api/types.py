"""GraphQL types for the fixings valuation API."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

import strawberry


@strawberry.enum
class SwapTypeInput(Enum):
    """Payer pays fixed and receives floating; receiver is the mirror."""

    PAYER = "payer"
    RECEIVER = "receiver"


@strawberry.enum
class AveragingMethod(Enum):
    COMPOUND = "compound"
    SIMPLE = "simple"


# --- Input types (request payloads) ---


@strawberry.input
class CurveInput:
    """Zero curve: pillars (year fractions from reference date), CC zero rates."""

    name: str
    reference_date: datetime.date
    pillars: list[float]
    zero_rates_cc: list[float]
    day_counter: str = "ACT/365F"


@strawberry.input
class FlatCurveInput:
    """Flat continuously compounded curve."""

    name: str
    reference_date: datetime.date
    rate: float
    day_counter: str = "ACT/365F"


@strawberry.input
class FixingInput:
    """One published fixing of an index."""

    index: str
    date: datetime.date
    value: float


@strawberry.input
class MarketInput:
    """Market snapshot: evaluation date, curves, historical fixings, extra holidays."""

    evaluation_date: datetime.date
    curves: Optional[list[CurveInput]] = None
    flat_curves: Optional[list[FlatCurveInput]] = None
    fixings: Optional[list[FixingInput]] = None
    calendar: Optional[str] = None
    holidays: Optional[list[datetime.date]] = None


@strawberry.input
class RateIndexInput:
    """Interest-rate index forecast from a market curve."""

    name: str
    currency: str
    tenor: str
    forwarding_curve: str
    fixing_days: int = 2
    day_counter: str = "ACT/360"


@strawberry.input
class EquityIndexInput:
    """Equity index forecast from interest and dividend curves in the market."""

    name: str
    currency: str
    interest_curve: Optional[str] = None
    dividend_curve: Optional[str] = None


@strawberry.input
class ZeroCouponSwapInput:
    """Zero-coupon swap quoted by fixed payment or by fixed rate (with day counter)."""

    type: SwapTypeInput
    base_nominal: float
    start_date: datetime.date
    maturity_date: datetime.date
    index: RateIndexInput
    discount_curve: str
    fixed_payment: Optional[float] = None
    fixed_rate: Optional[float] = None
    fixed_day_counter: Optional[str] = None
    payment_delay: int = 0
    averaging: AveragingMethod = AveragingMethod.COMPOUND


@strawberry.input
class PeriodInput:
    """Accrual fraction and fixing of one averaging period."""

    fraction: float
    fixing: float


# --- Output types (response payloads) ---


@strawberry.type
class ZeroCouponSwapResult:
    """Swap valuation: signed leg NPVs, projected amounts and fair quote."""

    npv: float
    fixed_leg_npv: float
    floating_leg_npv: float
    fixed_payment: float
    payment_date: datetime.date
    floating_payment: Optional[float] = None
    fair_fixed_rate: Optional[float] = None


@strawberry.type
class FixingResult:
    """Resolved index fixing and whether it was forecast."""

    index: str
    date: datetime.date
    value: float
    forecast: bool


@strawberry.type
class AveragingResult:
    aggregate_rate: float
