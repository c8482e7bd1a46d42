"""Fixings library: index fixing resolution, rate averaging and zero-coupon swap valuation."""

from fixings.averaging import AccrualPeriod, RateAveraging, average
from fixings.cashflows import SimpleCashFlow, SubPeriodsCashFlow
from fixings.contract import SwapArguments, SwapResults
from fixings.curves import CurveHandle, FlatForward, ZeroRateCurve
from fixings.dates import (
    Actual360,
    Actual365Fixed,
    BusinessDayConvention,
    Calendar,
    DayCounter,
    Period,
    Thirty360,
    TimeUnit,
    weekends_only,
)
from fixings.engine import PricingEngine, create_default_engine
from fixings.errors import (
    ArgumentTypeMismatch,
    EmptyAveragingWindow,
    FixingsError,
    InconsistentSign,
    InvalidAccrualFraction,
    InvalidAccrualPeriod,
    InvalidFixingDate,
    InvalidLegStructure,
    MissingFixing,
    MissingTermStructure,
    ResultsNotReady,
)
from fixings.history import FixingHistory
from fixings.indexes import EquityIndex, IndexKind, InterestRateIndex
from fixings.interfaces import Index, Instrument, Pricer, YieldTermStructure
from fixings.market import Market
from fixings.pricers import BasePricer, ZeroCouponSwapPricer
from fixings.pricing import Trade, price
from fixings.products.zero_coupon_swap import InstrumentState, SwapType, ZeroCouponSwap
from fixings.resolver import FixingResolver

__all__ = [
    "AccrualPeriod",
    "RateAveraging",
    "average",
    "SimpleCashFlow",
    "SubPeriodsCashFlow",
    "SwapArguments",
    "SwapResults",
    "CurveHandle",
    "FlatForward",
    "ZeroRateCurve",
    "Actual360",
    "Actual365Fixed",
    "BusinessDayConvention",
    "Calendar",
    "DayCounter",
    "Period",
    "Thirty360",
    "TimeUnit",
    "weekends_only",
    "PricingEngine",
    "create_default_engine",
    "FixingsError",
    "ArgumentTypeMismatch",
    "EmptyAveragingWindow",
    "InconsistentSign",
    "InvalidAccrualFraction",
    "InvalidAccrualPeriod",
    "InvalidFixingDate",
    "InvalidLegStructure",
    "MissingFixing",
    "MissingTermStructure",
    "ResultsNotReady",
    "FixingHistory",
    "EquityIndex",
    "IndexKind",
    "InterestRateIndex",
    "Index",
    "Instrument",
    "Pricer",
    "YieldTermStructure",
    "Market",
    "BasePricer",
    "ZeroCouponSwapPricer",
    "Trade",
    "price",
    "InstrumentState",
    "SwapType",
    "ZeroCouponSwap",
    "FixingResolver",
]
