"""Service layer: convert GraphQL inputs to library objects and run valuations."""

from __future__ import annotations

import datetime
import logging

from fixings.averaging import RateAveraging, average
from fixings.curves import CurveHandle, FlatForward, ZeroRateCurve
from fixings.dates import Calendar, Period, day_counter, named_calendar
from fixings.history import FixingHistory
from fixings.indexes import EquityIndex, InterestRateIndex
from fixings.market import Market
from fixings.pricing import price
from fixings.products.zero_coupon_swap import SwapType, ZeroCouponSwap

from fixings_api.config import get_settings
from fixings_api.types import (
    AveragingMethod,
    AveragingResult,
    CurveInput,
    EquityIndexInput,
    FixingResult,
    FlatCurveInput,
    MarketInput,
    PeriodInput,
    RateIndexInput,
    SwapTypeInput,
    ZeroCouponSwapInput,
    ZeroCouponSwapResult,
)

logger = logging.getLogger(__name__)

_SWAP_TYPES = {
    SwapTypeInput.PAYER: SwapType.PAYER,
    SwapTypeInput.RECEIVER: SwapType.RECEIVER,
}


def _curve_from_input(c: CurveInput) -> ZeroRateCurve:
    """Build ZeroRateCurve from GraphQL CurveInput."""
    return ZeroRateCurve(
        name=c.name,
        reference_date=c.reference_date,
        pillars=list(c.pillars),
        zero_rates_cc=list(c.zero_rates_cc),
        day_counter=day_counter(c.day_counter),
    )


def _flat_curve_from_input(c: FlatCurveInput) -> FlatForward:
    return FlatForward(
        name=c.name,
        reference_date=c.reference_date,
        rate=c.rate,
        day_counter=day_counter(c.day_counter),
    )


def calendar_from_input(m: MarketInput) -> Calendar:
    """Named calendar (or the configured default) plus any request holidays."""
    calendar = named_calendar(m.calendar or get_settings().default_calendar)
    return calendar.with_holidays(m.holidays or [])


def market_from_input(m: MarketInput) -> Market:
    """Build Market from GraphQL MarketInput."""
    curves: dict[str, CurveHandle] = {}
    for c in m.curves or []:
        curves[c.name] = CurveHandle(_curve_from_input(c))
    for f in m.flat_curves or []:
        curves[f.name] = CurveHandle(_flat_curve_from_input(f))
    if not curves:
        raise ValueError("market must contain at least one curve")
    history = FixingHistory()
    for fx in m.fixings or []:
        history.add_fixing(fx.index, fx.date, fx.value)
    return Market(m.evaluation_date, curves=curves, history=history)


def _validate_curve_in_market(market: Market, curve_name: str, context: str) -> None:
    if curve_name not in market.curves:
        raise ValueError(
            f"{context}: curve '{curve_name}' not found in market. "
            f"Available curves: {list(market.curves.keys())}"
        )


def _rate_index_from_input(
    i: RateIndexInput, market: Market, calendar: Calendar
) -> InterestRateIndex:
    _validate_curve_in_market(market, i.forwarding_curve, f"Index {i.name}")
    return InterestRateIndex(
        name=i.name,
        currency=i.currency,
        fixing_calendar=calendar,
        tenor=Period.parse(i.tenor),
        fixing_days=i.fixing_days,
        day_counter=day_counter(i.day_counter),
        forwarding=market.curve(i.forwarding_curve),
    )


def _equity_index_from_input(
    i: EquityIndexInput, market: Market, calendar: Calendar
) -> EquityIndex:
    # Missing curve names leave the handles empty; forecasting then fails loudly.
    handles = {}
    for field_name, curve_name in (("interest", i.interest_curve), ("dividend", i.dividend_curve)):
        if curve_name is not None:
            _validate_curve_in_market(market, curve_name, f"EquityIndex {i.name}")
            handles[field_name] = market.curve(curve_name)
    return EquityIndex(name=i.name, currency=i.currency, fixing_calendar=calendar, **handles)


def price_zero_coupon_swap(
    swap: ZeroCouponSwapInput,
    market: MarketInput,
    fair_rate_day_counter: str = "ACT/365F",
) -> ZeroCouponSwapResult:
    """Price a zero-coupon swap and report leg NPVs and the fair fixed rate."""
    m = market_from_input(market)
    calendar = calendar_from_input(market)
    _validate_curve_in_market(m, swap.discount_curve, "ZeroCouponSwap")
    index = _rate_index_from_input(swap.index, m, calendar)
    instrument = ZeroCouponSwap(
        type=_SWAP_TYPES[swap.type],
        base_nominal=swap.base_nominal,
        start_date=swap.start_date,
        maturity_date=swap.maturity_date,
        index=index,
        payment_calendar=calendar,
        discount_curve=swap.discount_curve,
        fixed_payment=swap.fixed_payment,
        fixed_rate=swap.fixed_rate,
        fixed_day_counter=day_counter(swap.fixed_day_counter) if swap.fixed_day_counter else None,
        payment_delay=swap.payment_delay,
        averaging=RateAveraging(swap.averaging.value),
    )
    npv = price(instrument, m)
    fair_rate = None
    if instrument.fixed_leg_npv != 0.0:
        fair_rate = instrument.fair_fixed_rate(day_counter(fair_rate_day_counter))
    logger.info("priced zero-coupon swap %s -> %s, npv=%.2f", swap.start_date, swap.maturity_date, npv)
    return ZeroCouponSwapResult(
        npv=npv,
        fixed_leg_npv=instrument.fixed_leg_npv,
        floating_leg_npv=instrument.floating_leg_npv,
        fixed_payment=instrument.fixed_payment,
        payment_date=instrument.payment_date,
        floating_payment=instrument.floating_payment,
        fair_fixed_rate=fair_rate,
    )


def resolve_equity_fixing(
    index: EquityIndexInput,
    market: MarketInput,
    fixing_date: datetime.date,
    forecast_todays_fixing: bool = False,
) -> FixingResult:
    """Observed or forecast level of an equity index on a date."""
    m = market_from_input(market)
    calendar = calendar_from_input(market)
    equity = _equity_index_from_input(index, m, calendar)
    resolver = m.resolver()
    value = resolver.fixing(equity, fixing_date, forecast_todays_fixing)
    forecast = (
        fixing_date > m.evaluation_date
        or forecast_todays_fixing
        or resolver.past_fixing(equity, fixing_date) is None
    )
    return FixingResult(index=index.name, date=fixing_date, value=value, forecast=forecast)


def average_rates(averaging: AveragingMethod, periods: list[PeriodInput]) -> AveragingResult:
    """Aggregate (fraction, fixing) pairs given in chronological order."""
    aggregate = average(
        RateAveraging(averaging.value),
        [(p.fraction, p.fixing) for p in periods],
    )
    return AveragingResult(aggregate_rate=aggregate)
