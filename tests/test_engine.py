"""Tests for extensibility: custom pricers, custom curves, validation gating."""

from dataclasses import dataclass
from datetime import date

import pytest

from fixings.cashflows import SimpleCashFlow
from fixings.contract import SwapArguments, SwapResults
from fixings.curves import CurveHandle
from fixings.dates import Period, Thirty360, weekends_only
from fixings.engine import PricingEngine, create_default_engine
from fixings.errors import InconsistentSign
from fixings.indexes import InterestRateIndex
from fixings.market import Market
from fixings.pricers.base import BasePricer
from fixings.pricing import price
from fixings.products.zero_coupon_swap import SwapType, ZeroCouponSwap

TODAY = date(2025, 12, 1)
PAY = date(2026, 1, 15)


@dataclass
class CustomInstrument:
    """Minimal two-leg instrument for testing."""

    fixed: float
    floating: float
    signs: tuple[float, float] = (-1.0, 1.0)
    npv: float | None = None

    def setup_arguments(self, arguments: SwapArguments) -> None:
        arguments.legs = [(SimpleCashFlow(PAY, self.fixed),), (SimpleCashFlow(PAY, self.floating),)]
        arguments.payer = list(self.signs)

    def fetch_results(self, results: SwapResults) -> None:
        self.npv = results.npv


class CustomPricer(BasePricer):
    """Undiscounted pricer that records whether it ran."""

    def __init__(self) -> None:
        self.calls = 0

    def can_price(self, instrument) -> bool:
        return isinstance(instrument, CustomInstrument)

    def new_arguments(self) -> SwapArguments:
        return SwapArguments()

    def new_results(self) -> SwapResults:
        return SwapResults()

    def calculate(self, arguments: SwapArguments, market: Market) -> SwapResults:
        self.calls += 1
        fixed_sign, floating_sign = arguments.payer
        return SwapResults(
            fixed_leg_npv=fixed_sign * arguments.fixed_cash_flow.amount(),
            floating_leg_npv=floating_sign * arguments.floating_cash_flow.amount(),
        )


def test_custom_pricer_registration() -> None:
    """Custom pricers can be registered with the engine and used for dispatch."""
    engine = PricingEngine()
    engine.register(CustomPricer())
    assert engine.npv(CustomInstrument(fixed=100.0, floating=110.0), Market(TODAY)) == 10.0


def test_invalid_arguments_stop_before_pricing() -> None:
    """A validation failure prevents the pricer from running."""
    pricer = CustomPricer()
    engine = PricingEngine()
    engine.register(pricer)
    instrument = CustomInstrument(fixed=100.0, floating=110.0, signs=(1.0, 1.0))
    with pytest.raises(InconsistentSign):
        engine.calculate(instrument, Market(TODAY))
    assert pricer.calls == 0
    assert instrument.npv is None


def test_unknown_instrument_raises() -> None:
    @dataclass
    class UnregisteredInstrument:
        pass

    with pytest.raises(ValueError, match="No pricer registered"):
        create_default_engine().npv(UnregisteredInstrument(), Market(TODAY))


def test_custom_curve_implementation() -> None:
    """Market accepts any object with a discount(date) method (structural typing)."""

    class ConstantCurve:
        name = "FLAT"
        reference_date = TODAY

        def discount(self, d: date) -> float:
            return 0.95

    swap = ZeroCouponSwap(
        type=SwapType.PAYER,
        base_nominal=1_000_000,
        start_date=date(2024, 1, 15),
        maturity_date=PAY,
        index=InterestRateIndex(
            name="EURIBOR12M",
            currency="EUR",
            fixing_calendar=weekends_only(),
            tenor=Period.parse("1Y"),
        ),
        payment_calendar=weekends_only(),
        discount_curve="FLAT",
        fixed_rate=0.02,
        fixed_day_counter=Thirty360(),
    )
    market = Market(TODAY, curves={"FLAT": ConstantCurve()})
    market.history.add_fixings("EURIBOR12M", [(date(2024, 1, 11), 0.03), (date(2025, 1, 13), 0.03)])
    assert isinstance(market.curve("FLAT"), CurveHandle)
    pv = price(swap, market)
    cf = swap.floating_leg[0]
    growth = 1.0
    for p in cf.sub_periods:
        growth *= 1.0 + p.accrual.fraction * 0.03
    expected = 0.95 * 1_000_000 * ((growth - 1.0) - (1.02**2 - 1.0))
    assert abs(pv - expected) < 1e-6


def test_missing_discount_curve_raises_key_error() -> None:
    with pytest.raises(KeyError, match="not found in market"):
        Market(TODAY).curve("EUR_DISC")


def test_with_curve_returns_new_market() -> None:
    class ConstantCurve:
        name = "C"
        reference_date = TODAY

        def discount(self, d: date) -> float:
            return 0.9

    base = Market(TODAY)
    updated = base.with_curve("C", ConstantCurve())
    assert "C" not in base.curves
    assert updated.curve("C").discount(PAY) == 0.9
    assert updated.history is base.history
