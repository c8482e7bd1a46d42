"""
Pricing engine: values instruments given a market snapshot.

Design intent:
- Instruments own their legs and results, but never read the market.
- Pricers read validated arguments and write results; they never touch the
  instrument.
- This engine keeps a **registry of pricers** and drives one valuation:
  setup_arguments -> validate -> calculate -> fetch_results.
  A failure at any step stops the run before results are written back.
"""

from __future__ import annotations

import logging

from fixings.interfaces import Instrument
from fixings.market import Market
from fixings.pricers import BasePricer

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are registered at initialization and dispatched based on
    can_price() checks. First matching pricer wins.
    """

    def __init__(self) -> None:
        self._pricers: list[BasePricer] = []

    def register(self, pricer: BasePricer) -> None:
        """Register a pricer for dispatch.

        Order matters: first matching pricer wins.
        """
        self._pricers.append(pricer)

    def pricer_for(self, instrument: Instrument) -> BasePricer:
        for pricer in self._pricers:
            if pricer.can_price(instrument):
                return pricer
        raise ValueError(
            f"No pricer registered for {type(instrument).__name__}. "
            "Register a pricer with engine.register(pricer)."
        )

    def calculate(self, instrument: Instrument, market: Market) -> None:
        """Run one full valuation and store the results on the instrument."""
        pricer = self.pricer_for(instrument)
        logger.debug("pricing %s with %s", type(instrument).__name__, type(pricer).__name__)
        arguments = pricer.new_arguments()
        instrument.setup_arguments(arguments)
        arguments.validate()
        results = pricer.calculate(arguments, market)
        instrument.fetch_results(results)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Value the instrument and return its total NPV."""
        self.calculate(instrument, market)
        return instrument.npv


def create_default_engine() -> PricingEngine:
    """Factory for default engine with all built-in pricers registered."""
    from fixings.pricers import ZeroCouponSwapPricer

    engine = PricingEngine()
    engine.register(ZeroCouponSwapPricer())
    return engine
