"""Discounting pricer for zero-coupon swaps."""

from __future__ import annotations

import logging

from fixings.contract import SwapArguments, SwapResults
from fixings.interfaces import Instrument
from fixings.market import Market
from fixings.pricers.base import BasePricer
from fixings.products.zero_coupon_swap import ZeroCouponSwap

logger = logging.getLogger(__name__)


class ZeroCouponSwapPricer(BasePricer):
    """
    Discount each leg's single cash flow on the swap's discount curve.

    Leg NPV = sign * amount * DF(payment_date), with DF measured from the
    discount curve's reference date. Flows paid on or before the evaluation
    date are worth zero and their amounts are not projected.
    """

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, ZeroCouponSwap)

    def new_arguments(self) -> SwapArguments:
        return SwapArguments()

    def new_results(self) -> SwapResults:
        return SwapResults()

    def calculate(self, arguments: SwapArguments, market: Market) -> SwapResults:
        today = market.evaluation_date
        disc = market.curve(arguments.discount_curve)
        fixed_cf = arguments.fixed_cash_flow
        floating_cf = arguments.floating_cash_flow
        fixed_sign, floating_sign = arguments.payer

        results = self.new_results()
        results.valuation_date = today
        results.curve_revisions = [
            (handle, handle.revision)
            for handle in (disc, *floating_cf.index.curve_handles())
        ]
        index_name = floating_cf.index.name
        results.fixing_revisions = [
            (market.history, index_name, market.history.revision(index_name))
        ]

        if fixed_cf.has_occurred(today):
            results.fixed_leg_npv = 0.0
        else:
            results.fixed_leg_npv = (
                fixed_sign * fixed_cf.amount() * disc.discount(fixed_cf.payment_date)
            )

        if floating_cf.has_occurred(today):
            results.floating_leg_npv = 0.0
        else:
            amount = floating_cf.amount(market.resolver())
            results.floating_payment = amount
            results.floating_leg_npv = (
                floating_sign * amount * disc.discount(floating_cf.payment_date)
            )

        logger.debug(
            "zero-coupon swap valued on %s: fixed=%s floating=%s",
            today.isoformat(),
            results.fixed_leg_npv,
            results.floating_leg_npv,
        )
        return results
