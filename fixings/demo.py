"""Demo: EUR curves, a 6M rate index, an equity index forecast and a 5Y zero-coupon swap."""

import logging
from datetime import date

from fixings.averaging import RateAveraging
from fixings.curves import CurveHandle, FlatForward, ZeroRateCurve
from fixings.dates import Actual365Fixed, Period, target_calendar
from fixings.history import FixingHistory
from fixings.indexes import EquityIndex, InterestRateIndex
from fixings.market import Market
from fixings.pricing import price
from fixings.products.zero_coupon_swap import SwapType, ZeroCouponSwap


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    today = date(2024, 3, 15)
    calendar = target_calendar()
    pillars = [0.5, 1.0, 2.0, 5.0, 10.0]
    eur_curve = ZeroRateCurve(
        name="EUR_DISC",
        reference_date=today,
        pillars=pillars,
        zero_rates_cc=[0.039, 0.037, 0.033, 0.029, 0.028],
    )
    forwarding = CurveHandle(eur_curve)
    dividends = CurveHandle(FlatForward(name="SX5E_DIV", reference_date=today, rate=0.03))

    history = FixingHistory()
    history.add_fixing("EURIBOR6M", date(2024, 1, 11), 0.0392)
    history.add_fixing("SX5E", today, 5000.0)

    euribor6m = InterestRateIndex(
        name="EURIBOR6M",
        currency="EUR",
        fixing_calendar=calendar,
        tenor=Period.parse("6M"),
        forwarding=forwarding,
    )
    sx5e = EquityIndex(
        name="SX5E",
        currency="EUR",
        fixing_calendar=calendar,
        interest=forwarding,
        dividend=dividends,
    )
    market = Market(today, curves={"EUR_DISC": forwarding}, history=history)

    # 1) Equity index forecast one year out
    resolver = market.resolver()
    forecast = resolver.fixing(sx5e, date(2025, 3, 14))

    # 2) 5Y zero-coupon swap quoted by fixed rate, compound and simple averaging
    swaps = {}
    for averaging in (RateAveraging.COMPOUND, RateAveraging.SIMPLE):
        swap = ZeroCouponSwap.from_fixed_rate(
            type=SwapType.PAYER,
            base_nominal=10_000_000,
            start_date=date(2024, 1, 15),
            maturity_date=date(2029, 1, 15),
            fixed_rate=0.03,
            fixed_day_counter=Actual365Fixed(),
            index=euribor6m,
            payment_calendar=calendar,
            discount_curve="EUR_DISC",
            averaging=averaging,
        )
        price(swap, market)
        swaps[averaging] = swap

    print("=== Fixings Demo ===\n")
    print(f"Evaluation date: {today.isoformat()}\n")
    print("1) SX5E forecast for 2025-03-14")
    print(f"   Spot     = {history.lookup('SX5E', today):,.2f}")
    print(f"   Forecast = {forecast:,.4f}\n")
    for i, (averaging, swap) in enumerate(swaps.items(), start=2):
        print(f"{i}) Zero-coupon swap 5Y payer, 10M EUR, 3% fixed, {averaging.value} averaging")
        print(f"   Fixed payment    = {swap.fixed_payment:,.2f}")
        print(f"   Floating payment = {swap.floating_payment:,.2f}")
        print(f"   Fixed leg NPV    = {swap.fixed_leg_npv:,.2f}")
        print(f"   Floating leg NPV = {swap.floating_leg_npv:,.2f}")
        print(f"   NPV              = {swap.npv:,.2f}")
        print(f"   Fair fixed rate  = {swap.fair_fixed_rate(Actual365Fixed()):.6f}\n")
    print("Done.")


if __name__ == "__main__":
    main()
