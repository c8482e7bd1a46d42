"""
Pricing entrypoint.

Most users of the library should only need `price(trade, market)`.
It delegates to a default `PricingEngine` instance that contains the pricing logic.

Keeping this as a thin wrapper gives a stable, ergonomic API while still
allowing advanced users to instantiate/configure their own engines.
"""

from typing import TypeAlias

from fixings.engine import create_default_engine
from fixings.market import Market
from fixings.products.zero_coupon_swap import ZeroCouponSwap


Trade: TypeAlias = ZeroCouponSwap

_default_engine = create_default_engine()


def price(trade: Trade, market: Market) -> float:
    """Return present value of trade (via default registry-based engine)."""
    return _default_engine.npv(trade, market)
