"""Products: zero-coupon swap."""

from fixings.products.zero_coupon_swap import InstrumentState, SwapType, ZeroCouponSwap

__all__ = ["InstrumentState", "SwapType", "ZeroCouponSwap"]
