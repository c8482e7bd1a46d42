"""Pricer implementations for the registry-based pricing engine."""

from fixings.pricers.base import BasePricer
from fixings.pricers.zero_coupon_swap_pricer import ZeroCouponSwapPricer

__all__ = [
    "BasePricer",
    "ZeroCouponSwapPricer",
]
