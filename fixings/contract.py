"""
Pricing contract between an instrument and a pricer.

The instrument fills `SwapArguments` from its legs, `validate()` runs, and
only then may a pricer read them and write `SwapResults`. Both objects are
recreated for every valuation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from fixings.curves import CurveHandle
from fixings.history import FixingHistory
from fixings.errors import InconsistentSign, InvalidLegStructure

FIXED_LEG = 0
FLOATING_LEG = 1


@dataclass
class SwapArguments:
    """Snapshot of a two-leg swap: legs[0] fixed, legs[1] floating."""

    legs: list[tuple[Any, ...]] = field(default_factory=list)
    payer: list[float] = field(default_factory=list)
    base_nominal: Optional[float] = None
    fixed_payment: Optional[float] = None
    discount_curve: Optional[str] = None

    def validate(self) -> None:
        """Raise unless both legs hold one cash flow and signs are opposite."""
        if len(self.legs) != 2:
            raise InvalidLegStructure(f"expected 2 legs, got {len(self.legs)}")
        for name, leg in zip(("fixed", "floating"), self.legs):
            if len(leg) != 1:
                raise InvalidLegStructure(
                    f"{name} leg must contain exactly one cash flow, got {len(leg)}"
                )
        if len(self.payer) != 2:
            raise InconsistentSign(f"expected 2 leg signs, got {len(self.payer)}")
        fixed_sign, floating_sign = self.payer
        if fixed_sign not in (-1.0, 1.0) or floating_sign != -fixed_sign:
            raise InconsistentSign(
                f"fixed and floating legs must have opposite signs, got {fixed_sign} and {floating_sign}"
            )

    @property
    def fixed_cash_flow(self) -> Any:
        return self.legs[FIXED_LEG][0]

    @property
    def floating_cash_flow(self) -> Any:
        return self.legs[FLOATING_LEG][0]


@dataclass
class SwapResults:
    """Leg values written by a pricer. Signed from the holder's side."""

    fixed_leg_npv: Optional[float] = None
    floating_leg_npv: Optional[float] = None
    floating_payment: Optional[float] = None
    valuation_date: Optional[date] = None
    curve_revisions: list[tuple[CurveHandle, int]] = field(default_factory=list)
    fixing_revisions: list[tuple[FixingHistory, str, int]] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return self.fixed_leg_npv is not None and self.floating_leg_npv is not None

    @property
    def npv(self) -> Optional[float]:
        if not self.ready:
            return None
        return self.fixed_leg_npv + self.floating_leg_npv

    def reset(self) -> None:
        self.fixed_leg_npv = None
        self.floating_leg_npv = None
        self.floating_payment = None
        self.valuation_date = None
        self.curve_revisions = []
        self.fixing_revisions = []

    def is_stale(self) -> bool:
        """True once any curve handle or fixing series read by the pricer has changed."""
        return any(handle.revision != rev for handle, rev in self.curve_revisions) or any(
            history.revision(name) != rev for history, name, rev in self.fixing_revisions
        )
