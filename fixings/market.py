"""
Market snapshot container.

`Market` is a *simple* in-memory view of the inputs a valuation needs:
- Discount curves, keyed by a name (e.g. "EUR_DISC"), held through handles
- The historical fixing store
- The evaluation date ("today") that splits past fixings from forecasts

Index forwarding/interest/dividend curves are not looked up here: indexes keep
their own handles, which may or may not also be registered in the market.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from fixings.curves import CurveHandle
from fixings.history import FixingHistory
from fixings.interfaces import YieldTermStructure
from fixings.resolver import FixingResolver


class Market:
    """
    Market snapshot: curve handles (by name), fixing history, evaluation date.
    with_curve returns a new Market instance.
    """

    def __init__(
        self,
        evaluation_date: date,
        curves: Optional[dict[str, Union[CurveHandle, YieldTermStructure]]] = None,
        history: Optional[FixingHistory] = None,
    ) -> None:
        self.evaluation_date = evaluation_date
        self.curves: dict[str, CurveHandle] = {}
        for name, curve in (curves or {}).items():
            self.curves[name] = curve if isinstance(curve, CurveHandle) else CurveHandle(curve)
        self.history = history if history is not None else FixingHistory()

    def curve(self, name: str) -> CurveHandle:
        """Return curve handle by name. Raises KeyError if not found."""
        try:
            return self.curves[name]
        except KeyError:
            raise KeyError(
                f"curve '{name}' not found in market. Available curves: {list(self.curves)}"
            ) from None

    def resolver(self) -> FixingResolver:
        """Fixing resolver bound to this market's history and evaluation date."""
        return FixingResolver(self.history, self.evaluation_date)

    def with_curve(self, name: str, curve: YieldTermStructure) -> Market:
        """Return a new Market with `name` bound to a fresh handle on `curve`."""
        new_curves = dict(self.curves)
        new_curves[name] = CurveHandle(curve)
        return Market(self.evaluation_date, curves=new_curves, history=self.history)
