"""
Protocol-based interfaces for the extension points of the library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
New curves, index kinds and pricers plug in without touching core code.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fixings.contract import SwapArguments, SwapResults
    from fixings.dates import Calendar
    from fixings.indexes import IndexKind
    from fixings.market import Market


@runtime_checkable
class YieldTermStructure(Protocol):
    """Protocol for discounting curves anchored at a reference date."""

    name: str
    reference_date: date

    def discount(self, d: date) -> float:
        """Return the discount factor from `reference_date` to `d` (> 0)."""
        ...


@runtime_checkable
class Index(Protocol):
    """Capability shared by every index variant.

    Fixing values are obtained through `FixingResolver`, which dispatches on
    `kind` rather than on subclass overrides.
    """

    name: str
    currency: str
    fixing_calendar: Calendar

    @property
    def kind(self) -> IndexKind:
        ...

    def is_valid_fixing_date(self, d: date) -> bool:
        ...


@runtime_checkable
class Instrument(Protocol):
    """Marker protocol for all priceable instruments."""

    pass


class Pricer(Protocol):
    """Protocol for instrument pricing implementations.

    A pricer reads validated arguments and writes results; it never touches
    the instrument directly.
    """

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument type."""
        ...

    def calculate(self, arguments: SwapArguments, market: Market) -> SwapResults:
        """Compute leg values from the pricing arguments."""
        ...
