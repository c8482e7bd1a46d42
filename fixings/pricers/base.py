"""Base pricer abstract class for instrument pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fixings.contract import SwapArguments, SwapResults
from fixings.interfaces import Instrument
from fixings.market import Market


class BasePricer(ABC):
    """Abstract base class for instrument pricers.

    Subclasses declare which instruments they handle, which argument/result
    objects they exchange with them, and how to fill the results.
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the instrument type."""
        ...

    @abstractmethod
    def new_arguments(self) -> SwapArguments:
        """Fresh, empty arguments object for one valuation."""
        ...

    @abstractmethod
    def new_results(self) -> SwapResults:
        """Fresh, empty results object for one valuation."""
        ...

    @abstractmethod
    def calculate(self, arguments: SwapArguments, market: Market) -> SwapResults:
        """Compute results from validated arguments."""
        ...
