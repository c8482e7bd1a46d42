"""
Error taxonomy for fixing resolution, rate averaging and swap valuation.

Every error is raised immediately to the caller: a valuation never substitutes
a default for a missing market input. Each class also derives from the closest
builtin exception so callers that only catch ``ValueError``/``LookupError``
keep working.
"""

from __future__ import annotations


class FixingsError(Exception):
    """Base class for all errors raised by the fixings library."""


class InvalidFixingDate(FixingsError, ValueError):
    """The date is not a business day of the index fixing calendar."""


class MissingFixing(FixingsError, LookupError):
    """A past (or spot) fixing is required but absent from the history store."""


class MissingTermStructure(FixingsError, LookupError):
    """A curve handle needed for forecasting or discounting is empty."""


class EmptyAveragingWindow(FixingsError, ValueError):
    """Rate averaging was asked to reduce an empty sequence of periods."""


class InvalidAccrualFraction(FixingsError, ValueError):
    """An accrual fraction is negative."""


class InvalidAccrualPeriod(FixingsError, ValueError):
    """An accrual period has zero or negative length."""


class InvalidLegStructure(FixingsError, ValueError):
    """Pricing arguments do not hold exactly one cash flow per leg."""


class InconsistentSign(FixingsError, ValueError):
    """Fixed and floating legs do not carry opposite payer/receiver signs."""


class ArgumentTypeMismatch(FixingsError, TypeError):
    """An instrument was handed a pricing contract object of the wrong type."""


class ResultsNotReady(FixingsError, RuntimeError):
    """Valuation results were requested before (or after invalidation of) a pricing run."""
