"""
In-memory store of published index fixings.

The store is keyed by index name (upper-cased), so an index and every clone of
it share the same history. Lookups never raise; deciding that a missing value
is an error is the resolver's job.

Each name carries a revision that increases whenever its stored values change,
so valuations that read a series can tell when it was later modified.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


class FixingHistory:
    """Historical fixings: index name -> {date: value}."""

    def __init__(self, fixings: Optional[Mapping[str, Mapping[date, float]]] = None) -> None:
        self._series: dict[str, dict[date, float]] = {}
        self._revisions: dict[str, int] = {}
        if fixings:
            for name, series in fixings.items():
                self.add_fixings(name, series.items())

    @staticmethod
    def _key(name: str) -> str:
        return name.upper()

    def _bump(self, key: str) -> None:
        self._revisions[key] = self._revisions.get(key, 0) + 1

    def revision(self, name: str) -> int:
        """Number of changes made to the fixings of `name` so far."""
        return self._revisions.get(self._key(name), 0)

    def lookup(self, name: str, d: date) -> Optional[float]:
        """Return the stored fixing for `name` on `d`, or None."""
        return self._series.get(self._key(name), {}).get(d)

    def add_fixing(
        self,
        name: str,
        d: date,
        value: float,
        force_overwrite: bool = False,
    ) -> None:
        """
        Store one fixing.

        Re-adding the same value is a no-op; a different value for an existing
        date raises unless `force_overwrite` is set.
        """
        key = self._key(name)
        series = self._series.setdefault(key, {})
        existing = series.get(d)
        if existing == value:
            return
        if existing is not None and not force_overwrite:
            raise ValueError(
                f"duplicated fixing for {name} on {d.isoformat()}: "
                f"{existing} already stored, {value} provided"
            )
        series[d] = value
        self._bump(key)
        logger.debug("stored fixing %s %s = %s", name, d.isoformat(), value)

    def add_fixings(
        self,
        name: str,
        fixings: Iterable[tuple[date, float]],
        force_overwrite: bool = False,
    ) -> None:
        for d, value in fixings:
            self.add_fixing(name, d, value, force_overwrite=force_overwrite)

    def clear(self, name: Optional[str] = None) -> None:
        """Drop fixings of one index, or of all indexes when `name` is None."""
        keys = list(self._series) if name is None else [self._key(name)]
        for key in keys:
            if self._series.pop(key, None):
                self._bump(key)
