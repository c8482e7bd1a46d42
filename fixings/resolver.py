"""
Fixing resolution: decide whether a fixing is observed or forecast.

The decision depends only on where the fixing date sits relative to the
evaluation date:

- before today: the published fixing, which must exist;
- today: the published fixing if there is one and forecasting today's fixing
  was not requested, otherwise a forecast;
- after today: always a forecast.

Nothing is cached. Each call reads the current curve links, so a relinked
handle is picked up on the next call.
"""

from __future__ import annotations

import logging
from datetime import date

from fixings.errors import InvalidFixingDate, MissingFixing
from fixings.history import FixingHistory
from fixings.indexes import AnyIndex, forecast_fixing, past_fixing

logger = logging.getLogger(__name__)


class FixingResolver:
    """Resolve index fixings against a history store and an evaluation date."""

    def __init__(self, history: FixingHistory, evaluation_date: date) -> None:
        self.history = history
        self.evaluation_date = evaluation_date

    def fixing(
        self,
        index: AnyIndex,
        fixing_date: date,
        forecast_todays_fixing: bool = False,
    ) -> float:
        """Return the observed or forecast fixing of `index` on `fixing_date`."""
        if not index.is_valid_fixing_date(fixing_date):
            raise InvalidFixingDate(
                f"Fixing date {fixing_date.isoformat()} is not valid for {index.name}"
            )
        today = self.evaluation_date
        if fixing_date > today or (fixing_date == today and forecast_todays_fixing):
            value = self.forecast_fixing(index, fixing_date)
            logger.debug("%s %s forecast = %s", index.name, fixing_date.isoformat(), value)
            return value
        stored = self.past_fixing(index, fixing_date)
        if stored is not None:
            return stored
        if fixing_date == today:
            # Today's fixing may not be published yet.
            value = self.forecast_fixing(index, fixing_date)
            logger.debug("%s %s not published, forecast = %s", index.name, fixing_date.isoformat(), value)
            return value
        raise MissingFixing(
            f"Missing {index.name} fixing for {fixing_date.isoformat()}"
        )

    def past_fixing(self, index: AnyIndex, fixing_date: date) -> float | None:
        return past_fixing(index, fixing_date, self.history)

    def forecast_fixing(self, index: AnyIndex, fixing_date: date) -> float:
        return forecast_fixing(index, fixing_date, self.history)
