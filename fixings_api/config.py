"""Service configuration read from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the valuation API."""

    api_title: str = "Fixings Valuation API"
    api_version: str = "0.1.0"
    log_level: str = "INFO"
    # Calendar used when a request does not name one: WeekendsOnly, TARGET or Null.
    default_calendar: str = "WeekendsOnly"


def get_settings() -> Settings:
    """Build settings from FIXINGS_* environment variables, falling back to defaults."""
    defaults = Settings()
    return Settings(
        api_title=os.environ.get("FIXINGS_API_TITLE", defaults.api_title),
        api_version=os.environ.get("FIXINGS_API_VERSION", defaults.api_version),
        log_level=os.environ.get("FIXINGS_LOG_LEVEL", defaults.log_level).upper(),
        default_calendar=os.environ.get("FIXINGS_DEFAULT_CALENDAR", defaults.default_calendar),
    )
