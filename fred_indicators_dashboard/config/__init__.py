"""Settings and series catalog."""

from .settings import (
    DASHBOARD_SERIES,
    FRED_SERIES_URL,
    MAX_OBSERVATION_LIMIT,
    NAV_CATEGORIES,
    Settings,
)

__all__ = [
    "DASHBOARD_SERIES",
    "FRED_SERIES_URL",
    "MAX_OBSERVATION_LIMIT",
    "NAV_CATEGORIES",
    "Settings",
]
