"""Monthly sampling of daily or irregular series for charting."""

from collections.abc import Sequence
from datetime import datetime

import pandas as pd

from fred_indicators_dashboard.models.market_data import MonthlyPoint, Observation


# Fixed English abbreviations so labels don't depend on the process locale
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_month_label(month_key: str) -> str:
    """Render a ``YYYY-MM`` key as ``"Mon YY"`` (e.g. ``"2024-01"`` -> ``"Jan 24"``)."""
    month_start = datetime.strptime(month_key, "%Y-%m")
    return f"{MONTH_ABBR[month_start.month - 1]} {month_start.year % 100:02d}"


def aggregate_monthly(
    series: Sequence[Observation], month_count: int = 24
) -> list[MonthlyPoint]:
    """
    Collapse a series to one point per calendar month.

    Each month keeps the first value seen for it in input order. With the
    oldest-first input the fetcher produces, that is the earliest reading
    of the month. Only the most recent ``month_count`` months are returned.

    Args:
        series: Observations, oldest first
        month_count: Number of trailing months to keep

    Returns:
        MonthlyPoints in ascending month order
    """
    if month_count < 1:
        raise ValueError(f"month_count must be at least 1, got {month_count}")
    if not series:
        return []

    df = pd.DataFrame(
        {
            "month": [obs.date[:7] for obs in series],
            "value": [obs.value for obs in series],
        }
    )
    # YYYY-MM keys sort chronologically as plain strings
    monthly = (
        df.drop_duplicates(subset="month", keep="first")
        .sort_values("month", kind="stable")
        .tail(month_count)
    )

    return [
        MonthlyPoint(label=format_month_label(month), value=float(value), month=month)
        for month, value in zip(monthly["month"], monthly["value"])
    ]
