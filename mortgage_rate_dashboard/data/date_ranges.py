"""Request windows for the selectable time ranges."""

from datetime import date, timedelta

import pandas as pd

from mortgage_rate_dashboard.config import INFLATION_LOOKBACK_MONTHS, TimeRange


def months_before(day: date, months: int) -> date:
    """Same calendar day N months earlier, clamped to month end (Mar 31 -> Feb 28)."""
    return (pd.Timestamp(day) - pd.DateOffset(months=months)).date()


def request_window(time_range: TimeRange, today: date | None = None) -> tuple[date, date]:
    """Start and end dates to request for rate series."""
    end = today or date.today()
    return end - timedelta(days=time_range.days), end


def inflation_window(today: date | None = None) -> tuple[date, date]:
    """
    Start and end dates to request for price indices.

    Monthly indices are fetched further back than the chart range so a
    year-over-year comparison is always possible.
    """
    end = today or date.today()
    return months_before(end, INFLATION_LOOKBACK_MONTHS), end
