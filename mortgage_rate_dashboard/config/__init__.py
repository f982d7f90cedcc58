"""Dashboard configuration."""

from mortgage_rate_dashboard.config.settings import (
    DEFAULT_SPREAD,
    FIFTEEN_YEAR_SPREAD_OFFSET,
    FRED_SERIES,
    INFLATION_LOOKBACK_MONTHS,
    MIN_INFLATION_OBSERVATIONS,
    SPREAD_MAX,
    SPREAD_MIN,
    SPREAD_PRESETS,
    SPREAD_STEP,
    Indicator,
    Settings,
    TimeRange,
)

__all__ = [
    "DEFAULT_SPREAD",
    "FIFTEEN_YEAR_SPREAD_OFFSET",
    "FRED_SERIES",
    "INFLATION_LOOKBACK_MONTHS",
    "MIN_INFLATION_OBSERVATIONS",
    "SPREAD_MAX",
    "SPREAD_MIN",
    "SPREAD_PRESETS",
    "SPREAD_STEP",
    "Indicator",
    "Settings",
    "TimeRange",
]
