"""Data models for series and dashboard snapshots."""

from mortgage_rate_dashboard.models.market_data import AlignedPoint, Observation, SeriesBundle
from mortgage_rate_dashboard.models.snapshot import (
    DashboardSnapshot,
    HistoricalData,
    InflationData,
    InflationReading,
    MortgageRates,
    YieldReading,
)

__all__ = [
    "AlignedPoint",
    "DashboardSnapshot",
    "HistoricalData",
    "InflationData",
    "InflationReading",
    "MortgageRates",
    "Observation",
    "SeriesBundle",
    "YieldReading",
]
