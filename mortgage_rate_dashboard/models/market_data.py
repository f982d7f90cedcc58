"""Data models for market data."""

from dataclasses import dataclass
from datetime import date

from mortgage_rate_dashboard.config import Indicator, TimeRange


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series."""

    date: date
    value: float


@dataclass(frozen=True)
class AlignedPoint:
    """Observation placed on a reference date; value is None where the series has no print."""

    date: date
    value: float | None

    @property
    def is_absent(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class SeriesBundle:
    """
    Every series fetched for one load.

    Secondary series are empty tuples when the provider returned nothing or
    the fetch failed. The bundle is kept by the caller so a spread change can
    be re-derived without another round trip.
    """

    treasury: tuple[Observation, ...]
    mortgage_30: tuple[Observation, ...] = ()
    mortgage_15: tuple[Observation, ...] = ()
    cpi: tuple[Observation, ...] = ()
    core_pce: tuple[Observation, ...] = ()
    time_range: TimeRange = TimeRange.DAYS_90

    @classmethod
    def from_series(
        cls,
        series: dict[Indicator, list[Observation]],
        time_range: TimeRange = TimeRange.DAYS_90,
    ) -> "SeriesBundle":
        """Build a bundle from a mapping of indicator to observations."""
        return cls(
            treasury=tuple(series.get(Indicator.TEN_YEAR_YIELD, ())),
            mortgage_30=tuple(series.get(Indicator.MORTGAGE_30, ())),
            mortgage_15=tuple(series.get(Indicator.MORTGAGE_15, ())),
            cpi=tuple(series.get(Indicator.CPI, ())),
            core_pce=tuple(series.get(Indicator.CORE_PCE, ())),
            time_range=time_range,
        )
