"""Dashboard view model."""

from dataclasses import dataclass
from datetime import date

from mortgage_rate_dashboard.models.market_data import AlignedPoint, Observation


@dataclass(frozen=True)
class YieldReading:
    """Latest 10-year yield with its prior print."""

    current: float
    previous: float
    delta: float
    last_updated: date


@dataclass(frozen=True)
class MortgageRates:
    """Current estimated and published mortgage rates."""

    estimated: float
    estimated_15_year: float
    spread: float
    actual: float | None = None  # None when the weekly survey series was unavailable
    actual_15_year: float | None = None


@dataclass(frozen=True)
class InflationReading:
    """Latest reading of a price index."""

    current: float
    previous: float
    delta: float
    monthly_rate: float
    annual_rate: float | None  # None when there is not enough history for a year-ago value
    as_of: date


@dataclass(frozen=True)
class InflationData:
    cpi: InflationReading
    core_pce: InflationReading


@dataclass(frozen=True)
class HistoricalData:
    """
    Chart series for the selected range.

    The treasury and estimated curves share the treasury dates. Published
    mortgage rates are aligned onto those dates with gaps, and the two price
    indices are aligned onto the union of their own dates.
    """

    treasury_yield: tuple[Observation, ...]
    estimated_mortgage: tuple[Observation, ...]
    estimated_15_year_mortgage: tuple[Observation, ...]
    actual_mortgage: tuple[AlignedPoint, ...] | None = None
    actual_15_year_mortgage: tuple[AlignedPoint, ...] | None = None
    cpi: tuple[AlignedPoint, ...] | None = None
    core_pce: tuple[AlignedPoint, ...] | None = None

    @property
    def labels(self) -> tuple[date, ...]:
        return tuple(obs.date for obs in self.treasury_yield)

    @property
    def inflation_labels(self) -> tuple[date, ...]:
        points = self.cpi or self.core_pce or ()
        return tuple(point.date for point in points)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Complete derived view for one load or spread change."""

    ten_year_yield: YieldReading
    mortgage_rates: MortgageRates
    history: HistoricalData
    inflation: InflationData | None = None

    @property
    def spread(self) -> float:
        return self.mortgage_rates.spread

    @property
    def has_actual_rates(self) -> bool:
        return (
            self.mortgage_rates.actual is not None
            or self.mortgage_rates.actual_15_year is not None
        )
