"""Assemble dashboard snapshots from fetched series."""

from typing import Sequence

from mortgage_rate_dashboard.config import Indicator, MIN_INFLATION_OBSERVATIONS
from mortgage_rate_dashboard.data.date_ranges import months_before
from mortgage_rate_dashboard.indicators.alignment import align_to_labels, align_union
from mortgage_rate_dashboard.indicators.diagnostics import (
    DiagnosticEvent,
    EventKind,
    EventSink,
    log_event,
)
from mortgage_rate_dashboard.indicators.transforms import (
    annual_inflation_rate,
    delta,
    estimate_15_year_rate,
    estimate_rate,
    monthly_inflation_rate,
)
from mortgage_rate_dashboard.models.market_data import Observation, SeriesBundle
from mortgage_rate_dashboard.models.snapshot import (
    DashboardSnapshot,
    HistoricalData,
    InflationData,
    InflationReading,
    MortgageRates,
    YieldReading,
)


class FatalDataUnavailable(Exception):
    """The primary series is missing, so no snapshot can be built."""

    def __init__(self, indicator: Indicator, reason: str) -> None:
        super().__init__(f"{indicator.title} ({indicator.series_id}): {reason}")
        self.indicator = indicator
        self.reason = reason


def latest_pair(observations: Sequence[Observation]) -> tuple[Observation, float]:
    """
    Latest observation and the value before it.

    With a single observation the previous value equals the current one, so
    the delta is 0 rather than undefined.
    """
    current = observations[-1]
    previous = observations[-2].value if len(observations) > 1 else current.value
    return current, previous


class SnapshotAssembler:
    """Turns a SeriesBundle and a spread into a DashboardSnapshot."""

    YEAR_AGO_MONTHS = 12

    def __init__(self, on_event: EventSink | None = None) -> None:
        self.on_event = on_event or log_event

    def _emit(
        self, kind: EventKind, message: str, indicator: Indicator | None = None, **detail
    ) -> None:
        self.on_event(DiagnosticEvent(kind=kind, message=message, indicator=indicator, detail=detail))

    def _check_secondary(self, indicator: Indicator, observations: Sequence[Observation]) -> bool:
        if observations:
            return True
        self._emit(EventKind.SERIES_EMPTY, "No observations, omitting from snapshot", indicator)
        return False

    def find_year_ago(
        self, indicator: Indicator, observations: Sequence[Observation]
    ) -> Observation | None:
        """
        Observation closest to, but not after, 12 months before the latest one.

        Returns None when the series is too short to trust or does not reach
        back a full year.
        """
        if len(observations) < MIN_INFLATION_OBSERVATIONS:
            self._emit(
                EventKind.INFLATION_HISTORY_SHORT,
                f"Only {len(observations)} observations, skipping annual rate",
                indicator,
                observations=len(observations),
                required=MIN_INFLATION_OBSERVATIONS,
            )
            return None

        target = months_before(observations[-1].date, self.YEAR_AGO_MONTHS)
        candidates = [obs for obs in observations if obs.date <= target]
        if not candidates:
            self._emit(
                EventKind.YEAR_AGO_NOT_FOUND,
                f"No observation on or before {target.isoformat()}",
                indicator,
                target=target.isoformat(),
                first_date=observations[0].date.isoformat(),
            )
            return None
        return candidates[-1]

    def _inflation_reading(
        self, indicator: Indicator, observations: Sequence[Observation]
    ) -> InflationReading:
        current, previous = latest_pair(observations)
        year_ago = self.find_year_ago(indicator, observations)

        return InflationReading(
            current=current.value,
            previous=previous,
            delta=delta(current.value, previous),
            monthly_rate=monthly_inflation_rate(current.value, previous),
            annual_rate=(
                annual_inflation_rate(current.value, year_ago.value)
                if year_ago is not None
                else None
            ),
            as_of=current.date,
        )

    def _inflation(self, bundle: SeriesBundle) -> InflationData | None:
        has_cpi = self._check_secondary(Indicator.CPI, bundle.cpi)
        has_pce = self._check_secondary(Indicator.CORE_PCE, bundle.core_pce)
        if not (has_cpi and has_pce):
            return None

        return InflationData(
            cpi=self._inflation_reading(Indicator.CPI, bundle.cpi),
            core_pce=self._inflation_reading(Indicator.CORE_PCE, bundle.core_pce),
        )

    def assemble(self, bundle: SeriesBundle, spread: float) -> DashboardSnapshot:
        """
        Build a snapshot.

        The whole estimated curve is recomputed under the given spread, so it
        shows what mortgage rates would have been had today's markup always
        applied.

        Args:
            bundle: Series from one load
            spread: Lender markup in percentage points

        Raises:
            FatalDataUnavailable: The 10-year yield series is empty
        """
        treasury = bundle.treasury
        if not treasury:
            raise FatalDataUnavailable(Indicator.TEN_YEAR_YIELD, "no observations available")

        current, previous = latest_pair(treasury)
        ten_year = YieldReading(
            current=current.value,
            previous=previous,
            delta=delta(current.value, previous),
            last_updated=current.date,
        )

        # ===== Mortgage rates =====
        has_30 = self._check_secondary(Indicator.MORTGAGE_30, bundle.mortgage_30)
        has_15 = self._check_secondary(Indicator.MORTGAGE_15, bundle.mortgage_15)

        rates = MortgageRates(
            estimated=estimate_rate(current.value, spread),
            estimated_15_year=estimate_15_year_rate(current.value, spread),
            spread=spread,
            actual=bundle.mortgage_30[-1].value if has_30 else None,
            actual_15_year=bundle.mortgage_15[-1].value if has_15 else None,
        )

        # ===== History =====
        labels = [obs.date for obs in treasury]
        cpi_points = core_pce_points = None
        if bundle.cpi or bundle.core_pce:
            _, (cpi_aligned, pce_aligned) = align_union(bundle.cpi, bundle.core_pce)
            cpi_points = tuple(cpi_aligned) if bundle.cpi else None
            core_pce_points = tuple(pce_aligned) if bundle.core_pce else None

        history = HistoricalData(
            treasury_yield=tuple(treasury),
            estimated_mortgage=tuple(
                Observation(obs.date, estimate_rate(obs.value, spread)) for obs in treasury
            ),
            estimated_15_year_mortgage=tuple(
                Observation(obs.date, estimate_15_year_rate(obs.value, spread))
                for obs in treasury
            ),
            actual_mortgage=(
                tuple(align_to_labels(labels, bundle.mortgage_30)) if has_30 else None
            ),
            actual_15_year_mortgage=(
                tuple(align_to_labels(labels, bundle.mortgage_15)) if has_15 else None
            ),
            cpi=cpi_points,
            core_pce=core_pce_points,
        )

        snapshot = DashboardSnapshot(
            ten_year_yield=ten_year,
            mortgage_rates=rates,
            history=history,
            inflation=self._inflation(bundle),
        )

        self._emit(
            EventKind.SNAPSHOT_ASSEMBLED,
            f"Snapshot as of {current.date.isoformat()} at spread {spread:.2f}",
            treasury_points=len(treasury),
            has_actual=snapshot.has_actual_rates,
            has_inflation=snapshot.inflation is not None,
        )
        return snapshot


def recompute_snapshot(
    bundle: SeriesBundle, spread: float, on_event: EventSink | None = None
) -> DashboardSnapshot:
    """Re-derive a snapshot for a new spread from already-fetched series."""
    return SnapshotAssembler(on_event).assemble(bundle, spread)
