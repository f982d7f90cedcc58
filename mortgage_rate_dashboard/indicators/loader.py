"""Concurrent loading of all dashboard series."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date

from mortgage_rate_dashboard.config import Indicator, TimeRange
from mortgage_rate_dashboard.data.date_ranges import inflation_window, request_window
from mortgage_rate_dashboard.data.fred_fetcher import FredFetcher
from mortgage_rate_dashboard.indicators.calculator import (
    FatalDataUnavailable,
    SnapshotAssembler,
)
from mortgage_rate_dashboard.indicators.diagnostics import (
    DiagnosticEvent,
    EventKind,
    EventSink,
    log_event,
)
from mortgage_rate_dashboard.models.market_data import Observation, SeriesBundle
from mortgage_rate_dashboard.models.snapshot import DashboardSnapshot


logger = logging.getLogger(__name__)


# Price indices need a longer window than the charted range
INFLATION_INDICATORS = (Indicator.CPI, Indicator.CORE_PCE)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one completed load."""

    sequence: int
    bundle: SeriesBundle
    snapshot: DashboardSnapshot


class SnapshotLoader:
    """
    Fetches every indicator concurrently and assembles a snapshot.

    Each load is stamped with a sequence number. A load that finishes after
    a newer one was started is discarded, so a slow stale request never
    replaces fresher data. The last good bundle is kept for spread-only
    recomputation.
    """

    def __init__(
        self,
        fetcher: FredFetcher,
        assembler: SnapshotAssembler | None = None,
        on_event: EventSink | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.on_event = on_event or log_event
        self.assembler = assembler or SnapshotAssembler(self.on_event)
        self._sequence = 0
        self.current: LoadResult | None = None

    @property
    def bundle(self) -> SeriesBundle | None:
        return self.current.bundle if self.current else None

    @property
    def snapshot(self) -> DashboardSnapshot | None:
        return self.current.snapshot if self.current else None

    async def _fetch_secondary(
        self, indicator: Indicator, start: date, end: date
    ) -> list[Observation]:
        """Fetch a secondary series; any failure becomes an empty series."""
        try:
            return await self.fetcher.afetch_series(indicator, start, end)
        except Exception as e:
            self.on_event(
                DiagnosticEvent(
                    kind=EventKind.SERIES_FETCH_FAILED,
                    message=f"Fetch failed, treating as empty: {e}",
                    indicator=indicator,
                    detail={"error": type(e).__name__},
                )
            )
            return []

    async def _fetch_primary(self, start: date, end: date) -> list[Observation]:
        try:
            return await self.fetcher.afetch_series(Indicator.TEN_YEAR_YIELD, start, end)
        except Exception as e:
            raise FatalDataUnavailable(
                Indicator.TEN_YEAR_YIELD, f"fetch failed: {e}"
            ) from e

    async def fetch_bundle(
        self, time_range: TimeRange, today: date | None = None
    ) -> SeriesBundle:
        """Fan out all five requests and wait for every one of them."""
        start, end = request_window(time_range, today)
        inflation_start, inflation_end = inflation_window(today)

        results = await asyncio.gather(
            self._fetch_primary(start, end),
            self._fetch_secondary(Indicator.MORTGAGE_30, start, end),
            self._fetch_secondary(Indicator.MORTGAGE_15, start, end),
            self._fetch_secondary(Indicator.CPI, inflation_start, inflation_end),
            self._fetch_secondary(Indicator.CORE_PCE, inflation_start, inflation_end),
        )
        treasury, mortgage_30, mortgage_15, cpi, core_pce = results

        return SeriesBundle(
            treasury=tuple(treasury),
            mortgage_30=tuple(mortgage_30),
            mortgage_15=tuple(mortgage_15),
            cpi=tuple(cpi),
            core_pce=tuple(core_pce),
            time_range=time_range,
        )

    async def load(
        self, time_range: TimeRange, spread: float, today: date | None = None
    ) -> LoadResult | None:
        """
        Fetch and assemble a snapshot for a time range.

        Returns:
            The new LoadResult, or None when a newer load superseded this one

        Raises:
            FatalDataUnavailable: The 10-year yield could not be loaded. The
                previous snapshot is left in place.
        """
        self._sequence += 1
        sequence = self._sequence

        bundle = await self.fetch_bundle(time_range, today)

        if sequence != self._sequence:
            self.on_event(
                DiagnosticEvent(
                    kind=EventKind.LOAD_SUPERSEDED,
                    message=f"Discarding load #{sequence}, #{self._sequence} is newer",
                    detail={"sequence": sequence, "latest": self._sequence},
                )
            )
            return None

        snapshot = self.assembler.assemble(bundle, spread)
        self.current = LoadResult(sequence=sequence, bundle=bundle, snapshot=snapshot)
        return self.current

    def recompute(self, spread: float) -> DashboardSnapshot:
        """Re-derive the current snapshot for a new spread without fetching."""
        if self.current is None:
            raise FatalDataUnavailable(Indicator.TEN_YEAR_YIELD, "nothing loaded yet")

        snapshot = self.assembler.assemble(self.current.bundle, spread)
        self.current = LoadResult(
            sequence=self.current.sequence, bundle=self.current.bundle, snapshot=snapshot
        )
        return snapshot

    def load_sync(
        self, time_range: TimeRange, spread: float, today: date | None = None
    ) -> LoadResult | None:
        """Blocking wrapper for scripts and the Streamlit app."""

        async def _run() -> LoadResult | None:
            try:
                return await self.load(time_range, spread, today)
            finally:
                # The async client is bound to this event loop
                await self.fetcher.aclose()

        return asyncio.run(_run())
