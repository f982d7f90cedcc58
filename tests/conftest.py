# Shared fixtures for the dashboard test suite

import asyncio
from datetime import date, timedelta

import httpx
import pytest

from mortgage_rate_dashboard.config import Indicator, Settings
from mortgage_rate_dashboard.models.market_data import Observation, SeriesBundle


TODAY = date(2024, 5, 3)


def make_daily(start: date, values: list[float]) -> list[Observation]:
    """Consecutive calendar days starting at start."""
    return [Observation(start + timedelta(days=i), v) for i, v in enumerate(values)]


def make_monthly(year: int, month: int, values: list[float]) -> list[Observation]:
    """First-of-month observations starting at year/month."""
    result = []
    for i, v in enumerate(values):
        y, m = divmod(month - 1 + i, 12)
        result.append(Observation(date(year + y, m + 1, 1), v))
    return result


class FakeFetcher:
    """Stands in for FredFetcher in loader tests."""

    def __init__(
        self,
        series: dict[Indicator, list[Observation]],
        failures: tuple[Indicator, ...] = (),
        gate: asyncio.Event | None = None,
        hold_start: date | None = None,
    ) -> None:
        self.series = series
        self.failures = failures
        self.gate = gate
        self.hold_start = hold_start
        self.calls: list[tuple[Indicator, date | None, date | None]] = []
        self.closed = 0

    async def afetch_series(self, indicator, start_date=None, end_date=None):
        self.calls.append((indicator, start_date, end_date))
        if (
            self.gate is not None
            and indicator is Indicator.TEN_YEAR_YIELD
            and start_date == self.hold_start
        ):
            await self.gate.wait()
        if indicator in self.failures:
            raise httpx.ConnectError(f"{indicator.series_id} unreachable")
        return list(self.series.get(indicator, []))

    async def aclose(self) -> None:
        self.closed += 1


@pytest.fixture
def events():
    """List that collects diagnostic events; pass events.append as the sink."""
    return []


@pytest.fixture
def settings():
    return Settings(
        fred_api_key="test-key",
        fred_base_url="https://fred.test/fred",
        request_timeout=5.0,
        default_spread=1.9,
    )


@pytest.fixture
def treasury():
    return make_daily(date(2024, 5, 1), [4.20, 4.25, 4.30])


@pytest.fixture
def cpi():
    # 2023-03 .. 2024-04, 14 monthly prints
    return make_monthly(2023, 3, [300.0 + i for i in range(14)])


@pytest.fixture
def core_pce():
    return make_monthly(2023, 3, [120.0 + 0.5 * i for i in range(14)])


@pytest.fixture
def full_series(treasury, cpi, core_pce):
    return {
        Indicator.TEN_YEAR_YIELD: treasury,
        Indicator.MORTGAGE_30: [Observation(date(2024, 5, 2), 7.22)],
        Indicator.MORTGAGE_15: [Observation(date(2024, 5, 2), 6.47)],
        Indicator.CPI: cpi,
        Indicator.CORE_PCE: core_pce,
    }


@pytest.fixture
def bundle(full_series):
    return SeriesBundle.from_series(full_series)
