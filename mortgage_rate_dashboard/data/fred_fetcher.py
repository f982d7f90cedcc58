"""FRED API series provider."""

import logging
from datetime import date

import httpx
import pandas as pd

from mortgage_rate_dashboard.config import Settings, Indicator, TimeRange, FRED_SERIES
from mortgage_rate_dashboard.models.market_data import Observation


logger = logging.getLogger(__name__)


class FredFetcher:
    """Fetches observations for the dashboard indicators from the FRED API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._transport = transport
        self._async_transport = async_transport
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.request_timeout, transport=self._transport
            )
        return self._client

    @property
    def async_client(self) -> httpx.AsyncClient:
        """Lazy-initialize async HTTP client."""
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=self.settings.request_timeout, transport=self._async_transport
            )
        return self._async_client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        """Close async HTTP client."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    async def __aenter__(self) -> "FredFetcher":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    def _params(
        self, indicator: Indicator, start_date: date | None, end_date: date | None
    ) -> dict[str, str]:
        params = {
            "series_id": indicator.series_id,
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
            "sort_order": "asc",
        }
        if start_date:
            params["observation_start"] = start_date.isoformat()
        if end_date:
            params["observation_end"] = end_date.isoformat()
        return params

    @staticmethod
    def parse_observations(data: dict) -> list[Observation]:
        """
        Convert a FRED observations payload into Observations.

        FRED marks missing values with "."; those and any other non-numeric
        values are dropped. Output is sorted ascending by date.
        """
        observations = data.get("observations", [])
        if not observations:
            return []

        df = pd.DataFrame(observations)
        df["date"] = pd.to_datetime(df["date"], errors="coerce")
        df["value"] = pd.to_numeric(df["value"], errors="coerce")
        df = df[["date", "value"]].dropna().sort_values("date", kind="stable")

        return [
            Observation(date=ts.date(), value=float(val))
            for ts, val in zip(df["date"], df["value"])
        ]

    def fetch_series(
        self,
        indicator: Indicator,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Observation]:
        """
        Fetch a single series.

        Args:
            indicator: Indicator to fetch
            start_date: First date to include (provider default when None)
            end_date: Last date to include (provider default when None)

        Returns:
            Observations ascending by date
        """
        logger.info(f"Fetching {indicator.series_id} ({start_date} to {end_date})...")
        response = self.client.get(
            f"{self.settings.fred_base_url}/series/observations",
            params=self._params(indicator, start_date, end_date),
        )
        response.raise_for_status()
        observations = self.parse_observations(response.json())
        logger.info(f"  {indicator.series_id}: {len(observations)} observations")
        return observations

    async def afetch_series(
        self,
        indicator: Indicator,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Observation]:
        """Async variant of fetch_series, used for concurrent loads."""
        logger.info(f"Fetching {indicator.series_id} ({start_date} to {end_date})...")
        response = await self.async_client.get(
            f"{self.settings.fred_base_url}/series/observations",
            params=self._params(indicator, start_date, end_date),
        )
        response.raise_for_status()
        observations = self.parse_observations(response.json())
        logger.info(f"  {indicator.series_id}: {len(observations)} observations")
        return observations


def main() -> None:
    """CLI entry point for fetching data."""
    import argparse
    import sys

    from mortgage_rate_dashboard.indicators.calculator import FatalDataUnavailable
    from mortgage_rate_dashboard.indicators.loader import SnapshotLoader

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch FRED rate data")
    parser.add_argument(
        "--series",
        type=str,
        help="Print observations for one series only",
    )
    parser.add_argument("--start", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="End date (YYYY-MM-DD)")
    parser.add_argument(
        "--range",
        choices=[r.value for r in TimeRange],
        default=TimeRange.default().value,
        help="Time range for the snapshot",
    )
    parser.add_argument("--spread", type=float, help="Lender spread in percentage points")
    args = parser.parse_args()

    try:
        settings = Settings()
        if args.series:
            if args.series.upper() not in FRED_SERIES:
                print(f"Unknown series: {args.series}")
                print(f"Available: {', '.join(FRED_SERIES.keys())}")
                sys.exit(1)
            with FredFetcher(settings) as fetcher:
                indicator = Indicator.from_series_id(args.series)
                for obs in fetcher.fetch_series(indicator, args.start, args.end):
                    print(f"{obs.date.isoformat()}  {obs.value:>10.3f}")
            return

        spread = args.spread if args.spread is not None else settings.default_spread
        loader = SnapshotLoader(FredFetcher(settings))
        result = loader.load_sync(TimeRange(args.range), spread)
        snapshot = result.snapshot

        print(f"\nRates as of {snapshot.ten_year_yield.last_updated}")
        print("=" * 60)
        ty = snapshot.ten_year_yield
        print(f"10-Year Treasury      {ty.current:6.2f}%  ({ty.delta:+.2f})")
        rates = snapshot.mortgage_rates
        print(f"Est. 30-Year Mortgage {rates.estimated:6.2f}%  (spread {rates.spread:.2f})")
        print(f"Est. 15-Year Mortgage {rates.estimated_15_year:6.2f}%")
        if rates.actual is not None:
            print(f"30-Year Mortgage      {rates.actual:6.2f}%")
        if rates.actual_15_year is not None:
            print(f"15-Year Mortgage      {rates.actual_15_year:6.2f}%")
        if snapshot.inflation is not None:
            print("\n" + "-" * 60)
            for name, reading in (
                ("CPI", snapshot.inflation.cpi),
                ("Core PCE", snapshot.inflation.core_pce),
            ):
                annual = "N/A" if reading.annual_rate is None else f"{reading.annual_rate:.2f}%"
                print(f"{name:10} {reading.current:10.3f} | YoY {annual:>7} | MoM {reading.monthly_rate:+.3f}%")

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)
    except FatalDataUnavailable as e:
        print(f"No data: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
