"""Data fetching."""

from .fred_fetcher import FredFetcher
from .date_ranges import inflation_window, months_before, request_window

__all__ = ["FredFetcher", "inflation_window", "months_before", "request_window"]
