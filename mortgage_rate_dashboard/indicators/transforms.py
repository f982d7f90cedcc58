"""
Numeric transforms for rate and inflation series.

All functions are pure. Degenerate inputs (zero denominators, empty or
too-short series) resolve to documented fallback values instead of raising.

Rounding follows fixed-point string formatting: the exact binary value of the
float is rounded half-up on its magnitude with the sign preserved, so
``round_fixed(1.005, 2)`` is ``1.0`` (1.005 is stored as 1.00499...) while
``round_fixed(0.125, 2)`` is ``0.13``. Python's built-in ``round`` uses
banker's rounding and would drift from that on exact ties.
"""

from dataclasses import dataclass
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Sequence

import numpy as np
import pandas as pd

from mortgage_rate_dashboard.config import FIFTEEN_YEAR_SPREAD_OFFSET


@dataclass(frozen=True)
class ValueRange:
    """Minimum and maximum of a series."""

    min: float
    max: float

    @property
    def width(self) -> float:
        return self.max - self.min


def round_fixed(value: float, digits: int) -> float:
    """
    Round to a fixed number of decimals, half away from zero.

    Non-finite values pass through unchanged. Precision grows with the
    magnitude so very large results still round instead of raising.
    """
    if not math.isfinite(value):
        return value

    exact = Decimal(value)
    context = Context(prec=max(28, exact.adjusted() + digits + 2))
    quantum = Decimal(1).scaleb(-digits)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context))


def round2(value: float) -> float:
    return round_fixed(value, 2)


def round3(value: float) -> float:
    return round_fixed(value, 3)


def round4(value: float) -> float:
    return round_fixed(value, 4)


# ===== Rate estimates =====

def estimate_rate(treasury_yield: float, spread: float) -> float:
    """
    Estimate the 30-year mortgage rate from the 10-year yield.

    Args:
        treasury_yield: 10-year Treasury yield in percent (e.g. 4.25)
        spread: Lender markup in percentage points (e.g. 1.8)

    Returns:
        Estimated rate in percent, rounded to 2 decimals
    """
    return round2(treasury_yield + spread)


def estimate_15_year_rate(treasury_yield: float, spread: float) -> float:
    """Estimate the 15-year mortgage rate; 15-year loans carry a smaller markup."""
    return round2(treasury_yield + (spread - FIFTEEN_YEAR_SPREAD_OFFSET))


# ===== Changes =====

def delta(current: float, previous: float) -> float:
    """Signed change between two readings."""
    return round2(current - previous)


def percent_change(current: float, previous: float) -> float:
    """
    Fractional change (0.05 == 5%).

    Returns 0 when the previous value is 0.
    """
    if previous == 0:
        return 0.0
    return round4((current - previous) / previous)


def annual_inflation_rate(current_index: float, year_ago_index: float) -> float:
    """Year-over-year change of a price index, in percent."""
    if year_ago_index == 0:
        return 0.0
    return round2((current_index - year_ago_index) / year_ago_index * 100)


def monthly_inflation_rate(current_index: float, previous_month_index: float) -> float:
    """Month-over-month change of a price index, in percent."""
    if previous_month_index == 0:
        return 0.0
    return round3((current_index - previous_month_index) / previous_month_index * 100)


# ===== Series statistics =====

def moving_average(values: Sequence[float], window: int) -> list[float]:
    """
    Trailing simple moving average.

    The result has ``len(values) - window + 1`` entries and is not paired
    with dates; callers re-attach dates starting at ``window - 1``. Returns
    an empty list when the window is not positive or longer than the series.
    """
    if window <= 0 or window > len(values):
        return []

    # Plain per-window sum, no compensated running total
    return [
        round2(sum(values[end - window:end]) / window)
        for end in range(window, len(values) + 1)
    ]


def volatility(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1), 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return round3(float(pd.Series(values, dtype=float).std(ddof=1)))


def value_range(values: Sequence[float]) -> ValueRange:
    """Min and max of a series, (0, 0) when empty."""
    if len(values) == 0:
        return ValueRange(0.0, 0.0)
    return ValueRange(float(min(values)), float(max(values)))


def normalize(values: Sequence[float]) -> list[float]:
    """Min-max scale to [0, 1]; a flat series maps to all zeros."""
    bounds = value_range(values)
    if bounds.width == 0:
        return [0.0] * len(values)

    scaled = (np.asarray(values, dtype=float) - bounds.min) / bounds.width
    return [round3(float(v)) for v in scaled]
