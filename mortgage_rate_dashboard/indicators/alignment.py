"""Align series of different publication frequency onto shared date labels."""

from datetime import date
from typing import Iterable, Sequence

import pandas as pd

from mortgage_rate_dashboard.models.market_data import AlignedPoint, Observation


def _to_series(observations: Iterable[Observation]) -> pd.Series:
    """Date-indexed values; a repeated date keeps its last value."""
    rows = [(obs.date, obs.value) for obs in observations]
    if not rows:
        return pd.Series(dtype=float)

    df = pd.DataFrame(rows, columns=["date", "value"])
    df = df.drop_duplicates(subset="date", keep="last")
    return df.set_index("date")["value"]


def align_to_labels(
    labels: Sequence[date], observations: Iterable[Observation]
) -> list[AlignedPoint]:
    """
    Place a sparse series onto reference dates.

    Exact date matches only. Reference dates with no observation come back
    with ``value=None`` so charts can bridge the gap; a series that shares no
    dates with the labels yields all-absent points.

    Args:
        labels: Ordered reference dates, usually the densest series' dates
        observations: Sparse series (weekly mortgage survey, monthly index)

    Returns:
        One AlignedPoint per label, in label order
    """
    lookup = _to_series(observations)
    if lookup.empty:
        return [AlignedPoint(date=d, value=None) for d in labels]

    aligned = lookup.reindex(list(labels))
    return [
        AlignedPoint(date=d, value=None if pd.isna(v) else float(v))
        for d, v in zip(labels, aligned.tolist())
    ]


def union_labels(*series: Iterable[Observation]) -> list[date]:
    """Sorted union of every date appearing in any of the series."""
    dates: set[date] = set()
    for observations in series:
        dates.update(obs.date for obs in observations)
    return sorted(dates)


def align_union(
    *series: Sequence[Observation],
) -> tuple[list[date], list[list[AlignedPoint]]]:
    """
    Align several sparse series onto the union of their dates.

    Used when no dense reference exists, e.g. two monthly price indices
    published on different days.

    Returns:
        (labels, aligned) where aligned[i] matches series[i]
    """
    labels = union_labels(*series)
    return labels, [align_to_labels(labels, observations) for observations in series]
