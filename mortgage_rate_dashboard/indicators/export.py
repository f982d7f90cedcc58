"""Tabular rows for exporting the rate history."""

from dataclasses import dataclass
from datetime import date

import pandas as pd

from mortgage_rate_dashboard.config import TimeRange
from mortgage_rate_dashboard.models.snapshot import DashboardSnapshot


EXPORT_COLUMNS = ["Date", "10Y Treasury", "Estimated Mortgage", "Actual Mortgage"]


@dataclass(frozen=True)
class ExportRow:
    """One exported date."""

    date: date
    treasury_yield: float
    estimated_mortgage: float
    actual_mortgage: float | None  # None on dates without a survey print


def export_rows(snapshot: DashboardSnapshot) -> list[ExportRow]:
    """Treasury, estimated, and published 30-year rates on the treasury dates."""
    history = snapshot.history
    actual = history.actual_mortgage or ()
    actual_by_date = {point.date: point.value for point in actual}

    return [
        ExportRow(
            date=treasury.date,
            treasury_yield=treasury.value,
            estimated_mortgage=estimated.value,
            actual_mortgage=actual_by_date.get(treasury.date),
        )
        for treasury, estimated in zip(history.treasury_yield, history.estimated_mortgage)
    ]


def export_frame(snapshot: DashboardSnapshot) -> pd.DataFrame:
    """Export rows as a DataFrame with display column names."""
    rows = export_rows(snapshot)
    return pd.DataFrame(
        [
            (row.date.isoformat(), row.treasury_yield, row.estimated_mortgage, row.actual_mortgage)
            for row in rows
        ],
        columns=EXPORT_COLUMNS,
    )


def export_filename(time_range: TimeRange, today: date | None = None) -> str:
    """Download name, e.g. mortgage-trends-90d-2024-05-01.csv."""
    day = today or date.today()
    return f"mortgage-trends-{time_range.value}-{day.isoformat()}.csv"
