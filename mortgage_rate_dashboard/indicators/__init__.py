"""Rate derivations, series alignment, and snapshot assembly."""

from mortgage_rate_dashboard.indicators.calculator import (
    FatalDataUnavailable,
    SnapshotAssembler,
    recompute_snapshot,
)
from mortgage_rate_dashboard.indicators.loader import LoadResult, SnapshotLoader

__all__ = [
    "FatalDataUnavailable",
    "LoadResult",
    "SnapshotAssembler",
    "SnapshotLoader",
    "recompute_snapshot",
]
