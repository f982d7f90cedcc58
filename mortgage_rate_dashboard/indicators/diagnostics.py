"""Structured diagnostic events emitted while loading and assembling snapshots."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from mortgage_rate_dashboard.config import Indicator


logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Kinds of diagnostic event, with the log level each maps to."""
    SERIES_FETCH_FAILED = ("series_fetch_failed", logging.WARNING)
    SERIES_EMPTY = ("series_empty", logging.WARNING)
    INFLATION_HISTORY_SHORT = ("inflation_history_short", logging.WARNING)
    YEAR_AGO_NOT_FOUND = ("year_ago_not_found", logging.WARNING)
    SNAPSHOT_ASSEMBLED = ("snapshot_assembled", logging.INFO)
    LOAD_SUPERSEDED = ("load_superseded", logging.INFO)

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def level(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class DiagnosticEvent:
    """Single diagnostic record."""

    kind: EventKind
    message: str
    indicator: Indicator | None = None
    detail: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)


EventSink = Callable[[DiagnosticEvent], None]


def log_event(event: DiagnosticEvent) -> None:
    """Default sink: forward to the module logger."""
    prefix = f"[{event.indicator.series_id}] " if event.indicator else ""
    logger.log(
        event.kind.level,
        f"{prefix}{event.message}",
        extra={"event": event.kind.code, "detail": event.detail},
    )
