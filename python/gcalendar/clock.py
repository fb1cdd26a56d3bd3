"""Now-sources supplying the current time as epoch milliseconds."""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from .calendar_record import CalendarRecord
from .utils import NANOS_PER_MILLI

logger = logging.getLogger(__name__)


class NowSource(Protocol):
    def __call__(self) -> int:  # pragma: no cover - protocol definition
        ...


def system_millis() -> int:
    """Host wall-clock time truncated to whole milliseconds."""
    return time.time_ns() // NANOS_PER_MILLI


class FixedClock:
    """Now-source that always reports the same instant."""

    __slots__ = ("_millis",)

    def __init__(self, millis: int) -> None:
        self._millis = int(millis)

    def __call__(self) -> int:
        return self._millis


def now(source: Optional[NowSource] = None) -> CalendarRecord:
    """Read ``source`` once and decompose the result."""
    reader = source if source is not None else system_millis
    millis = reader()
    logger.debug("Read %d ms from now-source %r", millis, reader)
    return CalendarRecord.from_epoch(millis)


__all__ = ["FixedClock", "NowSource", "now", "system_millis"]
