"""Wall-clock date strings and a monotonic frame clock."""

from __future__ import annotations

import time
from collections.abc import Callable

from .services import Service


def _time_info() -> time.struct_time:
    return time.localtime()


def get_date() -> str:
    """Return the local date as ``YYYY-MM-DD``."""
    return time.strftime("%Y-%m-%d", _time_info())


def get_time() -> str:
    """Return the local time as ``HH:MM:SS``."""
    return time.strftime("%H:%M:%S", _time_info())


def get_date_and_time() -> str:
    """Return the local date and time separated by a space."""
    return f"{get_date()} {get_time()}"


def _ns_to_ms(nanoseconds: int) -> float:
    # Truncate to whole microseconds before converting to milliseconds.
    return (nanoseconds // 1000) / 1000.0


class GlobalClock(Service):
    """Measures time since start and the delta between successive updates."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._last_delta_point = now
        self._delta = 0

    def start(self) -> None:
        """Restart the duration measurement from now."""
        self._start = self._clock()

    def update_delta(self) -> None:
        """Record the time elapsed since the previous update."""
        now = self._clock()
        self._delta = now - self._last_delta_point
        self._last_delta_point = now

    @property
    def delta_ms(self) -> float:
        """Milliseconds between the two most recent updates."""
        return _ns_to_ms(self._delta)

    @property
    def duration_ms(self) -> float:
        """Milliseconds elapsed since the clock was started."""
        return _ns_to_ms(self._clock() - self._start)