"""A stopwatch that accumulates wall-clock time across start/stop cycles."""

from __future__ import annotations

import time
from dataclasses import dataclass

__all__ = ["ElapsedTime", "Chronometer"]


@dataclass(frozen=True)
class ElapsedTime:
    """An elapsed duration expressed in three units."""

    seconds: float = 0.0
    milliseconds: float = 0.0
    microseconds: float = 0.0

    def plus_microseconds(self, count: int) -> ElapsedTime:
        """Return this duration extended by ``count`` whole microseconds."""
        return ElapsedTime(
            self.seconds + count / 1_000_000,
            self.milliseconds + count / 1_000,
            self.microseconds + float(count),
        )


def _now_ns() -> int:
    return time.time_ns()


class Chronometer:
    """Stopwatch measured on the system clock with microsecond resolution."""

    def __init__(self, start: bool = True) -> None:
        self._start_ns = 0
        self._elapsed = ElapsedTime()
        self._paused = True
        self.reset()
        if start:
            self.start()

    @property
    def paused(self) -> bool:
        return self._paused

    def _running_microseconds(self) -> int:
        return (_now_ns() - self._start_ns) // 1_000

    def start(self) -> None:
        """Start (or resume) timing from now."""
        self._start_ns = _now_ns()
        self._paused = False

    def stop(self) -> None:
        """Add the time since the last start to the total and pause."""
        self._elapsed = self._elapsed.plus_microseconds(self._running_microseconds())
        self._paused = True

    def reset(self) -> None:
        """Clear the accumulated time and pause."""
        self._start_ns = 0
        self._elapsed = ElapsedTime()
        self._paused = True

    def restart(self) -> None:
        """Clear the accumulated time and start again."""
        self.reset()
        self.start()

    def elapsed_time(self) -> ElapsedTime:
        """Return the accumulated time, including the running period if any."""
        if self._paused:
            return self._elapsed
        return self._elapsed.plus_microseconds(self._running_microseconds())