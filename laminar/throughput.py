"""Counting events per fixed time window and keeping a history of the counts."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["ThroughputMonitoring"]


@dataclass(frozen=True)
class _ThroughputEntry:
    measured_throughput: int
    start: float


class ThroughputMonitoring:
    """Measures throughput over windows of ``throughput_duration`` seconds.

    Each call to :meth:`tick` counts one event. When the window has elapsed,
    the count for it is recorded and a new window begins.
    """

    def __init__(
        self,
        throughput_duration: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._throughput_duration = throughput_duration
        self._clock = clock
        self._timer = clock()
        self._current_throughput = 0
        self._measured: list[_ThroughputEntry] = []

    def tick(self) -> bool:
        """Count one event; return True if a window closed instead."""
        if self._elapsed() >= self._throughput_duration:
            self._measured.append(_ThroughputEntry(self._current_throughput, self._timer))
            self._current_throughput = 0
            self._timer = self._clock()
            return True
        self._current_throughput += 1
        return False

    def average(self) -> int:
        """Return the mean of all recorded window counts, or 0 if none."""
        if not self._measured:
            return 0
        return sum(entry.measured_throughput for entry in self._measured) // len(
            self._measured
        )

    def reset(self) -> None:
        """Clear the history and the count of the current window."""
        self._current_throughput = 0
        self._measured.clear()

    def last_throughput(self) -> int:
        """Return the count of the most recently closed window, or 0."""
        if not self._measured:
            return 0
        return self._measured[-1].measured_throughput

    def total_measured_ticks(self) -> int:
        """Return all counted events, including the current window."""
        return (
            sum(entry.measured_throughput for entry in self._measured)
            + self._current_throughput
        )

    def _elapsed(self) -> float:
        return self._clock() - self._timer

    def __str__(self) -> str:
        return (
            f"Current Throughput: {self.last_throughput()}, "
            f"Elapsed Time: {self._elapsed():.6f}s, "
            f"Average Throughput: {self.average()}"
        )

    __repr__ = __str__