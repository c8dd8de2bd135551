"""Counting of ticks per time window to monitor throughput."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List

__all__ = ["ThroughputMonitoring"]


@dataclass(frozen=True)
class _ThroughputEntry:
    measured_throughput: int
    start: float


class ThroughputMonitoring:
    """Counts ticks within windows of ``throughput_duration`` seconds.

    Each completed window is recorded, so the average, last and total
    throughput can be queried.
    """

    def __init__(
        self,
        throughput_duration: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.throughput_duration = throughput_duration
        self._clock = clock
        self._timer = clock()
        self._current_throughput = 0
        self._measured: List[_ThroughputEntry] = []

    def tick(self) -> bool:
        """Count one tick; return True when a window closed instead."""
        if self._clock() - self._timer >= self.throughput_duration:
            self._measured.append(_ThroughputEntry(self._current_throughput, self._timer))
            self._current_throughput = 0
            self._timer = self._clock()
            return True
        self._current_throughput += 1
        return False

    def average(self) -> int:
        """Return the integer average over all completed windows, or 0."""
        if not self._measured:
            return 0
        return sum(e.measured_throughput for e in self._measured) // len(self._measured)

    def reset(self) -> None:
        """Forget the history and the current count."""
        self._current_throughput = 0
        self._measured.clear()

    def last_throughput(self) -> int:
        """Return the count of the last completed window, or 0."""
        return self._measured[-1].measured_throughput if self._measured else 0

    def total_measured_ticks(self) -> int:
        """Return all ticks counted, completed windows and current one."""
        return sum(e.measured_throughput for e in self._measured) + self._current_throughput

    def __str__(self) -> str:
        elapsed = self._clock() - self._timer
        return (
            f"Current Throughput: {self.last_throughput()}, "
            f"Elapsed Time: {elapsed}s, "
            f"Average Throughput: {self.average()}"
        )

    __repr__ = __str__