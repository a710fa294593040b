"""Frame timing: elapsed-time measurement and a fixed frame-rate limiter."""

from __future__ import annotations

import time
from typing import Callable

FRAME_RATE = 60


def _microseconds() -> int:
    return time.perf_counter_ns() // 1000


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000.0)


class Timer:
    """Measures the time between calls, with a clock counting microseconds."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _microseconds
        self.last_time = 0
        self.elapsed_time = 0.0

    def start(self) -> None:
        self.last_time = self._clock()

    def time_elapsed(self) -> float:
        """Seconds since the previous call (or since start())."""
        now = self._clock()
        interval = int(now - self.last_time)
        self.elapsed_time = interval / 1_000_000
        self.last_time = now
        return self.elapsed_time


class FpsController:
    """Sleeps so that frames run at FRAME_RATE, and averages frame times.

    ``clock`` returns milliseconds and ``sleep`` waits a number of milliseconds.
    """

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[int], None] | None = None,
    ) -> None:
        self._clock = clock or _milliseconds
        self._sleep = sleep or _sleep_ms
        self._count = 0
        self._base_time = 0
        self._last: int | None = None
        self._frame_times = [0] * FRAME_RATE
        self.average_frame_ms = 0.0

    def wait_fps(self) -> None:
        """Wait until the current frame is due, then record its duration."""
        if self._count == 0:
            if self._last is None:
                term = 0
            else:
                term = self._base_time + 1000 - self._clock()
        else:
            term = int(self._base_time + self._count * (1000.0 / FRAME_RATE)) - self._clock()

        if term > 0:
            self._sleep(term)

        now = self._clock()
        if self._count == 0:
            self._base_time = now
        self._frame_times[self._count] = now - (self._last or 0)
        self._last = now

        if self._count == FRAME_RATE - 1:
            self.average_frame_ms = sum(self._frame_times) / FRAME_RATE
        self._count = (self._count + 1) % FRAME_RATE

    def fps(self) -> float | None:
        """Frames per second over the last full cycle, or None before one is measured."""
        if self.average_frame_ms == 0:
            return None
        return 1000 / self.average_frame_ms