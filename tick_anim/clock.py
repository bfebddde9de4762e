"""FrameClock - measures elapsed milliseconds between frame ticks."""
from __future__ import annotations

import time
from typing import Callable


class FrameClock:
    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._last = time_fn()
        self._frame_number = 0
        self._last_elapsed = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def last_elapsed(self) -> float:
        return self._last_elapsed

    def tick(self) -> float:
        """Return milliseconds since the previous tick and advance the frame count."""
        now = self._time_fn()
        self._last_elapsed = (now - self._last) * 1000.0
        self._last = now
        self._frame_number += 1
        return self._last_elapsed

    def reset(self) -> None:
        self._last = self._time_fn()
        self._frame_number = 0
        self._last_elapsed = 0.0
