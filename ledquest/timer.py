"""A millisecond countdown timer used to pace entity actions."""

from __future__ import annotations

import time
from typing import Callable

from ledquest.constants import SPEED_BOOTS_MULTIPLIER


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class Timer:
    """Reports when ``delay`` milliseconds have passed since the last start."""

    def __init__(self, delay: int, clock: Callable[[], float] = _monotonic_ms) -> None:
        self.delay = delay
        self._clock = clock
        self._start = clock()

    def start(self) -> None:
        """Restart the countdown from now."""
        self._start = self._clock()

    def time_is_up(self) -> bool:
        """Whether the delay has elapsed since the last start."""
        return self._clock() >= self._start + self.delay

    def speed_up(self) -> None:
        """Shorten the delay by the speed-boots factor."""
        self.delay //= SPEED_BOOTS_MULTIPLIER

    def slow_down(self) -> None:
        """Lengthen the delay by the speed-boots factor."""
        self.delay *= SPEED_BOOTS_MULTIPLIER