"""Minimum-interval rate limiter for calls to the extraction API."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_MS = 3000


class RateLimiter:
    """Enforce a minimum spacing between consecutive external calls.

    The interval is ``ceil(60000 / requests_per_minute) + buffer_ms``
    milliseconds. A single timer is kept: the time of the last permitted call.
    """

    def __init__(
        self,
        requests_per_minute: int,
        buffer_ms: int = DEFAULT_BUFFER_MS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        name: str = "default",
    ) -> None:
        if requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be positive")
        self.requests_per_minute = requests_per_minute
        self.buffer_ms = buffer_ms
        self.name = name
        self._clock = clock
        self._sleep = sleep
        self._last_call: float | None = None

    @property
    def min_interval_seconds(self) -> float:
        interval_ms = math.ceil(60_000 / self.requests_per_minute) + self.buffer_ms
        return interval_ms / 1000

    def time_until_next_call(self) -> float:
        """Seconds until the next call is permitted (0 if it is already)."""
        if self._last_call is None:
            return 0.0
        elapsed = self._clock() - self._last_call
        return max(0.0, self.min_interval_seconds - elapsed)

    def wait_if_needed(self) -> float:
        """Block until the interval has elapsed, then record the call.

        Returns:
            Seconds spent waiting.
        """
        wait = self.time_until_next_call()
        if wait > 0:
            logger.info(f"Rate limiter '{self.name}': waiting {wait:.1f}s")
            self._sleep(wait)
        self._last_call = self._clock()
        return wait

    def reset(self) -> None:
        """Forget the last call, e.g. after a quota cooldown."""
        self._last_call = None
