"""Process-scoped state shared by the analysis pipeline."""

from __future__ import annotations

import time
from dataclasses import dataclass

from skillproof.cache import CacheRegistry
from skillproof.config import Settings, get_settings
from skillproof.rate_limiter import RateLimiter


@dataclass
class AppContext:
    """Caches and rate limiters owned by one process (or one test)."""

    settings: Settings
    caches: CacheRegistry
    interactive_limiter: RateLimiter
    batch_limiter: RateLimiter

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        clock=time.time,
        monotonic=time.monotonic,
        sleep=time.sleep,
    ) -> AppContext:
        """Build a context from settings, with injectable time sources."""
        settings = settings or get_settings()
        return cls(
            settings=settings,
            caches=CacheRegistry.from_settings(settings, clock=clock),
            interactive_limiter=RateLimiter(
                settings.interactive_requests_per_minute,
                buffer_ms=settings.rate_limit_buffer_ms,
                clock=monotonic,
                sleep=sleep,
                name="interactive",
            ),
            batch_limiter=RateLimiter(
                settings.batch_requests_per_minute,
                buffer_ms=settings.rate_limit_buffer_ms,
                clock=monotonic,
                sleep=sleep,
                name="batch",
            ),
        )
