"""Process-local TTL caches for evidence, analyses and semantic matches.

Entries expire lazily: an expired entry is removed the first time it is read.
There is no background sweeping.
"""

from __future__ import annotations

import hashlib
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from skillproof.config import Settings
from skillproof.models.evidence import EvidenceProfile
from skillproof.models.results import CandidateAnalysis
from skillproof.models.skills import ResolvedMatches

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Cached value with its creation time and lifetime (seconds)."""

    data: T
    created_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now - self.created_at > self.ttl


class TTLCache(Generic[T]):
    """Dictionary cache whose entries expire after a fixed time to live."""

    def __init__(
        self,
        name: str,
        ttl_seconds: float,
        clock: Clock = time.time,
        key_normalizer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            name: Namespace name, used in logs and stats.
            ttl_seconds: Lifetime of each entry.
            clock: Returns the current time in seconds.
            key_normalizer: Applied to every key before lookup.
        """
        self.name = name
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._normalize = key_normalizer or (lambda key: key)
        self._entries: dict[str, CacheEntry[T]] = {}

    def get(self, key: str) -> T | None:
        """Return the cached value, or None if absent or expired."""
        key = self._normalize(key)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            logger.debug(f"{self.name}: entry {key} expired")
            return None
        return entry.data

    def set(self, key: str, data: T) -> None:
        """Store a value, overwriting any previous entry for the key."""
        self._entries[self._normalize(key)] = CacheEntry(
            data=data, created_at=self._clock(), ttl=self.ttl_seconds
        )

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if one was present."""
        return self._entries.pop(self._normalize(key), None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class CacheRegistry:
    """The three cache namespaces shared by one application context."""

    def __init__(
        self,
        evidence_ttl_seconds: float = 24 * 60 * 60,
        analysis_ttl_seconds: float = 24 * 60 * 60,
        semantic_ttl_seconds: float = 60 * 60,
        clock: Clock = time.time,
    ) -> None:
        # Usernames are case-insensitive on code hosts
        self.evidence_profiles: TTLCache[EvidenceProfile] = TTLCache(
            "evidence_profiles", evidence_ttl_seconds, clock, key_normalizer=str.lower
        )
        self.full_analyses: TTLCache[CandidateAnalysis] = TTLCache(
            "full_analyses", analysis_ttl_seconds, clock
        )
        self.semantic_matches: TTLCache[ResolvedMatches] = TTLCache(
            "semantic_matches", semantic_ttl_seconds, clock
        )

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = time.time) -> CacheRegistry:
        return cls(
            evidence_ttl_seconds=settings.evidence_cache_ttl_seconds,
            analysis_ttl_seconds=settings.analysis_cache_ttl_seconds,
            semantic_ttl_seconds=settings.semantic_cache_ttl_seconds,
            clock=clock,
        )

    def _namespaces(self) -> list[TTLCache]:
        return [self.evidence_profiles, self.full_analyses, self.semantic_matches]

    def stats(self) -> dict[str, int]:
        """Number of stored (possibly expired) entries per namespace."""
        return {cache.name: len(cache) for cache in self._namespaces()}

    def clear_all(self) -> None:
        for cache in self._namespaces():
            cache.clear()
        logger.info("All caches cleared")


def candidate_id(content: bytes) -> str:
    """Content-addressed candidate id: first 16 hex chars of the SHA-256."""
    return hashlib.sha256(content).hexdigest()[:16]


def jd_hash(job_description: str) -> str:
    """Short job-description hash: first 8 hex chars of the SHA-256."""
    return hashlib.sha256(job_description.encode("utf-8")).hexdigest()[:8]


def analysis_cache_key(cand_id: str, job_hash: str) -> str:
    """Key shared by the full-analysis and semantic-match caches."""
    return f"{cand_id}:{job_hash}"
