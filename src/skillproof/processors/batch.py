"""Sequential batch ranking of many resumes against one job description.

Each candidate moves through a small state machine:

    Pending -> Cached                      (full-analysis cache hit)
    Pending -> Attempt(1) -> Success
                          -> Retryable -> Attempt(n + 1) ...
                          -> Final -> Failed

A failed candidate never aborts the batch.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from skillproof.cache import CacheRegistry, analysis_cache_key, candidate_id, jd_hash
from skillproof.config import Settings
from skillproof.errors import QuotaError, TransientError, ValidationError, looks_like_quota_error
from skillproof.models.results import BatchJob, CandidateAnalysis, CandidateResult, CandidateStatus
from skillproof.processors.documents import CandidateDocument, extract_text
from skillproof.processors.pipeline import CandidateAnalyzer
from skillproof.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

JD_PREVIEW_CHARS = 200

ProgressCallback = Callable[[int, int], None]


class FailureKind(str, Enum):
    """How a failed attempt should be handled."""

    VALIDATION = "validation"  # Final immediately
    QUOTA = "quota"  # Long cooldown, then retry
    TRANSIENT = "transient"  # Exponential backoff, then retry


def classify_failure(error: Exception) -> FailureKind:
    """Map an exception onto a failure kind.

    Unclassified exceptions are transient unless their message looks like a
    quota rejection.
    """
    if isinstance(error, ValidationError):
        return FailureKind.VALIDATION
    if isinstance(error, QuotaError):
        return FailureKind.QUOTA
    if isinstance(error, TransientError):
        return FailureKind.TRANSIENT
    if looks_like_quota_error(error):
        return FailureKind.QUOTA
    return FailureKind.TRANSIENT


@dataclass(frozen=True)
class RetryPolicy:
    """Attempt budget and delays between attempts."""

    max_attempts: int = 2
    quota_cooldown_seconds: float = 30.0
    backoff_base_seconds: float = 3.0

    @classmethod
    def from_settings(cls, settings: Settings) -> RetryPolicy:
        return cls(
            max_attempts=settings.max_attempts,
            quota_cooldown_seconds=settings.quota_cooldown_seconds,
            backoff_base_seconds=settings.backoff_base_seconds,
        )

    def delay_before_retry(self, kind: FailureKind, attempt: int) -> float | None:
        """Seconds to wait before attempt ``attempt + 1``, or None if final."""
        if kind is FailureKind.VALIDATION or attempt >= self.max_attempts:
            return None
        if kind is FailureKind.QUOTA:
            return self.quota_cooldown_seconds
        return self.backoff_base_seconds**attempt


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one attempt: an analysis or a classified failure."""

    attempt: int
    analysis: CandidateAnalysis | None = None
    error: Exception | None = None
    kind: FailureKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.analysis is not None


class BatchOrchestrator:
    """Analyze candidates one at a time and rank them."""

    def __init__(
        self,
        analyzer: CandidateAnalyzer,
        caches: CacheRegistry,
        limiter: RateLimiter,
        policy: RetryPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
        timer: Callable[[], float] = time.perf_counter,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.analyzer = analyzer
        self.caches = caches
        self.limiter = limiter
        self.policy = policy or RetryPolicy()
        self._sleep = sleep
        self._timer = timer
        self._now = now

    def _attempt(
        self, document: CandidateDocument, jd_text: str, cand_id: str, job_hash: str, attempt: int
    ) -> AttemptResult:
        try:
            resume_text = extract_text(document)
            analysis = self.analyzer.analyze(
                resume_text,
                jd_text,
                limiter=self.limiter,
                candidate_id=cand_id,
                jd_hash=job_hash,
            )
        except Exception as e:
            kind = classify_failure(e)
            logger.warning(
                f"Attempt {attempt}/{self.policy.max_attempts} failed for {document.name} "
                f"({kind.value}): {e}"
            )
            return AttemptResult(attempt=attempt, error=e, kind=kind)
        return AttemptResult(attempt=attempt, analysis=analysis)

    def process_candidate(
        self, document: CandidateDocument, jd_text: str, job_hash: str
    ) -> CandidateResult:
        """Analyze one document with cache short-circuit and retries."""
        started = self._timer()
        cand_id = candidate_id(document.content)
        cache_key = analysis_cache_key(cand_id, job_hash)

        def elapsed_ms() -> float:
            return (self._timer() - started) * 1000

        cached = self.caches.full_analyses.get(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for {document.name} ({cand_id})")
            return CandidateResult(
                candidate_id=cand_id,
                name=cached.candidate_name or document.stem,
                score=cached.final_score,
                status=CandidateStatus.CACHED,
                analysis=cached,
                processing_time_ms=elapsed_ms(),
            )

        attempt = 1
        while True:
            logger.info(f"Processing {document.name} (attempt {attempt}/{self.policy.max_attempts})")
            result = self._attempt(document, jd_text, cand_id, job_hash, attempt)

            if result.succeeded:
                analysis = result.analysis
                self.caches.full_analyses.set(cache_key, analysis)
                return CandidateResult(
                    candidate_id=cand_id,
                    name=analysis.candidate_name or document.stem,
                    score=analysis.final_score,
                    status=CandidateStatus.SUCCESS,
                    analysis=analysis,
                    attempts=attempt,
                    processing_time_ms=elapsed_ms(),
                )

            delay = self.policy.delay_before_retry(result.kind, attempt)
            if delay is None:
                return CandidateResult(
                    candidate_id=cand_id,
                    name=document.stem,
                    score=0,
                    status=CandidateStatus.FAILED,
                    error=str(result.error) or type(result.error).__name__,
                    attempts=attempt,
                    processing_time_ms=elapsed_ms(),
                )

            if result.kind is FailureKind.QUOTA:
                logger.info(f"Rate limited, cooling down {delay:.0f}s")
                self._sleep(delay)
                self.limiter.reset()
            else:
                logger.info(f"Retrying in {delay:.0f}s")
                self._sleep(delay)
            attempt += 1

    def run(
        self,
        documents: Sequence[CandidateDocument],
        jd_text: str,
        on_progress: ProgressCallback | None = None,
    ) -> BatchJob:
        """Process every document in order, then rank by score.

        Args:
            documents: Resumes to rank.
            jd_text: Job description shared by the batch.
            on_progress: Called with (done, total) after each candidate.

        Returns:
            BatchJob: Results in rank order with batch counters.
        """
        started = self._timer()
        created_at = self._now()
        batch_id = f"batch-{int(created_at.timestamp() * 1000)}-{uuid.uuid4().hex[:6]}"
        job_hash = jd_hash(jd_text)
        total = len(documents)
        logger.info(f"Starting {batch_id} with {total} candidates (sequential)")

        results: list[CandidateResult] = []
        for document in documents:
            results.append(self.process_candidate(document, jd_text, job_hash))
            if on_progress is not None:
                on_progress(len(results), total)
            logger.info(f"Progress: {len(results)}/{total}")

        # sorted() is stable: equal scores keep submission order
        ranked = [
            result.model_copy(update={"rank": position})
            for position, result in enumerate(
                sorted(results, key=lambda r: r.score, reverse=True), start=1
            )
        ]

        failed = sum(1 for r in ranked if r.status is CandidateStatus.FAILED)
        cached = sum(1 for r in ranked if r.status is CandidateStatus.CACHED)
        processed = total - failed - cached
        logger.info(f"{batch_id} complete: {processed} analyzed, {failed} failed, {cached} cached")

        return BatchJob(
            batch_id=batch_id,
            jd_hash=job_hash,
            job_description=jd_text[:JD_PREVIEW_CHARS],
            total_candidates=total,
            processed=processed,
            failed=failed,
            cached=cached,
            candidates=ranked,
            created_at=created_at,
            duration_seconds=self._timer() - started,
        )
