"""Single-candidate analysis pipeline.

One extraction call per candidate; everything after it is deterministic
apart from the (cached) evidence and link lookups.
"""

from __future__ import annotations

import logging
from typing import Protocol

from skillproof.cache import CacheRegistry, analysis_cache_key
from skillproof.errors import ValidationError
from skillproof.evidence.github import API_ERROR_RISK, clean_username
from skillproof.matching.semantic import resolve_matches
from skillproof.models.evidence import EvidenceProfile, LinkValidation, ProfileLinks
from skillproof.models.extraction import ExtractionResult, JobCategory
from skillproof.models.results import CandidateAnalysis
from skillproof.models.skills import ResolvedMatches
from skillproof.processors.documents import (
    extract_candidate_name,
    extract_email,
    extract_profile_links,
)
from skillproof.processors.gaps import analyze_gaps
from skillproof.rate_limiter import RateLimiter
from skillproof.scoring.ats import ATSScorer
from skillproof.scoring.fit import FitScorer, hiring_recommendation
from skillproof.scoring.proof import verify_skills

logger = logging.getLogger(__name__)

# Technical roles get half the link quality as a bonus
TECHNICAL_LINK_FACTOR = 0.5


class Extractor(Protocol):
    def extract(self, resume_text: str, jd_text: str) -> ExtractionResult: ...


class EvidenceCollector(Protocol):
    def analyze(self, username: str | None) -> EvidenceProfile: ...


class LinkChecker(Protocol):
    def validate(self, url: str) -> LinkValidation: ...


class CandidateAnalyzer:
    """Run the full analysis of one resume against one job description."""

    def __init__(
        self,
        extractor: Extractor,
        evidence_collector: EvidenceCollector,
        link_validator: LinkChecker,
        caches: CacheRegistry,
        ats_scorer: ATSScorer | None = None,
        fit_scorer: FitScorer | None = None,
    ):
        self.extractor = extractor
        self.evidence_collector = evidence_collector
        self.link_validator = link_validator
        self.caches = caches
        self.ats_scorer = ats_scorer or ATSScorer()
        self.fit_scorer = fit_scorer or FitScorer()

    def link_score(self, links: ProfileLinks, job_category: JobCategory) -> float:
        """Quality of the link that matters for this kind of role (0 if none)."""
        if job_category is JobCategory.CREATIVE:
            url, factor = links.portfolio, 1.0
        elif job_category is JobCategory.GENERAL:
            url, factor = links.linkedin, 1.0
        else:
            url, factor = links.portfolio or links.linkedin, TECHNICAL_LINK_FACTOR

        if not url:
            return 0.0
        validation = self.link_validator.validate(url)
        if not validation.is_valid:
            logger.info(f"Link not verified: {url} ({validation.error})")
            return 0.0
        return validation.quality_score * factor

    def evidence(self, github: str | None) -> EvidenceProfile:
        """Evidence profile for a GitHub link, served from cache when possible."""
        username = clean_username(github) if github else ""
        if not username:
            return self.evidence_collector.analyze(None)

        cached = self.caches.evidence_profiles.get(username)
        if cached is not None:
            logger.info(f"Evidence cache hit for {username}")
            return cached

        profile = self.evidence_collector.analyze(username)
        # API failures are not cached so the next request retries them
        if API_ERROR_RISK not in profile.risks:
            self.caches.evidence_profiles.set(username, profile)
        return profile

    def resolve(self, extraction: ExtractionResult, cache_key: str | None) -> ResolvedMatches:
        """Authoritative match set, served from the semantic cache when possible."""
        if cache_key is not None:
            cached = self.caches.semantic_matches.get(cache_key)
            if cached is not None and cached.resolved_from(extraction.jd, extraction.resume):
                return cached
            if cached is not None:
                logger.info(f"Extracted skills changed for {cache_key}, re-resolving matches")

        resolved = resolve_matches(extraction.jd, extraction.resume, extraction.matches)
        if cache_key is not None:
            self.caches.semantic_matches.set(cache_key, resolved)
        return resolved

    def analyze(
        self,
        resume_text: str,
        jd_text: str,
        limiter: RateLimiter | None = None,
        candidate_id: str | None = None,
        jd_hash: str | None = None,
    ) -> CandidateAnalysis:
        """Analyze one candidate.

        Args:
            resume_text: Plain resume text.
            jd_text: Plain job description text.
            limiter: Rate limiter guarding the extraction call.
            candidate_id: Content hash of the resume, enables the semantic cache.
            jd_hash: Hash of the job description, enables the semantic cache.

        Returns:
            CandidateAnalysis: Full scoring payload.

        Raises:
            ValidationError: Empty resume or job description.
            QuotaError, TransientError: Propagated from the extractor.
        """
        if not resume_text.strip():
            raise ValidationError("Resume text is empty")
        if not jd_text.strip():
            raise ValidationError("Job description is empty")

        if limiter is not None:
            limiter.wait_if_needed()
        extraction = self.extractor.extract(resume_text, jd_text)
        resume, jd = extraction.resume, extraction.jd
        logger.info(f"Job category: {extraction.job_category.value}")

        links = extract_profile_links(resume_text)
        link_score = self.link_score(links, extraction.job_category)
        evidence = self.evidence(links.github)

        cache_key = (
            analysis_cache_key(candidate_id, jd_hash) if candidate_id and jd_hash else None
        )
        resolved = self.resolve(extraction, cache_key)
        match_set = resolved.match_set

        ats = self.ats_scorer.compute(match_set, resume.experience_years, jd.required_experience)
        proof = verify_skills(resume.claimed_hard_skills(), evidence)
        fit = self.fit_scorer.compute(
            ats=ats.raw_score,
            evidence=evidence.score,
            proof=proof.raw_score,
            quality=extraction.quality.score,
            experience_years=resume.experience_years,
            required_experience=jd.required_experience,
            job_category=extraction.job_category,
            link_score=link_score,
        )
        gaps = analyze_gaps(match_set)

        return CandidateAnalysis(
            final_score=fit.score,
            recommendation=hiring_recommendation(fit.score),
            job_category=extraction.job_category,
            match_source=resolved.source,
            match_set=match_set,
            ats=ats,
            evidence=evidence,
            proof=proof,
            fit=fit,
            gaps=gaps,
            quality=extraction.quality,
            cluster=extraction.cluster,
            resume_skills=resume,
            jd_skills=jd,
            links=links,
            link_score=link_score,
            explanation=extraction.explanation,
            candidate_name=extract_candidate_name(resume_text),
            candidate_email=extract_email(resume_text),
        )
