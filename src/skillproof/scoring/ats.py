"""ATS scoring for resume-to-job-description alignment.

Computes deterministic sub-scores from the canonical MatchSet. No API calls,
no rounding until the final score.
"""

from __future__ import annotations

import logging
import math

from skillproof.models.skills import MatchSet, MatchStatus, SkillCategory, SkillMatch, SkillPriority
from skillproof.scoring.models import ATSResult, ScoreBreakdown

logger = logging.getLogger(__name__)

# Credit given to each match status in weighted percentages
STATUS_CREDIT: dict[MatchStatus, float] = {
    MatchStatus.MATCHED: 1.0,
    MatchStatus.PARTIAL: 0.5,
    MatchStatus.MISSING: 0.0,
}

# (minimum candidate/required ratio, score), checked in order
EXPERIENCE_STEPS: tuple[tuple[float, float], ...] = (
    (1.0, 100.0),
    (0.8, 70.0),
    (0.6, 50.0),
    (0.4, 30.0),
)

# Keyword density when the job description lists no skills at all
NEUTRAL_KEYWORD_DENSITY = 50.0


def clamp_score(value: float) -> int:
    """Round half up and clamp to [0, 100]."""
    return int(min(100, max(0, math.floor(value + 0.5))))


def weighted_match_percent(matches: list[SkillMatch]) -> float:
    """Priority-weighted match percentage with half credit for partial matches.

    An empty list scores 100: nothing was required, so nothing is missing.
    """
    if not matches:
        return 100.0
    total_weight = sum(m.weight for m in matches)
    if total_weight <= 0:
        return 100.0
    earned = sum(m.weight * STATUS_CREDIT[m.status] for m in matches)
    return earned / total_weight * 100


def experience_match_score(candidate_years: float, required_years: float) -> float:
    """Step score of candidate years against the requirement."""
    if required_years <= 0:
        return 100.0
    ratio = candidate_years / required_years
    for threshold, score in EXPERIENCE_STEPS:
        if ratio >= threshold:
            return score
    return 0.0


def keyword_density(match_set: MatchSet) -> float:
    """Priority-weighted share of fully matched skills."""
    if not match_set.matches:
        return NEUTRAL_KEYWORD_DENSITY
    total_weight = sum(m.weight for m in match_set.matches)
    matched_weight = sum(m.weight for m in match_set.with_status(MatchStatus.MATCHED))
    return matched_weight / total_weight * 100


class ATSScorer:
    """Compute the ATS alignment score from a MatchSet.

    The match set is consumed as-is, so the missing-skill list reported here is
    always the one the gap analyzer sees.
    """

    WEIGHTS = {
        "skill_match": 0.35,
        "tool_match": 0.25,
        "soft_match": 0.10,
        "experience_match": 0.15,
        "keyword_density": 0.15,
    }

    def compute(
        self,
        match_set: MatchSet,
        experience_years: float,
        required_experience: float,
    ) -> ATSResult:
        """Compute the ATS score.

        Args:
            match_set: Canonical match set for this request.
            experience_years: Candidate's years of experience.
            required_experience: Years required by the job (0 for none).

        Returns:
            ATSResult with unrounded breakdown and the rounded final score.
        """
        breakdown = ScoreBreakdown(
            skill_match=weighted_match_percent(match_set.by_category(SkillCategory.TECHNICAL)),
            tool_match=weighted_match_percent(match_set.by_category(SkillCategory.TOOLS)),
            soft_match=weighted_match_percent(match_set.by_category(SkillCategory.SOFT)),
            experience_match=experience_match_score(experience_years, required_experience),
            keyword_density=keyword_density(match_set),
        )

        raw_score = sum(
            weight * getattr(breakdown, name) for name, weight in self.WEIGHTS.items()
        )

        critical_misses = [
            m.jd_skill
            for m in match_set.with_status(MatchStatus.MISSING)
            if m.priority is SkillPriority.CRITICAL
        ]

        score = clamp_score(raw_score)
        logger.debug(f"ATS score {score} ({match_set.matched}/{match_set.total} matched)")

        return ATSResult(
            score=score,
            raw_score=raw_score,
            breakdown=breakdown,
            matched_skills=match_set.matched_skills(),
            missing_skills=match_set.missing_skills(),
            critical_misses=critical_misses,
        )
