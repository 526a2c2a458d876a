"""Composite fit score and hiring recommendation."""

from __future__ import annotations

import logging

from skillproof.models.extraction import JobCategory
from skillproof.scoring.ats import clamp_score
from skillproof.scoring.models import FitScore, FitWeights, Recommendation

logger = logging.getLogger(__name__)

# Share of required experience a candidate needs for the full experience bonus
EXPERIENCE_BONUS_RATIO = 0.7

CATEGORY_WEIGHTS: dict[JobCategory, FitWeights] = {
    JobCategory.TECHNICAL: FitWeights(
        ats=0.30,
        evidence=0.25,
        proof=0.20,
        quality=0.15,
        experience_bonus=0.10,
        link_bonus=0.05,
    ),
    JobCategory.GENERAL: FitWeights(
        ats=0.40,
        evidence=0.05,
        proof=0.05,
        quality=0.25,
        experience_bonus=0.15,
        link=0.10,
    ),
    JobCategory.CREATIVE: FitWeights(
        ats=0.30,
        evidence=0.05,
        proof=0.05,
        quality=0.25,
        experience_bonus=0.10,
        link=0.25,
    ),
}


def experience_bonus(experience_years: float, required_experience: float) -> float:
    """Binary gate: 100 when the candidate has 70% of the required years, else 50."""
    if required_experience <= 0:
        return 100.0
    if experience_years >= required_experience * EXPERIENCE_BONUS_RATIO:
        return 100.0
    return 50.0


class FitScorer:
    """Blend ATS, evidence, proof and quality scores into one fit score."""

    def __init__(self, weights: dict[JobCategory, FitWeights] | None = None) -> None:
        self.weights = weights or CATEGORY_WEIGHTS

    def compute(
        self,
        *,
        ats: float,
        evidence: float,
        proof: float,
        quality: float,
        experience_years: float,
        required_experience: float,
        job_category: JobCategory,
        link_score: float = 0.0,
    ) -> FitScore:
        """Compute the composite fit score.

        All inputs are unrounded 0-100 values; rounding and clamping happen
        once, on the final blend.
        """
        weights = self.weights[job_category]
        bonus = experience_bonus(experience_years, required_experience)

        raw_score = (
            weights.ats * ats
            + weights.evidence * evidence
            + weights.proof * proof
            + weights.quality * quality
            + weights.experience_bonus * bonus
            + weights.link * link_score
            + weights.link_bonus * link_score
        )

        score = clamp_score(raw_score)
        logger.debug(f"Fit score {score} ({job_category.value} weights)")

        return FitScore(
            score=score,
            raw_score=raw_score,
            ats=ats,
            evidence=evidence,
            proof=proof,
            quality=quality,
            experience_bonus=bonus,
            link_score=link_score,
            weights=weights,
        )


def hiring_recommendation(final_score: int) -> Recommendation:
    """Map a final score onto a hiring recommendation."""
    if final_score >= 80:
        return Recommendation(recommendation="strong_yes", label="Strong Candidate", color="emerald")
    if final_score >= 65:
        return Recommendation(recommendation="yes", label="Good Fit", color="green")
    if final_score >= 45:
        return Recommendation(recommendation="maybe", label="Consider", color="amber")
    return Recommendation(recommendation="no", label="Not Recommended", color="rose")


def compare_candidates(
    first: tuple[str, int, list[str]],
    second: tuple[str, int, list[str]],
) -> dict[str, object]:
    """Compare two candidates given as (name, score, skills).

    The first candidate wins ties.
    """
    name1, score1, skills1 = first
    name2, score2, skills2 = second
    lower1 = {s.lower() for s in skills1}
    lower2 = {s.lower() for s in skills2}

    return {
        "winner": name1 if score1 >= score2 else name2,
        "score_diff": abs(score1 - score2),
        "unique_skills_1": [s for s in skills1 if s.lower() not in lower2],
        "unique_skills_2": [s for s in skills2 if s.lower() not in lower1],
    }
