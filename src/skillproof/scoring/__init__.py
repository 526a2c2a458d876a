"""Deterministic candidate scoring.

- ATS score: skill, tool, soft, experience and keyword alignment
- Proof score: claimed skills corroborated by code evidence
- Fit score: category-weighted blend used for ranking
"""

from skillproof.scoring.ats import ATSScorer, clamp_score
from skillproof.scoring.fit import FitScorer, compare_candidates, hiring_recommendation
from skillproof.scoring.models import (
    ATSResult,
    FitScore,
    FitWeights,
    ProofResult,
    ProofStatus,
    Recommendation,
    ScoreBreakdown,
    SkillProof,
)
from skillproof.scoring.proof import verify_skills

__all__ = [
    "ATSResult",
    "ATSScorer",
    "FitScore",
    "FitScorer",
    "FitWeights",
    "ProofResult",
    "ProofStatus",
    "Recommendation",
    "ScoreBreakdown",
    "SkillProof",
    "clamp_score",
    "compare_candidates",
    "hiring_recommendation",
    "verify_skills",
]
