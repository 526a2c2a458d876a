"""Data models for SkillProof."""

from skillproof.models.evidence import EvidenceProfile, LinkValidation, ProfileLinks
from skillproof.models.extraction import (
    CandidateCluster,
    ExternalMatch,
    ExtractionResult,
    JobCategory,
    QualityAssessment,
)
from skillproof.models.results import (
    BatchJob,
    CandidateAnalysis,
    CandidateResult,
    CandidateStatus,
    GapAnalysis,
)
from skillproof.models.skills import (
    CandidateSkills,
    JobSkills,
    MatchSet,
    MatchSource,
    MatchStatus,
    ResolvedMatches,
    SkillCategory,
    SkillMatch,
    SkillPriority,
    SkillSet,
)

__all__ = [
    "BatchJob",
    "CandidateAnalysis",
    "CandidateCluster",
    "CandidateResult",
    "CandidateSkills",
    "CandidateStatus",
    "EvidenceProfile",
    "ExternalMatch",
    "ExtractionResult",
    "GapAnalysis",
    "JobCategory",
    "JobSkills",
    "LinkValidation",
    "MatchSet",
    "MatchSource",
    "MatchStatus",
    "ProfileLinks",
    "QualityAssessment",
    "ResolvedMatches",
    "SkillCategory",
    "SkillMatch",
    "SkillPriority",
    "SkillSet",
]
