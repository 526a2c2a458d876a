"""Pydantic models for candidate scoring."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ScoreBreakdown(BaseModel):
    """ATS category sub-scores (0-100, unrounded)."""

    model_config = ConfigDict(frozen=True)

    skill_match: float = Field(ge=0, le=100)  # Technical skills
    tool_match: float = Field(ge=0, le=100)  # Tools and platforms
    soft_match: float = Field(ge=0, le=100)  # Soft skills
    experience_match: float = Field(ge=0, le=100)  # Years vs requirement (step function)
    keyword_density: float = Field(ge=0, le=100)  # Weighted share of fully matched skills


class ATSResult(BaseModel):
    """Resume-to-job-description alignment score."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    raw_score: float
    breakdown: ScoreBreakdown
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    critical_misses: list[str] = Field(default_factory=list)


class ProofStatus(str, Enum):
    """How a claimed skill is backed by code evidence."""

    PROVEN = "proven"  # Skill is itself a detected language
    INFERRED = "inferred"  # Skill implies a detected language
    MISSING = "missing"  # No evidence


class SkillProof(BaseModel):
    """Evidence classification for one claimed skill."""

    model_config = ConfigDict(frozen=True)

    skill: str
    status: ProofStatus
    weight: float = Field(ge=0, le=100)
    evidence_language: str | None = None


class ProofResult(BaseModel):
    """Share of claimed skills corroborated by detected languages."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    raw_score: float
    skills: list[SkillProof] = Field(default_factory=list)

    def with_status(self, status: ProofStatus) -> list[str]:
        """Claimed skills with the given proof status."""
        return [s.skill for s in self.skills if s.status is status]

    @property
    def proven(self) -> list[str]:
        return self.with_status(ProofStatus.PROVEN)

    @property
    def inferred(self) -> list[str]:
        return self.with_status(ProofStatus.INFERRED)

    @property
    def missing(self) -> list[str]:
        return self.with_status(ProofStatus.MISSING)


class FitWeights(BaseModel):
    """Composite score weights for one job category."""

    model_config = ConfigDict(frozen=True)

    ats: float
    evidence: float
    proof: float
    quality: float
    experience_bonus: float
    link: float = 0.0  # Weighted share of the link score
    link_bonus: float = 0.0  # Additive link bonus, never a penalty


class FitScore(BaseModel):
    """Final composite fit score used for ranking."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    raw_score: float
    ats: float
    evidence: float
    proof: float
    quality: float
    experience_bonus: float
    link_score: float
    weights: FitWeights


class Recommendation(BaseModel):
    """Hiring recommendation derived from the final score."""

    model_config = ConfigDict(frozen=True)

    recommendation: str  # strong_yes, yes, maybe, no
    label: str
    color: str
