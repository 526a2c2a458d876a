"""Models for the combined resume/job-description extraction."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillproof.models.skills import (
    CandidateSkills,
    JobSkills,
    SkillCategory,
    SkillPriority,
    enum_text,
)


class JobCategory(str, Enum):
    """Kind of role, selects the composite score weights."""

    TECHNICAL = "technical"
    GENERAL = "general"
    CREATIVE = "creative"


class QualityAssessment(BaseModel):
    """Heuristic resume quality signals."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(default=0, ge=0, le=100)
    formatting: float = Field(default=0, ge=0, le=100)
    achievements: float = Field(default=0, ge=0, le=100)
    clarity: float = Field(default=0, ge=0, le=100)
    improvements: list[str] = Field(default_factory=list)


class CandidateCluster(BaseModel):
    """Career-profile cluster assigned to the candidate."""

    model_config = ConfigDict(frozen=True)

    type: str = "generalist"
    confidence: float = Field(default=0, ge=0, le=1)
    traits: list[str] = Field(default_factory=list)


class ExternalMatch(BaseModel):
    """One semantic match suggested by the extraction model."""

    model_config = ConfigDict(frozen=True)

    jd_skill: str
    resume_skill: str | None = None
    confidence: float = Field(default=0, ge=0, le=1)
    category: SkillCategory = SkillCategory.TECHNICAL
    priority: SkillPriority | None = None

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v: Any) -> float:
        """Clamp model-reported confidence into [0, 1]."""
        try:
            return min(1.0, max(0.0, float(v)))
        except (TypeError, ValueError):
            return 0.0

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> SkillCategory:
        """Unknown categories count as technical."""
        try:
            return SkillCategory(enum_text(v))
        except ValueError:
            return SkillCategory.TECHNICAL

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v: Any) -> SkillPriority | None:
        """Unknown priorities count as not given."""
        if v is None:
            return None
        try:
            return SkillPriority(enum_text(v))
        except ValueError:
            return None


class ExtractionResult(BaseModel):
    """Everything the extraction step returns for one resume/JD pair."""

    model_config = ConfigDict(frozen=True)

    resume: CandidateSkills = Field(default_factory=CandidateSkills)
    jd: JobSkills = Field(default_factory=JobSkills)
    quality: QualityAssessment = Field(default_factory=QualityAssessment)
    cluster: CandidateCluster = Field(default_factory=CandidateCluster)
    matches: list[ExternalMatch] | None = None
    job_category: JobCategory = JobCategory.GENERAL
    explanation: str = ""

    @field_validator("job_category", mode="before")
    @classmethod
    def default_job_category(cls, v: Any) -> JobCategory:
        """Unknown categories fall back to general."""
        try:
            return JobCategory(enum_text(v))
        except ValueError:
            return JobCategory.GENERAL
