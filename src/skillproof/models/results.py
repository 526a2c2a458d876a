"""Per-candidate and batch result models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from skillproof.models.evidence import EvidenceProfile, ProfileLinks
from skillproof.models.extraction import CandidateCluster, JobCategory, QualityAssessment
from skillproof.models.skills import CandidateSkills, JobSkills, MatchSet, MatchSource
from skillproof.scoring.models import ATSResult, FitScore, ProofResult, Recommendation


class GapAnalysis(BaseModel):
    """Missing skills split by severity."""

    model_config = ConfigDict(frozen=True)

    match_percentage: int = Field(ge=0, le=100)
    missing: list[str] = Field(default_factory=list)
    critical_gaps: list[str] = Field(default_factory=list)
    nice_to_have_gaps: list[str] = Field(default_factory=list)


class CandidateAnalysis(BaseModel):
    """Full analysis payload for one candidate against one job description."""

    model_config = ConfigDict(frozen=True)

    final_score: int = Field(ge=0, le=100)
    recommendation: Recommendation
    job_category: JobCategory
    match_source: MatchSource
    match_set: MatchSet
    ats: ATSResult
    evidence: EvidenceProfile
    proof: ProofResult
    fit: FitScore
    gaps: GapAnalysis
    quality: QualityAssessment
    cluster: CandidateCluster
    resume_skills: CandidateSkills
    jd_skills: JobSkills
    links: ProfileLinks = Field(default_factory=ProfileLinks)
    link_score: float = Field(default=0.0, ge=0, le=100)
    explanation: str = ""
    candidate_name: str | None = None
    candidate_email: str | None = None


class CandidateStatus(str, Enum):
    """Terminal state of one candidate in a batch."""

    SUCCESS = "success"
    FAILED = "failed"
    CACHED = "cached"


class CandidateResult(BaseModel):
    """Final per-candidate record."""

    model_config = ConfigDict(frozen=True)

    candidate_id: str
    name: str | None = None
    rank: int = Field(default=0, ge=0)  # Assigned after the whole batch is scored
    score: int = Field(default=0, ge=0, le=100)
    status: CandidateStatus
    analysis: CandidateAnalysis | None = None
    error: str | None = None
    attempts: int = Field(default=0, ge=0)
    processing_time_ms: float = 0.0

    @model_validator(mode="after")
    def check_payload(self) -> "CandidateResult":
        """Failed results carry an error, the others carry an analysis."""
        if self.status is CandidateStatus.FAILED:
            if self.error is None or self.analysis is not None:
                raise ValueError("A failed result carries an error and no analysis")
        elif self.analysis is None:
            raise ValueError(f"A {self.status.value} result needs an analysis")
        return self


class BatchJob(BaseModel):
    """Ranked results for one batch run."""

    model_config = ConfigDict(frozen=True)

    batch_id: str
    jd_hash: str
    job_description: str  # Preview only
    total_candidates: int = Field(ge=0)
    processed: int = Field(ge=0)  # Freshly analyzed
    failed: int = Field(ge=0)
    cached: int = Field(ge=0)
    candidates: list[CandidateResult] = Field(default_factory=list)
    created_at: datetime
    duration_seconds: float = 0.0

    @model_validator(mode="after")
    def check_counters(self) -> "BatchJob":
        """Counters must account for every candidate exactly once."""
        if self.processed + self.failed + self.cached != self.total_candidates:
            raise ValueError("processed + failed + cached must equal total_candidates")
        if len(self.candidates) != self.total_candidates:
            raise ValueError("Every candidate needs a result")
        return self
