"""Skill set and skill match data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

# Confidence thresholds shared by every matching path (local and external)
MATCHED_THRESHOLD = 0.8
PARTIAL_THRESHOLD = 0.5


class MatchStatus(str, Enum):
    """Outcome of matching one job-description skill."""

    MATCHED = "matched"
    PARTIAL = "partial"
    MISSING = "missing"


class SkillCategory(str, Enum):
    """Skill bucket a job-description skill belongs to."""

    TECHNICAL = "technical"
    TOOLS = "tools"
    SOFT = "soft"


class SkillPriority(str, Enum):
    """Relative importance of a required skill."""

    CRITICAL = "critical"
    PREFERRED = "preferred"
    BONUS = "bonus"


PRIORITY_WEIGHTS: dict[SkillPriority, float] = {
    SkillPriority.CRITICAL: 2.0,
    SkillPriority.PREFERRED: 1.0,
    SkillPriority.BONUS: 0.5,
}


def classify_confidence(confidence: float) -> MatchStatus:
    """Map a match confidence onto a status using the shared thresholds."""
    if confidence >= MATCHED_THRESHOLD:
        return MatchStatus.MATCHED
    if confidence >= PARTIAL_THRESHOLD:
        return MatchStatus.PARTIAL
    return MatchStatus.MISSING


def enum_text(v: Any) -> str:
    """Lower-cased text of a raw value or enum member."""
    if isinstance(v, Enum):
        return str(v.value)
    return str(v).strip().lower()


def _clean_skill_list(v: Any) -> list[str]:
    if v is None or isinstance(v, str):
        return []
    if isinstance(v, list):
        return [str(item).strip() for item in v if item is not None and str(item).strip()]
    return []


class SkillSet(BaseModel):
    """Technical, tool and soft skills extracted from a document."""

    model_config = ConfigDict(frozen=True)

    technical: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)

    @field_validator("technical", "tools", "soft", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Convert non-list values (like 'Not specified') to an empty list."""
        return _clean_skill_list(v)

    def by_category(self) -> list[tuple[SkillCategory, list[str]]]:
        """Skills grouped by category, in matching order."""
        return [
            (SkillCategory.TECHNICAL, self.technical),
            (SkillCategory.TOOLS, self.tools),
            (SkillCategory.SOFT, self.soft),
        ]

    def all_skills(self) -> list[str]:
        """All skills pooled across categories."""
        return [*self.technical, *self.tools, *self.soft]

    def claimed_hard_skills(self) -> list[str]:
        """Technical skills and tools, the skills that code evidence can back."""
        return [*self.technical, *self.tools]


class CandidateSkills(SkillSet):
    """Skills and background extracted from a resume."""

    experience_years: float = Field(default=0.0, ge=0)
    education_level: str = ""

    @field_validator("experience_years", mode="before")
    @classmethod
    def coerce_years(cls, v: Any) -> float:
        """Convert unparseable values (like '<UNKNOWN>') to 0."""
        try:
            return max(0.0, float(v))
        except (TypeError, ValueError):
            return 0.0


class JobSkills(SkillSet):
    """Skills and requirements extracted from a job description."""

    required_experience: float = Field(default=0.0, ge=0)
    priorities: dict[str, SkillPriority] = Field(default_factory=dict)

    @field_validator("required_experience", mode="before")
    @classmethod
    def coerce_years(cls, v: Any) -> float:
        """Convert unparseable values to 0 (no requirement)."""
        try:
            return max(0.0, float(v))
        except (TypeError, ValueError):
            return 0.0

    @field_validator("priorities", mode="before")
    @classmethod
    def ensure_priorities(cls, v: Any) -> dict[str, SkillPriority]:
        """Drop priority entries the model cannot interpret."""
        if not isinstance(v, dict):
            return {}
        valid = {p.value for p in SkillPriority}
        return {
            str(skill): SkillPriority(enum_text(level))
            for skill, level in v.items()
            if enum_text(level) in valid
        }


class SkillMatch(BaseModel):
    """Match outcome for one job-description skill."""

    model_config = ConfigDict(frozen=True)

    jd_skill: str
    resume_skill: str | None = None
    confidence: float = Field(ge=0, le=1)
    status: MatchStatus
    category: SkillCategory
    priority: SkillPriority | None = None  # None when no explicit priority was given

    @model_validator(mode="after")
    def check_status(self) -> "SkillMatch":
        """Keep status, confidence and resume skill consistent."""
        if self.resume_skill is None:
            if self.status is not MatchStatus.MISSING:
                raise ValueError("A match without a resume skill must be missing")
        elif self.status is not classify_confidence(self.confidence):
            raise ValueError(
                f"Status {self.status.value} does not follow from confidence {self.confidence}"
            )
        elif self.status is MatchStatus.MISSING:
            raise ValueError("A missing match cannot carry a resume skill")
        return self

    @classmethod
    def from_confidence(
        cls,
        jd_skill: str,
        resume_skill: str | None,
        confidence: float,
        category: SkillCategory,
        priority: SkillPriority | None = None,
    ) -> "SkillMatch":
        """Build a match, deriving status from confidence."""
        confidence = min(1.0, max(0.0, float(confidence)))
        status = classify_confidence(confidence) if resume_skill else MatchStatus.MISSING
        return cls(
            jd_skill=jd_skill,
            resume_skill=resume_skill if status is not MatchStatus.MISSING else None,
            confidence=confidence,
            status=status,
            category=category,
            priority=priority,
        )

    @property
    def effective_priority(self) -> SkillPriority:
        """Priority used for weighting (preferred when not given)."""
        return self.priority or SkillPriority.PREFERRED

    @property
    def weight(self) -> float:
        """Priority weight of this skill."""
        return PRIORITY_WEIGHTS[self.effective_priority]


class MatchSet(BaseModel):
    """Canonical per-skill match outcomes shared by scoring and gap analysis."""

    model_config = ConfigDict(frozen=True)

    matches: list[SkillMatch] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.matches)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matched(self) -> int:
        return len(self.with_status(MatchStatus.MATCHED))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def partial(self) -> int:
        return len(self.with_status(MatchStatus.PARTIAL))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def missing(self) -> int:
        return len(self.with_status(MatchStatus.MISSING))

    @property
    def match_ratio(self) -> float:
        """Share of fully matched skills (1.0 when there is nothing to match)."""
        if not self.matches:
            return 1.0
        return self.matched / self.total

    def with_status(self, status: MatchStatus) -> list[SkillMatch]:
        """Matches with the given status, in order."""
        return [m for m in self.matches if m.status is status]

    def by_category(self, category: SkillCategory) -> list[SkillMatch]:
        """Matches in the given category, in order."""
        return [m for m in self.matches if m.category is category]

    def matched_skills(self) -> list[str]:
        """Human-readable pairs for matched skills."""
        return [
            f"{m.jd_skill} ≈ {m.resume_skill}" for m in self.with_status(MatchStatus.MATCHED)
        ]

    def partial_skills(self) -> list[str]:
        """Human-readable pairs for partially matched skills."""
        return [
            f"{m.jd_skill} ~ {m.resume_skill}" for m in self.with_status(MatchStatus.PARTIAL)
        ]

    def missing_skills(self) -> list[str]:
        """Job-description skills with no match."""
        return [m.jd_skill for m in self.with_status(MatchStatus.MISSING)]


class MatchSource(str, Enum):
    """Which matching path produced the authoritative match set."""

    LOCAL = "local"
    EXTERNAL = "external"


class ResolvedMatches(BaseModel):
    """Match set tagged with the single source it came from."""

    model_config = ConfigDict(frozen=True)

    source: MatchSource
    match_set: MatchSet
    jd_skills: SkillSet | None = Field(
        default=None, description="Job skills the match set was resolved from"
    )
    candidate_skills: SkillSet | None = Field(
        default=None, description="Candidate skills the match set was resolved from"
    )

    def resolved_from(self, jd_skills: SkillSet, candidate_skills: SkillSet) -> bool:
        """Whether this match set was built from exactly these skill sets."""
        return self.jd_skills == jd_skills and self.candidate_skills == candidate_skills
