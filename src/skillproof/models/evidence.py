"""Code-hosting evidence and link validation models."""

from pydantic import BaseModel, ConfigDict, Field


class EvidenceProfile(BaseModel):
    """Summary of a candidate's public code-hosting activity."""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    score: int = Field(default=0, ge=0, le=100)

    # Languages ordered by number of repositories using them
    languages: list[str] = Field(default_factory=list)
    top_language: str | None = None

    original_repos: int = Field(default=0, ge=0)
    forks: int = Field(default=0, ge=0)
    total_stars: int = Field(default=0, ge=0)
    total_size_kb: int = Field(default=0, ge=0)
    active_repos: int = Field(default=0, ge=0)
    total_commits: int = Field(default=0, ge=0)
    recent_commits: int = Field(default=0, ge=0)
    account_age_months: int = Field(default=0, ge=0)
    velocity_score: int = Field(default=0, ge=0, le=100)
    new_languages_last_year: list[str] = Field(default_factory=list)

    proof: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)

    @property
    def detected_languages(self) -> set[str]:
        """Lower-cased set of detected languages."""
        return {lang.lower() for lang in self.languages}

    @property
    def verified(self) -> bool:
        """Whether the profile carries any evidence at all."""
        return bool(self.username) and self.score > 0

    @classmethod
    def empty(cls, reason: str, username: str | None = None) -> "EvidenceProfile":
        """Zero-valued profile used when no evidence is available."""
        return cls(username=username, risks=[reason])


class LinkValidation(BaseModel):
    """Result of checking that a profile or portfolio link is reachable."""

    model_config = ConfigDict(frozen=True)

    url: str
    is_valid: bool
    is_portfolio: bool = False
    status: int = 0
    title: str | None = None
    description: str | None = None
    error: str | None = None
    quality_score: int = Field(default=0, ge=0, le=100)


class ProfileLinks(BaseModel):
    """Profile links found in a resume."""

    model_config = ConfigDict(frozen=True)

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
