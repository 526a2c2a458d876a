"""Configuration management for SkillProof."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HOUR_SECONDS = 60 * 60


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SKILLPROOF_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys (no prefix, standard env vars)
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN")

    # Extraction provider
    provider: Literal["google", "openai", "anthropic"] = "google"
    model: str | None = None
    request_timeout_seconds: float = Field(default=60.0, gt=0, le=600)
    max_resume_chars: int = Field(default=20_000, ge=1000)
    max_jd_chars: int = Field(default=10_000, ge=500)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Rate limiting (free tier allows 5 requests per minute)
    interactive_requests_per_minute: int = Field(
        default=5,
        ge=1,
        le=600,
        description="Request budget for single-candidate analysis",
    )
    batch_requests_per_minute: int = Field(
        default=3,
        ge=1,
        le=600,
        description="Request budget for batch ranking (shared quota across candidates)",
    )
    rate_limit_buffer_ms: int = Field(default=3000, ge=0, le=60_000)

    # Cache TTLs
    evidence_cache_ttl_seconds: int = Field(default=24 * HOUR_SECONDS, ge=0)
    analysis_cache_ttl_seconds: int = Field(default=24 * HOUR_SECONDS, ge=0)
    semantic_cache_ttl_seconds: int = Field(default=1 * HOUR_SECONDS, ge=0)

    # Batch retry policy
    max_attempts: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Attempts per candidate before it is reported as failed",
    )
    quota_cooldown_seconds: float = Field(default=30.0, ge=0, le=600)
    backoff_base_seconds: float = Field(default=3.0, ge=1, le=10)

    # Evidence collection
    github_api_url: str = "https://api.github.com"
    link_timeout_seconds: float = Field(default=8.0, gt=0, le=60)

    @property
    def extraction_api_key(self) -> str | None:
        """API key for the configured extraction provider."""
        return {
            "google": self.google_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
        }[self.provider]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
