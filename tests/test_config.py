"""Tests for configuration and settings."""

import os
from unittest.mock import patch

import pytest

from skillproof.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_default_values(self) -> None:
        """Test that defaults are set correctly when no env vars are set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)  # Disable env file loading
            assert settings.provider == "google"
            assert settings.model is None
            assert settings.log_level == "INFO"
            assert settings.interactive_requests_per_minute == 5
            assert settings.batch_requests_per_minute == 3
            assert settings.rate_limit_buffer_ms == 3000
            assert settings.max_attempts == 2
            assert settings.quota_cooldown_seconds == 30.0
            assert settings.evidence_cache_ttl_seconds == 24 * 60 * 60
            assert settings.semantic_cache_ttl_seconds == 60 * 60
            assert settings.github_token is None

    def test_provider_from_env(self) -> None:
        """Test provider setting from environment variable."""
        with patch.dict(os.environ, {"SKILLPROOF_PROVIDER": "anthropic"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.provider == "anthropic"

    def test_invalid_provider(self) -> None:
        """Test that unknown providers are rejected."""
        with patch.dict(os.environ, {"SKILLPROOF_PROVIDER": "mistral"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

    def test_batch_rate_from_env(self) -> None:
        """Test the batch request budget from the environment."""
        with patch.dict(os.environ, {"SKILLPROOF_BATCH_REQUESTS_PER_MINUTE": "10"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.batch_requests_per_minute == 10

    def test_rate_minimum(self) -> None:
        """Test that a zero request budget is rejected."""
        with patch.dict(os.environ, {"SKILLPROOF_BATCH_REQUESTS_PER_MINUTE": "0"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

    def test_max_attempts_boundaries(self) -> None:
        """Test max_attempts at valid and invalid boundaries."""
        with patch.dict(os.environ, {"SKILLPROOF_MAX_ATTEMPTS": "1"}, clear=True):
            assert Settings(_env_file=None).max_attempts == 1

        with patch.dict(os.environ, {"SKILLPROOF_MAX_ATTEMPTS": "10"}, clear=True):
            assert Settings(_env_file=None).max_attempts == 10

        with patch.dict(os.environ, {"SKILLPROOF_MAX_ATTEMPTS": "0"}, clear=True):
            with pytest.raises(ValueError):
                Settings(_env_file=None)

    def test_api_keys_from_env(self) -> None:
        """Test API key loading from standard environment variables."""
        env = {
            "OPENAI_API_KEY": "sk-test-openai",
            "ANTHROPIC_API_KEY": "sk-ant-test",
            "GOOGLE_API_KEY": "test-google-key",
            "GITHUB_TOKEN": "ghp_test",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
            assert settings.openai_api_key == "sk-test-openai"
            assert settings.anthropic_api_key == "sk-ant-test"
            assert settings.google_api_key == "test-google-key"
            assert settings.github_token == "ghp_test"

    def test_extraction_api_key_follows_provider(self) -> None:
        """Test that the extraction key is the configured provider's key."""
        env = {
            "SKILLPROOF_PROVIDER": "openai",
            "OPENAI_API_KEY": "sk-test-openai",
            "GOOGLE_API_KEY": "test-google-key",
        }
        with patch.dict(os.environ, env, clear=True):
            assert Settings(_env_file=None).extraction_api_key == "sk-test-openai"

    def test_log_level_values(self) -> None:
        """Test valid log level values."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            with patch.dict(os.environ, {"SKILLPROOF_LOG_LEVEL": level}, clear=True):
                settings = Settings(_env_file=None)
                assert settings.log_level == level

    def test_extra_env_vars_ignored(self) -> None:
        """Test that unrelated prefixed variables do not fail validation."""
        with patch.dict(os.environ, {"SKILLPROOF_UNKNOWN": "1"}, clear=True):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_same_instance(self) -> None:
        """Test that get_settings is cached."""
        get_settings.cache_clear()
        try:
            with patch.dict(os.environ, {}, clear=True):
                assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
