"""Base LLM provider abstraction."""

from abc import ABC, abstractmethod
from typing import Literal

from langchain_core.language_models import BaseChatModel

DEFAULT_MODELS = {
    "google": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-sonnet-4-5-20250929",
}

# Retries are owned by the batch orchestrator
DEFAULT_MAX_RETRIES = 0


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    The extraction model is created on first access and reused.
    """

    _extraction_model: BaseChatModel | None = None

    def get_extraction_model(self) -> BaseChatModel:
        """Get a cached model for structured extraction (temperature 0)."""
        if self._extraction_model is None:
            self._extraction_model = self._create_extraction_model()
        return self._extraction_model

    @abstractmethod
    def _create_extraction_model(self) -> BaseChatModel:
        """Create a new extraction model instance. Override in subclasses."""


def get_llm_provider(
    provider: Literal["google", "openai", "anthropic"],
    model: str | None = None,
    api_key: str | None = None,
    timeout: float = 60.0,
) -> LLMProvider:
    """Factory function to get an LLM provider instance."""
    model = model or DEFAULT_MODELS.get(provider)
    if provider == "google":
        from skillproof.llm.google import GoogleProvider

        return GoogleProvider(model=model, api_key=api_key, timeout=timeout)
    elif provider == "openai":
        from skillproof.llm.openai import OpenAIProvider

        return OpenAIProvider(model=model, api_key=api_key, timeout=timeout)
    elif provider == "anthropic":
        from skillproof.llm.anthropic import AnthropicProvider

        return AnthropicProvider(model=model, api_key=api_key, timeout=timeout)
    else:
        raise ValueError(f"Unknown provider: {provider}")
