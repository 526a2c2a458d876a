"""Anthropic Claude LLM provider."""

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from skillproof.llm.base import DEFAULT_MAX_RETRIES, DEFAULT_MODELS, LLMProvider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["anthropic"],
        api_key: str | None = None,
        timeout: float = 60.0,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self._extraction_model = None

    def _create_extraction_model(self) -> BaseChatModel:
        return ChatAnthropic(
            model=self.model,
            temperature=0,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
