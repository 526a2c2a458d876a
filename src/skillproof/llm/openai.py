"""OpenAI LLM provider."""

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from skillproof.llm.base import DEFAULT_MAX_RETRIES, DEFAULT_MODELS, LLMProvider


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["openai"],
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
        """Create model for structured extraction with temperature=0."""
        return ChatOpenAI(
            model=self.model,
            temperature=0,
            api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
