"""Google Gemini LLM provider."""

import os

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from skillproof.llm.base import DEFAULT_MAX_RETRIES, DEFAULT_MODELS, LLMProvider


class GoogleProvider(LLMProvider):
    """Google Gemini provider using langchain-google-genai."""

    def __init__(
        self,
        model: str = DEFAULT_MODELS["google"],
        api_key: str | None = None,
        timeout: float = 60.0,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        """Initialize the Google provider.

        Args:
            model: Model name (default: gemini-2.5-flash).
            api_key: Google API key. If not provided, uses GOOGLE_API_KEY env var.
            timeout: Request timeout in seconds.
            max_retries: Client-side retries on failure.
        """
        self.model = model
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY")
        self.timeout = timeout
        self.max_retries = max_retries
        self._extraction_model = None

    def _create_extraction_model(self) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=self.model,
            temperature=0,
            google_api_key=self.api_key,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )
