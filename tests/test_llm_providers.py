"""Tests for LLM provider abstraction."""

from unittest.mock import MagicMock, patch

import pytest

from skillproof.llm.base import DEFAULT_MODELS, LLMProvider, get_llm_provider


class TestGetLLMProvider:
    """Tests for the get_llm_provider factory function."""

    @patch("skillproof.llm.openai.OpenAIProvider")
    def test_openai_provider(self, mock_provider: MagicMock) -> None:
        """Test that openai provider is correctly instantiated."""
        mock_instance = MagicMock()
        mock_provider.return_value = mock_instance

        result = get_llm_provider("openai", model="gpt-4o", api_key="test-key", timeout=30)

        mock_provider.assert_called_once_with(model="gpt-4o", api_key="test-key", timeout=30)
        assert result is mock_instance

    @patch("skillproof.llm.anthropic.AnthropicProvider")
    def test_anthropic_default_model(self, mock_provider: MagicMock) -> None:
        """Test that anthropic uses default model when not specified."""
        get_llm_provider("anthropic")
        mock_provider.assert_called_once_with(
            model=DEFAULT_MODELS["anthropic"], api_key=None, timeout=60.0
        )

    @patch("skillproof.llm.google.GoogleProvider")
    def test_google_default_model(self, mock_provider: MagicMock) -> None:
        """Test that google uses default model when not specified."""
        get_llm_provider("google", api_key="test-key")
        mock_provider.assert_called_once_with(
            model="gemini-2.5-flash", api_key="test-key", timeout=60.0
        )

    def test_unknown_provider_raises(self) -> None:
        """Test that unknown provider raises ValueError."""
        with pytest.raises(ValueError, match="Unknown provider: invalid"):
            get_llm_provider("invalid")  # type: ignore[arg-type]


class TestLLMProviderInterface:
    """Tests for the LLMProvider abstract base class."""

    def test_is_abstract(self) -> None:
        """Test that LLMProvider cannot be instantiated directly."""
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore[abstract]

    def test_extraction_model_is_cached(self) -> None:
        """Test that the extraction model is created once and reused."""

        class CountingProvider(LLMProvider):
            def __init__(self) -> None:
                self.created = 0
                self._extraction_model = None

            def _create_extraction_model(self):
                self.created += 1
                return MagicMock()

        provider = CountingProvider()
        first = provider.get_extraction_model()
        second = provider.get_extraction_model()

        assert first is second
        assert provider.created == 1


class TestProviderModels:
    """Tests for the concrete providers' model construction."""

    @patch("skillproof.llm.google.ChatGoogleGenerativeAI")
    def test_google_model(self, mock_chat: MagicMock) -> None:
        """Test Google model settings, with the key taken from the environment."""
        from skillproof.llm.google import GoogleProvider

        with patch.dict("os.environ", {"GOOGLE_API_KEY": "env-key"}, clear=True):
            provider = GoogleProvider()
        provider.get_extraction_model()

        mock_chat.assert_called_once_with(
            model="gemini-2.5-flash",
            temperature=0,
            google_api_key="env-key",
            timeout=60.0,
            max_retries=0,
        )

    @patch("skillproof.llm.openai.ChatOpenAI")
    def test_openai_model(self, mock_chat: MagicMock) -> None:
        """Test OpenAI model settings."""
        from skillproof.llm.openai import OpenAIProvider

        OpenAIProvider(api_key="sk-test", timeout=10).get_extraction_model()

        mock_chat.assert_called_once_with(
            model="gpt-4o-mini", temperature=0, api_key="sk-test", timeout=10, max_retries=0
        )

    @patch("skillproof.llm.anthropic.ChatAnthropic")
    def test_anthropic_model(self, mock_chat: MagicMock) -> None:
        """Test Anthropic model settings."""
        from skillproof.llm.anthropic import AnthropicProvider

        AnthropicProvider(api_key="sk-ant-test").get_extraction_model()

        mock_chat.assert_called_once_with(
            model=DEFAULT_MODELS["anthropic"],
            temperature=0,
            api_key="sk-ant-test",
            timeout=60.0,
            max_retries=0,
        )
