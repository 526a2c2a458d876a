"""LLM provider abstraction."""

from skillproof.llm.base import LLMProvider, get_llm_provider

__all__ = ["LLMProvider", "get_llm_provider"]
