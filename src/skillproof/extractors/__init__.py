"""LLM-backed extractors."""

from skillproof.extractors.combined import CombinedExtractor, to_extraction_result

__all__ = ["CombinedExtractor", "to_extraction_result"]
