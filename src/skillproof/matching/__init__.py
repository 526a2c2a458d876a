"""Skill matching: synonym normalization, local matching and source selection."""

from skillproof.matching.local import find_local_match, match_skills_locally
from skillproof.matching.normalizer import SKILL_SYNONYMS, are_skills_equivalent, normalize_skill
from skillproof.matching.semantic import build_external_match_set, resolve_matches

__all__ = [
    "SKILL_SYNONYMS",
    "are_skills_equivalent",
    "build_external_match_set",
    "find_local_match",
    "match_skills_locally",
    "normalize_skill",
    "resolve_matches",
]
