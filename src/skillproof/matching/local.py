"""Deterministic local skill matching.

Matches job-description skills against resume skills with the synonym table
and substring containment only. No API calls, so it is used for every request
and is the only matcher in batch mode unless the extraction step supplied
better semantic matches.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from skillproof.matching.normalizer import normalize_skill
from skillproof.models.skills import (
    JobSkills,
    MatchSet,
    SkillMatch,
    SkillPriority,
    SkillSet,
)

logger = logging.getLogger(__name__)

EXACT_CONFIDENCE = 0.95
CONTAINMENT_CONFIDENCE = 0.85


class LocalMatch(NamedTuple):
    """Best resume skill for one job-description skill."""

    match: str | None
    confidence: float


def find_local_match(jd_skill: str, candidate_skills: list[str]) -> LocalMatch:
    """Find the resume skill matching a job-description skill.

    First hit wins, in this order:
    1. Equivalent after normalization (confidence 0.95)
    2. One normalized form contains the other (confidence 0.85)
    3. No match (confidence 0.0)
    """
    normalized_jd = normalize_skill(jd_skill)
    if not normalized_jd:
        return LocalMatch(None, 0.0)

    normalized = [(skill, normalize_skill(skill)) for skill in candidate_skills]

    for skill, norm in normalized:
        if norm == normalized_jd:
            return LocalMatch(skill, EXACT_CONFIDENCE)

    for skill, norm in normalized:
        if norm and (normalized_jd in norm or norm in normalized_jd):
            return LocalMatch(skill, CONTAINMENT_CONFIDENCE)

    return LocalMatch(None, 0.0)


def _priority_lookup(jd_skills: SkillSet) -> dict[str, SkillPriority]:
    if not isinstance(jd_skills, JobSkills):
        return {}
    return {normalize_skill(skill): level for skill, level in jd_skills.priorities.items()}


def match_skills_locally(jd_skills: SkillSet, candidate_skills: SkillSet) -> MatchSet:
    """Match every job-description skill against the pooled resume skills.

    Args:
        jd_skills: Skills required by the job (JobSkills carries priorities).
        candidate_skills: Skills claimed in the resume.

    Returns:
        MatchSet with one SkillMatch per job-description skill, ordered
        technical, tools, soft.
    """
    pool = candidate_skills.all_skills()
    priorities = _priority_lookup(jd_skills)

    matches: list[SkillMatch] = []
    for category, skills in jd_skills.by_category():
        for jd_skill in skills:
            found = find_local_match(jd_skill, pool)
            matches.append(
                SkillMatch.from_confidence(
                    jd_skill=jd_skill,
                    resume_skill=found.match,
                    confidence=found.confidence,
                    category=category,
                    priority=priorities.get(normalize_skill(jd_skill)),
                )
            )

    match_set = MatchSet(matches=matches)
    logger.info(f"Local matching: {match_set.matched}/{match_set.total} matched (no API call)")
    return match_set
