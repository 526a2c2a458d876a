"""Choose between local and externally-assisted skill matching.

Local matching always runs first. Matches suggested by the extraction model
are only taken when local matching resolves less than half of the skills,
and then they replace the local result wholesale. The two sources are never
spliced together, so every skill in a MatchSet has the same provenance.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from skillproof.matching.local import match_skills_locally
from skillproof.models.extraction import ExternalMatch
from skillproof.models.skills import MatchSet, MatchSource, ResolvedMatches, SkillMatch, SkillSet

logger = logging.getLogger(__name__)

# Below this local match ratio the external matches become authoritative
LOCAL_SUFFICIENT_RATIO = 0.5


def build_external_match_set(raw_matches: Sequence[ExternalMatch]) -> MatchSet:
    """Classify externally suggested matches with the shared thresholds."""
    matches = [
        SkillMatch.from_confidence(
            jd_skill=m.jd_skill,
            resume_skill=(m.resume_skill or "").strip() or None,
            confidence=m.confidence,
            category=m.category,
            priority=m.priority,
        )
        for m in raw_matches
    ]
    return MatchSet(matches=matches)


def resolve_matches(
    jd_skills: SkillSet,
    candidate_skills: SkillSet,
    external_matches: Sequence[ExternalMatch] | None = None,
) -> ResolvedMatches:
    """Produce the single authoritative MatchSet for one request.

    Args:
        jd_skills: Skills required by the job.
        candidate_skills: Skills claimed in the resume.
        external_matches: Semantic matches from the extraction call, if any.

    Returns:
        ResolvedMatches tagged LOCAL or EXTERNAL.
    """
    local = match_skills_locally(jd_skills, candidate_skills)
    source, match_set = MatchSource.LOCAL, local

    if external_matches and local.match_ratio < LOCAL_SUFFICIENT_RATIO:
        source, match_set = MatchSource.EXTERNAL, build_external_match_set(external_matches)
        logger.info(
            f"Local match low ({local.matched}/{local.total}), "
            f"using external matches ({match_set.matched}/{match_set.total})"
        )
    elif external_matches:
        logger.info(
            f"Using local matching ({local.matched}/{local.total}), external matches not needed"
        )

    return ResolvedMatches(
        source=source,
        match_set=match_set,
        jd_skills=jd_skills,
        candidate_skills=candidate_skills,
    )
