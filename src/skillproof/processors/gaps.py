"""Gap analysis over the canonical MatchSet."""

import logging

from skillproof.models.results import GapAnalysis
from skillproof.models.skills import MatchSet, MatchStatus, SkillCategory, SkillMatch, SkillPriority
from skillproof.scoring.ats import STATUS_CREDIT, clamp_score

logger = logging.getLogger(__name__)


def is_critical_gap(match: SkillMatch) -> bool:
    """Critical when flagged critical, or unprioritized and technical."""
    if match.priority is not None:
        return match.priority is SkillPriority.CRITICAL
    return match.category is SkillCategory.TECHNICAL


def analyze_gaps(match_set: MatchSet) -> GapAnalysis:
    """Split missing skills by severity and compute the overall match percentage.

    Must be given the same MatchSet the ATS score was computed from, so that
    ``missing`` always equals ``ATSResult.missing_skills``.
    """
    missing = match_set.with_status(MatchStatus.MISSING)

    if match_set.matches:
        earned = sum(STATUS_CREDIT[m.status] for m in match_set.matches)
        percentage = clamp_score(earned / match_set.total * 100)
    else:
        percentage = 100

    gaps = GapAnalysis(
        match_percentage=percentage,
        missing=[m.jd_skill for m in missing],
        critical_gaps=[m.jd_skill for m in missing if is_critical_gap(m)],
        nice_to_have_gaps=[m.jd_skill for m in missing if not is_critical_gap(m)],
    )
    logger.debug(f"Gap analysis: {len(gaps.critical_gaps)} critical, {len(gaps.missing)} total")
    return gaps
