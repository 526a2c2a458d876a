"""Tests for the ATS scorer."""

import pytest

from skillproof.models.skills import MatchSet, SkillCategory, SkillMatch, SkillPriority
from skillproof.scoring.ats import (
    ATSScorer,
    clamp_score,
    experience_match_score,
    keyword_density,
    weighted_match_percent,
)


def make_match(
    jd_skill: str,
    confidence: float,
    category: SkillCategory = SkillCategory.TECHNICAL,
    priority: SkillPriority | None = None,
) -> SkillMatch:
    """Build a match, with a resume skill only when the confidence is non-zero."""
    return SkillMatch.from_confidence(
        jd_skill, jd_skill.lower() if confidence else None, confidence, category, priority
    )


class TestClampScore:
    """Tests for clamp_score."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(92.5, 93), (92.49, 92), (-5.0, 0), (104.2, 100), (0.0, 0)],
    )
    def test_rounds_half_up_and_clamps(self, value: float, expected: int) -> None:
        """Test half-up rounding and clamping."""
        assert clamp_score(value) == expected


class TestWeightedMatchPercent:
    """Tests for weighted_match_percent."""

    def test_empty_category_is_vacuous_full_score(self) -> None:
        """Test that a category with no required skills scores 100."""
        assert weighted_match_percent([]) == 100.0

    def test_priority_weighting(self) -> None:
        """Test that a critical match counts twice as much as a preferred miss."""
        matches = [
            make_match("Python", 0.95, priority=SkillPriority.CRITICAL),
            make_match("Go", 0.0, priority=SkillPriority.PREFERRED),
        ]
        assert weighted_match_percent(matches) == pytest.approx(200 / 3)

    def test_partial_gets_half_credit(self) -> None:
        """Test that a partial match earns half of its weight."""
        assert weighted_match_percent([make_match("Rust", 0.6)]) == pytest.approx(50.0)


class TestExperienceMatch:
    """Tests for the experience step function."""

    @pytest.mark.parametrize(
        ("years", "expected"),
        [
            (12, 100.0),
            (10, 100.0),
            (8, 70.0),
            (7.99, 50.0),
            (6, 50.0),
            (4, 30.0),
            (3.99, 0.0),
            (0, 0.0),
        ],
    )
    def test_steps(self, years: float, expected: float) -> None:
        """Test each step against a 10 year requirement."""
        assert experience_match_score(years, 10) == expected

    def test_no_requirement(self) -> None:
        """Test that a job without an experience requirement scores 100."""
        assert experience_match_score(0, 0) == 100.0


class TestKeywordDensity:
    """Tests for keyword_density."""

    def test_neutral_when_no_skills(self) -> None:
        """Test the neutral density for an empty match set."""
        assert keyword_density(MatchSet()) == 50.0

    def test_only_full_matches_count(self) -> None:
        """Test that partial matches earn no keyword density."""
        match_set = MatchSet(matches=[make_match("Python", 0.95), make_match("Rust", 0.6)])
        assert keyword_density(match_set) == pytest.approx(50.0)


class TestATSScorer:
    """Tests for ATSScorer.compute."""

    def test_python_docker_example(self) -> None:
        """Test the breakdown for a critical match and a preferred tool miss."""
        match_set = MatchSet(
            matches=[
                make_match("Python", 0.95, priority=SkillPriority.CRITICAL),
                make_match("Docker", 0.0, SkillCategory.TOOLS, SkillPriority.PREFERRED),
            ]
        )

        result = ATSScorer().compute(match_set, experience_years=4, required_experience=3)

        assert result.breakdown.skill_match == 100.0
        assert result.breakdown.tool_match == 0.0
        assert result.breakdown.soft_match == 100.0
        assert result.breakdown.experience_match == 100.0
        assert result.breakdown.keyword_density == pytest.approx(200 / 3)
        assert result.raw_score == pytest.approx(70.0)
        assert result.score == 70
        assert result.missing_skills == ["Docker"]
        assert result.critical_misses == []

    def test_empty_match_set(self) -> None:
        """Test the score when the job description lists no skills."""
        result = ATSScorer().compute(MatchSet(), experience_years=5, required_experience=0)
        assert result.raw_score == pytest.approx(92.5)
        assert result.score == 93

    def test_critical_misses(self) -> None:
        """Test that only missing critical skills are reported as critical misses."""
        match_set = MatchSet(
            matches=[
                make_match("Kubernetes", 0.0, SkillCategory.TOOLS, SkillPriority.CRITICAL),
                make_match("Terraform", 0.0, SkillCategory.TOOLS),
                make_match("Go", 0.6, priority=SkillPriority.CRITICAL),
            ]
        )

        result = ATSScorer().compute(match_set, experience_years=2, required_experience=2)

        assert result.critical_misses == ["Kubernetes"]
        assert result.missing_skills == ["Kubernetes", "Terraform"]

    def test_matched_skills_are_readable_pairs(self) -> None:
        """Test the matched skill display format."""
        match_set = MatchSet(matches=[make_match("Python", 0.95)])
        result = ATSScorer().compute(match_set, 1, 1)
        assert result.matched_skills == ["Python ≈ python"]

    def test_score_stays_in_range(self) -> None:
        """Test that a perfect candidate does not exceed 100."""
        match_set = MatchSet(matches=[make_match("Python", 1.0)])
        result = ATSScorer().compute(match_set, experience_years=30, required_experience=1)
        assert result.score == 100
