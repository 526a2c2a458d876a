"""Tests for the Pydantic data models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from skillproof.models.evidence import EvidenceProfile
from skillproof.models.extraction import ExternalMatch, ExtractionResult, JobCategory
from skillproof.models.results import (
    BatchJob,
    CandidateAnalysis,
    CandidateResult,
    CandidateStatus,
)
from skillproof.models.skills import (
    CandidateSkills,
    JobSkills,
    MatchSet,
    MatchStatus,
    SkillCategory,
    SkillMatch,
    SkillPriority,
    SkillSet,
)


class TestSkillSet:
    """Tests for SkillSet coercion."""

    def test_non_list_becomes_empty(self) -> None:
        """Test that placeholder strings become empty lists."""
        skills = SkillSet(technical="Not specified", tools=None, soft=["  ", "Teamwork"])
        assert skills.technical == []
        assert skills.tools == []
        assert skills.soft == ["Teamwork"]

    def test_claimed_hard_skills(self) -> None:
        """Test that soft skills are not claimed hard skills."""
        skills = SkillSet(technical=["Python"], tools=["Docker"], soft=["Leadership"])
        assert skills.claimed_hard_skills() == ["Python", "Docker"]
        assert skills.all_skills() == ["Python", "Docker", "Leadership"]

    def test_experience_coercion(self) -> None:
        """Test that unparseable experience becomes 0."""
        assert CandidateSkills(experience_years="<UNKNOWN>").experience_years == 0.0
        assert CandidateSkills(experience_years="5").experience_years == 5.0
        assert JobSkills(required_experience=-2).required_experience == 0.0

    def test_priorities_drop_unknown_levels(self) -> None:
        """Test that priority values are validated case-insensitively."""
        jd = JobSkills(priorities={"Python": "CRITICAL", "Go": "mandatory", "Rust": "bonus"})
        assert jd.priorities == {"Python": SkillPriority.CRITICAL, "Rust": SkillPriority.BONUS}


class TestSkillMatch:
    """Tests for SkillMatch invariants."""

    def test_from_confidence_derives_status(self) -> None:
        """Test status derivation from confidence."""
        match = SkillMatch.from_confidence("Go", "golang", 0.6, SkillCategory.TECHNICAL)
        assert match.status is MatchStatus.PARTIAL

    def test_from_confidence_clamps(self) -> None:
        """Test that out-of-range confidences are clamped."""
        match = SkillMatch.from_confidence("Go", "go", 1.7, SkillCategory.TECHNICAL)
        assert match.confidence == 1.0
        assert match.status is MatchStatus.MATCHED

    def test_status_must_follow_confidence(self) -> None:
        """Test that an inconsistent status is rejected."""
        with pytest.raises(ValidationError):
            SkillMatch(
                jd_skill="Go",
                resume_skill="go",
                confidence=0.3,
                status=MatchStatus.MATCHED,
                category=SkillCategory.TECHNICAL,
            )

    def test_match_without_resume_skill_must_be_missing(self) -> None:
        """Test that a matched status needs a resume skill."""
        with pytest.raises(ValidationError):
            SkillMatch(
                jd_skill="Go",
                confidence=0.9,
                status=MatchStatus.MATCHED,
                category=SkillCategory.TECHNICAL,
            )

    def test_default_priority_weight(self) -> None:
        """Test that an unprioritized skill weighs like a preferred one."""
        match = SkillMatch.from_confidence("Go", None, 0.0, SkillCategory.TECHNICAL)
        assert match.effective_priority is SkillPriority.PREFERRED
        assert match.weight == 1.0


class TestMatchSet:
    """Tests for MatchSet counters."""

    def test_counts(self) -> None:
        """Test that the counters partition the matches."""
        match_set = MatchSet(
            matches=[
                SkillMatch.from_confidence("A", "a", 0.95, SkillCategory.TECHNICAL),
                SkillMatch.from_confidence("B", "b", 0.6, SkillCategory.TOOLS),
                SkillMatch.from_confidence("C", None, 0.0, SkillCategory.SOFT),
                SkillMatch.from_confidence("D", None, 0.0, SkillCategory.SOFT),
            ]
        )
        assert (match_set.matched, match_set.partial, match_set.missing) == (1, 1, 2)
        assert match_set.total == 4
        assert match_set.match_ratio == 0.25
        assert match_set.missing_skills() == ["C", "D"]
        assert match_set.partial_skills() == ["B ~ b"]

    def test_empty_ratio(self) -> None:
        """Test that an empty set is fully matched."""
        assert MatchSet().match_ratio == 1.0

    def test_counts_serialized(self) -> None:
        """Test that computed counters appear in the JSON dump."""
        dumped = MatchSet().model_dump()
        assert dumped["total"] == 0
        assert dumped["missing"] == 0


class TestExtractionModels:
    """Tests for extraction result coercion."""

    def test_unknown_job_category_falls_back_to_general(self) -> None:
        """Test the job category default."""
        assert ExtractionResult(job_category="marketing").job_category is JobCategory.GENERAL
        assert ExtractionResult(job_category="Creative").job_category is JobCategory.CREATIVE

    def test_external_match_coercion(self) -> None:
        """Test confidence clamping and category/priority defaults."""
        match = ExternalMatch(
            jd_skill="Go", resume_skill="go", confidence="1.4", category="weird", priority="?"
        )
        assert match.confidence == 1.0
        assert match.category is SkillCategory.TECHNICAL
        assert match.priority is None


class TestEvidenceProfile:
    """Tests for EvidenceProfile helpers."""

    def test_empty_profile(self) -> None:
        """Test that an empty profile carries its reason and no evidence."""
        profile = EvidenceProfile.empty("No GitHub username provided")
        assert profile.score == 0
        assert profile.risks == ["No GitHub username provided"]
        assert not profile.verified

    def test_detected_languages_lowercased(self) -> None:
        """Test that detected languages are compared lower-cased."""
        profile = EvidenceProfile(languages=["Python", "Jupyter Notebook"])
        assert profile.detected_languages == {"python", "jupyter notebook"}


class TestCandidateResult:
    """Tests for CandidateResult invariants."""

    def test_failed_requires_error(self) -> None:
        """Test that a failed result without an error is rejected."""
        with pytest.raises(ValidationError):
            CandidateResult(candidate_id="abc", status=CandidateStatus.FAILED)

    def test_success_requires_analysis(self) -> None:
        """Test that a successful result without an analysis is rejected."""
        with pytest.raises(ValidationError):
            CandidateResult(candidate_id="abc", status=CandidateStatus.SUCCESS, score=50)

    def test_failed_result(self) -> None:
        """Test a valid failed result."""
        result = CandidateResult(
            candidate_id="abc", status=CandidateStatus.FAILED, error="boom", attempts=2
        )
        assert result.score == 0
        assert result.analysis is None

    def test_successful_result(self, sample_analysis: CandidateAnalysis) -> None:
        """Test a valid successful result."""
        result = CandidateResult(
            candidate_id="abc",
            status=CandidateStatus.SUCCESS,
            score=sample_analysis.final_score,
            analysis=sample_analysis,
        )
        assert result.rank == 0


class TestBatchJob:
    """Tests for BatchJob counter invariants."""

    def test_counters_must_add_up(self) -> None:
        """Test that inconsistent counters are rejected."""
        failed = CandidateResult(candidate_id="a", status=CandidateStatus.FAILED, error="x")
        with pytest.raises(ValidationError):
            BatchJob(
                batch_id="batch-1",
                jd_hash="deadbeef",
                job_description="",
                total_candidates=1,
                processed=1,
                failed=1,
                cached=0,
                candidates=[failed],
                created_at=datetime.now(timezone.utc),
            )

    def test_every_candidate_needs_a_result(self) -> None:
        """Test that the candidate list length must match the total."""
        with pytest.raises(ValidationError):
            BatchJob(
                batch_id="batch-1",
                jd_hash="deadbeef",
                job_description="",
                total_candidates=1,
                processed=0,
                failed=1,
                cached=0,
                candidates=[],
                created_at=datetime.now(timezone.utc),
            )
