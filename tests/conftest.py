"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from skillproof.cache import CacheRegistry
from skillproof.models.evidence import EvidenceProfile, LinkValidation
from skillproof.models.extraction import (
    CandidateCluster,
    ExtractionResult,
    JobCategory,
    QualityAssessment,
)
from skillproof.models.results import CandidateAnalysis
from skillproof.models.skills import CandidateSkills, JobSkills, SkillPriority
from skillproof.processors.pipeline import CandidateAnalyzer
from skillproof.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced clock; sleeping advances it too."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def caches(clock: FakeClock) -> CacheRegistry:
    """Create cache namespaces driven by the fake clock."""
    return CacheRegistry(clock=clock)


@pytest.fixture
def limiter(clock: FakeClock) -> RateLimiter:
    """Create a batch-budget rate limiter driven by the fake clock."""
    return RateLimiter(3, clock=clock, sleep=clock.sleep, name="test")


@pytest.fixture
def job_skills() -> JobSkills:
    """Job requiring Python (critical) and Docker (preferred)."""
    return JobSkills(
        technical=["Python"],
        tools=["Docker"],
        required_experience=3,
        priorities={"Python": SkillPriority.CRITICAL, "Docker": SkillPriority.PREFERRED},
    )


@pytest.fixture
def candidate_skills() -> CandidateSkills:
    """Candidate with Python and Kubernetes."""
    return CandidateSkills(
        technical=["python"],
        tools=["kubernetes"],
        experience_years=4,
        education_level="Bachelor",
    )


@pytest.fixture
def python_evidence() -> EvidenceProfile:
    """Evidence profile with Python repositories."""
    return EvidenceProfile(
        username="octocat",
        score=60,
        languages=["Python", "Shell"],
        top_language="Python",
        original_repos=6,
        active_repos=3,
    )


@pytest.fixture
def extraction(job_skills: JobSkills, candidate_skills: CandidateSkills) -> ExtractionResult:
    """Extraction result for the Python/Docker job."""
    return ExtractionResult(
        resume=candidate_skills,
        jd=job_skills,
        quality=QualityAssessment(score=70, formatting=80, achievements=60, clarity=70),
        cluster=CandidateCluster(type="specialist", confidence=0.8),
        job_category=JobCategory.TECHNICAL,
        explanation="Strong Python background; no Docker.",
    )


@pytest.fixture
def mock_extractor(extraction: ExtractionResult) -> MagicMock:
    """Extractor that always returns the fixture extraction."""
    extractor = MagicMock()
    extractor.extract.return_value = extraction
    return extractor


@pytest.fixture
def mock_evidence_collector(python_evidence: EvidenceProfile) -> MagicMock:
    """Evidence collector that always returns the Python profile."""
    collector = MagicMock()
    collector.analyze.return_value = python_evidence
    return collector


@pytest.fixture
def mock_link_validator() -> MagicMock:
    """Link validator that accepts every link with quality 60."""
    validator = MagicMock()
    validator.validate.side_effect = lambda url: LinkValidation(
        url=url, is_valid=True, status=200, quality_score=60
    )
    return validator


@pytest.fixture
def analyzer(
    mock_extractor: MagicMock,
    mock_evidence_collector: MagicMock,
    mock_link_validator: MagicMock,
    caches: CacheRegistry,
) -> CandidateAnalyzer:
    """Analyzer wired to mock collaborators."""
    return CandidateAnalyzer(
        extractor=mock_extractor,
        evidence_collector=mock_evidence_collector,
        link_validator=mock_link_validator,
        caches=caches,
    )


@pytest.fixture
def sample_resume_text() -> str:
    """Plain-text resume with profile links."""
    return (
        "Jane Smith\n"
        "jane.smith@example.com | github.com/janesmith | linkedin.com/in/jane-smith\n"
        "Portfolio: https://janesmith.dev\n\n"
        "Backend engineer, 4 years of Python and Kubernetes.\n"
    )


@pytest.fixture
def sample_jd_text() -> str:
    """Job description text."""
    return "Senior Backend Engineer. Must have Python. Docker preferred. 3+ years."


@pytest.fixture
def sample_analysis(
    analyzer: CandidateAnalyzer, sample_resume_text: str, sample_jd_text: str
) -> CandidateAnalysis:
    """A complete analysis produced by the real pipeline with mock collaborators."""
    return analyzer.analyze(sample_resume_text, sample_jd_text)
