"""Combined resume/job-description extraction using LLM with structured output."""

import logging

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field

from skillproof.errors import (
    QuotaError,
    SkillProofError,
    TransientError,
    ValidationError,
    looks_like_quota_error,
)
from skillproof.llm.base import LLMProvider
from skillproof.models.extraction import (
    CandidateCluster,
    ExternalMatch,
    ExtractionResult,
    QualityAssessment,
)
from skillproof.models.skills import CandidateSkills, JobSkills, SkillPriority
from skillproof.prompts.extraction import COMBINED_EXTRACTION_PROMPT

logger = logging.getLogger(__name__)

MAX_RESUME_CHARS = 20_000
MAX_JD_CHARS = 10_000


class ResumeSkillsOutput(BaseModel):
    """Skills extracted from the resume."""

    technical: list[str] = Field(default_factory=list, description="Languages and frameworks")
    tools: list[str] = Field(default_factory=list, description="Platforms and tools")
    soft: list[str] = Field(default_factory=list, description="Soft skills")
    experience_years: float = Field(default=0, description="Total professional years")
    education_level: str = Field(default="", description="Highest degree")


class JobSkillsOutput(BaseModel):
    """Skills and requirements extracted from the job description."""

    technical: list[str] = Field(default_factory=list, description="Languages and frameworks")
    tools: list[str] = Field(default_factory=list, description="Platforms and tools")
    soft: list[str] = Field(default_factory=list, description="Soft skills")
    required_experience: float = Field(default=0, description="Years required, 0 if none")
    critical: list[str] = Field(default_factory=list, description="Must-have skills")
    bonus: list[str] = Field(default_factory=list, description="Nice-to-have skills")


class QualityOutput(BaseModel):
    """Resume quality signals."""

    score: float = Field(default=0, description="Overall quality 0-100")
    formatting: float = Field(default=0, description="Formatting quality 0-100")
    achievements: float = Field(default=0, description="Quantified achievements 0-100")
    clarity: float = Field(default=0, description="Clarity 0-100")
    improvements: list[str] = Field(default_factory=list, description="Suggested improvements")


class ClusterOutput(BaseModel):
    """Career profile cluster."""

    type: str = Field(default="generalist", description="Profile type")
    confidence: float = Field(default=0, description="Confidence 0-1")
    traits: list[str] = Field(default_factory=list, description="Defining traits")


class MatchOutput(BaseModel):
    """One semantic match for a job-description skill."""

    jd_skill: str = Field(description="Skill from the job description")
    resume_skill: str | None = Field(default=None, description="Closest resume skill or null")
    confidence: float = Field(default=0, description="Confidence 0-1")
    category: str = Field(default="technical", description="technical, tools or soft")
    priority: str | None = Field(default=None, description="critical, preferred or bonus")


class CombinedExtractionOutput(BaseModel):
    """Pydantic model for the structured combined extraction output."""

    resume: ResumeSkillsOutput = Field(default_factory=ResumeSkillsOutput)
    jd: JobSkillsOutput = Field(default_factory=JobSkillsOutput)
    quality: QualityOutput = Field(default_factory=QualityOutput)
    cluster: ClusterOutput = Field(default_factory=ClusterOutput)
    matches: list[MatchOutput] = Field(default_factory=list)
    job_category: str = Field(default="general", description="technical, general or creative")
    explanation: str = Field(default="", description="Two-sentence fit summary")


def _clamp(value: float, upper: float) -> float:
    return min(upper, max(0.0, value))


def to_extraction_result(output: CombinedExtractionOutput) -> ExtractionResult:
    """Convert the raw model output into the validated domain model."""
    priorities: dict[str, SkillPriority] = {}
    for skill in output.jd.bonus:
        priorities[skill] = SkillPriority.BONUS
    # Critical wins when a skill is listed in both
    for skill in output.jd.critical:
        priorities[skill] = SkillPriority.CRITICAL

    jd = output.jd
    return ExtractionResult(
        resume=CandidateSkills(**output.resume.model_dump()),
        jd=JobSkills(
            technical=jd.technical,
            tools=jd.tools,
            soft=jd.soft,
            required_experience=jd.required_experience,
            priorities=priorities,
        ),
        quality=QualityAssessment(
            score=_clamp(output.quality.score, 100),
            formatting=_clamp(output.quality.formatting, 100),
            achievements=_clamp(output.quality.achievements, 100),
            clarity=_clamp(output.quality.clarity, 100),
            improvements=output.quality.improvements,
        ),
        cluster=CandidateCluster(
            type=output.cluster.type or "generalist",
            confidence=_clamp(output.cluster.confidence, 1),
            traits=output.cluster.traits,
        ),
        matches=[ExternalMatch(**m.model_dump()) for m in output.matches] or None,
        job_category=output.job_category,
        explanation=output.explanation,
    )


class CombinedExtractor:
    """Extract both skill sets and the quality signals in a single LLM call."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        max_resume_chars: int = MAX_RESUME_CHARS,
        max_jd_chars: int = MAX_JD_CHARS,
    ):
        self.llm_provider = llm_provider
        self.max_resume_chars = max_resume_chars
        self.max_jd_chars = max_jd_chars
        self.prompt = ChatPromptTemplate.from_template(COMBINED_EXTRACTION_PROMPT)

    def extract(self, resume_text: str, jd_text: str) -> ExtractionResult:
        """Extract structured data from a resume and a job description.

        Args:
            resume_text: Plain resume text.
            jd_text: Plain job description text.

        Returns:
            ExtractionResult: Skills, quality, cluster, matches and job category.

        Raises:
            ValidationError: Either text is empty.
            QuotaError: The provider rejected the call for rate or quota reasons.
            TransientError: Any other provider failure.
        """
        if not resume_text.strip():
            raise ValidationError("Resume text is empty")
        if not jd_text.strip():
            raise ValidationError("Job description is empty")

        model = self.llm_provider.get_extraction_model()
        structured_model = model.with_structured_output(
            CombinedExtractionOutput, method="function_calling"
        )
        chain = self.prompt | structured_model

        logger.info(
            f"Extracting skills (resume: {len(resume_text)} chars, JD: {len(jd_text)} chars)"
        )
        try:
            output = chain.invoke({
                "resume_text": resume_text[: self.max_resume_chars],
                "jd_text": jd_text[: self.max_jd_chars],
            })
        except SkillProofError:
            raise
        except Exception as e:
            if looks_like_quota_error(e):
                raise QuotaError(f"Extraction rate limited: {e}") from e
            raise TransientError(f"Extraction failed: {e}") from e

        if output is None:
            raise TransientError("Extraction returned no structured output")
        return to_extraction_result(output)
