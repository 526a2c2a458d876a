"""Evidence verification of claimed skills.

A claimed skill is PROVEN when it is itself a language detected in the
candidate's repositories, INFERRED when it implies a detected language
(React implies JavaScript or TypeScript), and MISSING otherwise.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from skillproof.matching.normalizer import normalize_skill
from skillproof.models.evidence import EvidenceProfile
from skillproof.scoring.ats import clamp_score
from skillproof.scoring.models import ProofResult, ProofStatus, SkillProof

logger = logging.getLogger(__name__)

PROVEN_WEIGHT = 100.0
STRONG_INFERENCE = 70.0  # Framework only usable from these languages
WEAK_INFERENCE = 50.0  # Tool commonly, not exclusively, used with these languages

_TOKEN_SPLIT = re.compile(r"[\s,;:/|()\[\]{}+&]+")
_PUNCT_SPLIT = re.compile(r"[.\-_]+")


class LanguageInference(NamedTuple):
    """Languages that corroborate a skill and the weight they carry."""

    languages: tuple[str, ...]
    weight: float


SKILL_LANGUAGE_MAP: dict[str, LanguageInference] = {
    # JavaScript / TypeScript frameworks
    "react": LanguageInference(("javascript", "typescript"), STRONG_INFERENCE),
    "next.js": LanguageInference(("javascript", "typescript"), STRONG_INFERENCE),
    "vue": LanguageInference(("javascript", "typescript", "vue"), STRONG_INFERENCE),
    "nuxt.js": LanguageInference(("javascript", "typescript", "vue"), STRONG_INFERENCE),
    "angular": LanguageInference(("typescript", "javascript"), STRONG_INFERENCE),
    "svelte": LanguageInference(("svelte", "javascript", "typescript"), STRONG_INFERENCE),
    "node.js": LanguageInference(("javascript", "typescript"), STRONG_INFERENCE),
    "express": LanguageInference(("javascript", "typescript"), STRONG_INFERENCE),
    "react-native": LanguageInference(("javascript", "typescript"), STRONG_INFERENCE),
    "jquery": LanguageInference(("javascript",), STRONG_INFERENCE),
    "graphql": LanguageInference(("javascript", "typescript", "python"), WEAK_INFERENCE),
    # Python frameworks and libraries
    "django": LanguageInference(("python",), STRONG_INFERENCE),
    "flask": LanguageInference(("python",), STRONG_INFERENCE),
    "fastapi": LanguageInference(("python",), STRONG_INFERENCE),
    "pandas": LanguageInference(("python", "jupyter notebook"), STRONG_INFERENCE),
    "numpy": LanguageInference(("python", "jupyter notebook"), STRONG_INFERENCE),
    "pytorch": LanguageInference(("python", "jupyter notebook"), STRONG_INFERENCE),
    "tensorflow": LanguageInference(("python", "jupyter notebook"), STRONG_INFERENCE),
    "scikit-learn": LanguageInference(("python", "jupyter notebook"), STRONG_INFERENCE),
    "machine learning": LanguageInference(("python", "jupyter notebook", "r"), WEAK_INFERENCE),
    # JVM
    "spring": LanguageInference(("java", "kotlin"), STRONG_INFERENCE),
    "android": LanguageInference(("kotlin", "java"), STRONG_INFERENCE),
    "scala": LanguageInference(("scala",), STRONG_INFERENCE),
    # Others
    "rails": LanguageInference(("ruby",), STRONG_INFERENCE),
    "laravel": LanguageInference(("php",), STRONG_INFERENCE),
    "ios": LanguageInference(("swift", "objective-c"), STRONG_INFERENCE),
    "swiftui": LanguageInference(("swift",), STRONG_INFERENCE),
    "flutter": LanguageInference(("dart",), STRONG_INFERENCE),
    ".net": LanguageInference(("c#",), STRONG_INFERENCE),
    "unity": LanguageInference(("c#",), WEAK_INFERENCE),
    "tailwindcss": LanguageInference(("css", "html", "javascript"), WEAK_INFERENCE),
    "scss": LanguageInference(("scss", "css"), STRONG_INFERENCE),
    "css": LanguageInference(("css", "scss", "html"), WEAK_INFERENCE),
    "html": LanguageInference(("html",), WEAK_INFERENCE),
    "docker": LanguageInference(("dockerfile",), STRONG_INFERENCE),
    "terraform": LanguageInference(("hcl",), STRONG_INFERENCE),
    "shell": LanguageInference(("shell", "powershell"), WEAK_INFERENCE),
    "sql": LanguageInference(("plpgsql", "tsql", "sql"), WEAK_INFERENCE),
    "postgresql": LanguageInference(("plpgsql",), WEAK_INFERENCE),
}


def _candidate_forms(skill: str) -> list[str]:
    """Forms to test for a skill: the whole string, then sub-tokens.

    Each form is tried as written before its synonym-normalized version, so a
    language the synonym table folds into another ("powershell" into "shell")
    still matches itself.
    """
    raw = skill.strip().lower()
    whole = {raw, normalize_skill(skill)}
    forms = [raw, normalize_skill(skill)]
    for piece in _TOKEN_SPLIT.split(raw):
        if not piece:
            continue
        canonical = normalize_skill(piece)
        forms.extend((piece, canonical))
        # "react.js" is a known alias; only split pieces the synonym table does not know
        if canonical == piece:
            for part in _PUNCT_SPLIT.split(piece):
                if part:
                    forms.extend((part, normalize_skill(part)))

    seen: set[str] = set()
    unique: list[str] = []
    for form in forms:
        # Single characters are too ambiguous as sub-tokens ("c" in "c-suite")
        if form and form not in seen and (form in whole or len(form) > 1):
            seen.add(form)
            unique.append(form)
    return unique


def classify_skill(skill: str, detected_languages: set[str]) -> SkillProof:
    """Classify one claimed skill against the detected languages."""
    forms = _candidate_forms(skill)

    for form in forms:
        if form in detected_languages:
            return SkillProof(
                skill=skill,
                status=ProofStatus.PROVEN,
                weight=PROVEN_WEIGHT,
                evidence_language=form,
            )

    for form in forms:
        inference = SKILL_LANGUAGE_MAP.get(form)
        if inference is None:
            continue
        for language in inference.languages:
            if language in detected_languages:
                return SkillProof(
                    skill=skill,
                    status=ProofStatus.INFERRED,
                    weight=inference.weight,
                    evidence_language=language,
                )

    return SkillProof(skill=skill, status=ProofStatus.MISSING, weight=0.0)


def verify_skills(claimed_skills: list[str], evidence: EvidenceProfile) -> ProofResult:
    """Score how much of the claimed skill set is backed by code evidence.

    Args:
        claimed_skills: Technical skills and tools from the resume.
        evidence: Candidate's evidence profile (may be empty).

    Returns:
        ProofResult whose score is the mean proof weight, capped at 100.
        A resume that claims nothing scores 0.
    """
    detected = evidence.detected_languages
    proofs = [classify_skill(skill, detected) for skill in claimed_skills]

    raw_score = min(100.0, sum(p.weight for p in proofs) / len(proofs)) if proofs else 0.0

    result = ProofResult(score=clamp_score(raw_score), raw_score=raw_score, skills=proofs)
    logger.debug(
        f"Proof score {result.score}: {len(result.proven)} proven, "
        f"{len(result.inferred)} inferred, {len(result.missing)} missing"
    )
    return result
