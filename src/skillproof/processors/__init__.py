"""Candidate processing: documents, gap analysis, single and batch pipelines."""

from skillproof.processors.batch import BatchOrchestrator, FailureKind, RetryPolicy
from skillproof.processors.documents import CandidateDocument, extract_profile_links
from skillproof.processors.gaps import analyze_gaps
from skillproof.processors.pipeline import CandidateAnalyzer

__all__ = [
    "BatchOrchestrator",
    "CandidateAnalyzer",
    "CandidateDocument",
    "FailureKind",
    "RetryPolicy",
    "analyze_gaps",
    "extract_profile_links",
]
