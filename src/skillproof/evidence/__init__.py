"""Evidence collectors: code-hosting activity and link validation."""

from skillproof.evidence.github import GitHubEvidenceCollector, build_profile, clean_username
from skillproof.evidence.links import LinkValidator, portfolio_quality

__all__ = [
    "GitHubEvidenceCollector",
    "LinkValidator",
    "build_profile",
    "clean_username",
    "portfolio_quality",
]
