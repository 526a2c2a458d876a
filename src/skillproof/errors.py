"""Error taxonomy for candidate analysis.

The batch orchestrator decides how to retry a failed attempt from the type
of the exception raised by the pipeline:

- ValidationError: malformed or empty input, never retried
- QuotaError: external rate/quota rejection, retried after a long cooldown
- TransientError: network or timeout problem, retried with exponential backoff
- NotFoundError: evidence profile absent, callers degrade to an empty profile
"""

QUOTA_MARKERS = ("429", "quota", "rate limit", "resource exhausted", "too many requests")


class SkillProofError(Exception):
    """Base class for all SkillProof errors."""


class ValidationError(SkillProofError, ValueError):
    """Raised when inputs are malformed or empty."""


class QuotaError(SkillProofError):
    """Raised when an external API rejects a call for rate or quota reasons."""


class TransientError(SkillProofError):
    """Raised for network failures and timeouts that may succeed on retry."""


class NotFoundError(SkillProofError):
    """Raised when an external profile does not exist."""


def looks_like_quota_error(error: BaseException) -> bool:
    """Check whether an arbitrary exception message signals a quota rejection."""
    message = str(error).lower()
    return any(marker in message for marker in QUOTA_MARKERS)
