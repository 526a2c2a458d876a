"""Resume document handling: text extraction, profile links and contact heuristics."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import fitz  # PyMuPDF

from skillproof.errors import ValidationError
from skillproof.models.evidence import ProfileLinks

logger = logging.getLogger(__name__)

_GITHUB = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9-]+", re.IGNORECASE)
_LINKEDIN = re.compile(r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)
_URL = re.compile(r"(?:https?://|www\.)[^\s<>()\[\]\"',;]+", re.IGNORECASE)
_EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# Hosts that are never a personal portfolio
NON_PORTFOLIO_HOSTS = ("github.com", "linkedin.com", "gitlab.com", "twitter.com", "x.com")

NAME_MAX_WORDS = 4
NAME_SCAN_LINES = 5


@dataclass(frozen=True)
class CandidateDocument:
    """An uploaded resume: file name and raw bytes."""

    name: str
    content: bytes

    @property
    def stem(self) -> str:
        """File name without extension, used as a fallback display name."""
        return Path(self.name).stem or self.name


def extract_text(document: CandidateDocument) -> str:
    """Extract plain text from a PDF or text resume.

    Raises:
        ValidationError: The document is empty or yields no text.
    """
    if not document.content:
        raise ValidationError(f"{document.name} is empty")

    if document.content.startswith(b"%PDF"):
        try:
            with fitz.open(stream=document.content, filetype="pdf") as doc:
                text = "\n\n".join(page.get_text() for page in doc)
        except (RuntimeError, ValueError) as e:
            raise ValidationError(f"{document.name} is not a readable PDF: {e}") from e
    else:
        text = document.content.decode("utf-8", errors="replace")

    text = text.replace("\x00", "").strip()
    if not text:
        raise ValidationError(f"No text content found in {document.name}")
    return text


def extract_profile_links(text: str) -> ProfileLinks:
    """Find GitHub, LinkedIn and portfolio links in resume text."""
    github = _GITHUB.search(text)
    linkedin = _LINKEDIN.search(text)

    portfolio = None
    for match in _URL.finditer(text):
        url = match.group(0).rstrip(".")
        if not any(host in url.lower() for host in NON_PORTFOLIO_HOSTS):
            portfolio = url
            break

    return ProfileLinks(
        github=github.group(0) if github else None,
        linkedin=linkedin.group(0) if linkedin else None,
        portfolio=portfolio,
    )


def extract_email(text: str) -> str | None:
    match = _EMAIL.search(text)
    return match.group(0) if match else None


def extract_candidate_name(text: str) -> str | None:
    """Guess the candidate's name from the first lines of the resume.

    Takes the first short line made only of letters, spaces, dots, hyphens
    and apostrophes.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines[:NAME_SCAN_LINES]:
        words = line.split()
        if not 2 <= len(words) <= NAME_MAX_WORDS:
            continue
        if all(re.fullmatch(r"[^\W\d_][\w.'-]*", word) for word in words):
            return line
    return None
