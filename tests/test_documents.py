"""Tests for resume document handling."""

import fitz
import pytest

from skillproof.errors import ValidationError
from skillproof.processors.documents import (
    CandidateDocument,
    extract_candidate_name,
    extract_email,
    extract_profile_links,
    extract_text,
)


def make_pdf(text: str) -> bytes:
    """Create a one-page PDF containing the given text."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), text)
    content = doc.tobytes()
    doc.close()
    return content


class TestExtractText:
    """Tests for extract_text."""

    def test_plain_text(self) -> None:
        """Test that text files are decoded as UTF-8."""
        document = CandidateDocument(name="jane.md", content="# Jane Smith\nPython".encode())
        assert extract_text(document) == "# Jane Smith\nPython"

    def test_invalid_utf8_is_replaced(self) -> None:
        """Test that undecodable bytes do not fail extraction."""
        document = CandidateDocument(name="cv.txt", content=b"Python \xff developer")
        assert "Python" in extract_text(document)

    def test_pdf(self) -> None:
        """Test text extraction from a PDF."""
        document = CandidateDocument(name="jane.pdf", content=make_pdf("Jane Smith Python"))
        assert "Jane Smith Python" in extract_text(document)

    def test_empty_document(self) -> None:
        """Test that an empty upload is a validation error."""
        with pytest.raises(ValidationError, match="empty"):
            extract_text(CandidateDocument(name="empty.txt", content=b""))

    def test_whitespace_only(self) -> None:
        """Test that a document without text is a validation error."""
        with pytest.raises(ValidationError, match="No text content"):
            extract_text(CandidateDocument(name="blank.txt", content=b"   \n\t "))

    def test_corrupt_pdf(self) -> None:
        """Test that an unreadable PDF is a validation error."""
        with pytest.raises(ValidationError):
            extract_text(CandidateDocument(name="bad.pdf", content=b"%PDF-1.4 garbage"))

    def test_stem(self) -> None:
        """Test the fallback display name."""
        assert CandidateDocument(name="jane_smith.pdf", content=b"x").stem == "jane_smith"


class TestExtractProfileLinks:
    """Tests for extract_profile_links."""

    def test_all_links(self, sample_resume_text: str) -> None:
        """Test GitHub, LinkedIn and portfolio detection."""
        links = extract_profile_links(sample_resume_text)
        assert links.github == "github.com/janesmith"
        assert links.linkedin == "linkedin.com/in/jane-smith"
        assert links.portfolio == "https://janesmith.dev"

    def test_portfolio_skips_profile_hosts(self) -> None:
        """Test that code-hosting and social URLs are never the portfolio."""
        text = (
            "https://github.com/jane https://www.linkedin.com/in/jane "
            "https://gitlab.com/jane and www.jane.design."
        )
        links = extract_profile_links(text)
        assert links.github == "https://github.com/jane"
        assert links.linkedin == "https://www.linkedin.com/in/jane"
        assert links.portfolio == "www.jane.design"

    def test_no_links(self) -> None:
        """Test a resume without links."""
        links = extract_profile_links("Jane Smith\nPython developer")
        assert links.github is None
        assert links.linkedin is None
        assert links.portfolio is None


class TestContactHeuristics:
    """Tests for name and email extraction."""

    def test_email(self, sample_resume_text: str) -> None:
        """Test email extraction."""
        assert extract_email(sample_resume_text) == "jane.smith@example.com"
        assert extract_email("no contact details") is None

    def test_name_from_first_lines(self, sample_resume_text: str) -> None:
        """Test that the first short alphabetic line is the name."""
        assert extract_candidate_name(sample_resume_text) == "Jane Smith"

    def test_name_skips_headings(self) -> None:
        """Test that single words and long lines are not names."""
        text = "RESUME\nSenior Software Engineer at a Big Company\nJosé O'Neil\n"
        assert extract_candidate_name(text) == "José O'Neil"

    def test_no_name(self) -> None:
        """Test a resume whose first lines contain no name."""
        assert extract_candidate_name("Curriculum\n2024 - present\n") is None
