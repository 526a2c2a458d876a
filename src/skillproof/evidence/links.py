"""Profile and portfolio link validation."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from skillproof.models.evidence import LinkValidation

logger = logging.getLogger(__name__)

LINKEDIN_QUALITY = 50
GITHUB_LINK_QUALITY = 30

PORTFOLIO_KEYWORDS = [
    "portfolio", "projects", "work", "design", "developer", "engineer",
    "about", "skills", "experience", "resume", "cv", "hire", "freelance",
    "ux", "ui", "frontend", "backend", "fullstack", "creative", "studio",
]
CONTACT_KEYWORDS = ["contact", "email", "mailto:", "linkedin", "twitter", "github"]

# Scanned prefix of the visible text and link targets
PAGE_SCAN_CHARS = 10_000

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

def page_title(soup: BeautifulSoup) -> str:
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return ""

def page_description(soup: BeautifulSoup) -> str:
    meta_desc = soup.select_one('meta[name="description"]')
    if meta_desc:
        return meta_desc.get("content", "").strip()
    return ""

def portfolio_quality(soup: BeautifulSoup) -> int:
    """Heuristic 0-100 quality score for a personal site.

    Points: branding title 15, role keywords 20, project links 15,
    contact info 10, meta description 10, Open Graph tags 10, navigation 10.
    Content signals are read from the visible text and the link targets.
    """
    title = page_title(soup)
    description = page_description(soup)
    lower_title = title.lower()
    lower_desc = description.lower()
    hrefs = " ".join(a.get("href", "") for a in soup.find_all("a", href=True))
    content = f"{soup.get_text(' ')} {hrefs}".lower()[:PAGE_SCAN_CHARS]

    score = 0
    if len(lower_title) > 3 and "untitled" not in lower_title:
        score += 15
    if any(kw in lower_title or kw in lower_desc for kw in PORTFOLIO_KEYWORDS):
        score += 20
    if any(kw in content for kw in ("project", "work", "case study")):
        score += 15
    if any(kw in content for kw in CONTACT_KEYWORDS):
        score += 10
    if len(description) > 20:
        score += 10
    if soup.select_one('meta[property="og:image"], meta[property="og:title"]'):
        score += 10
    if soup.find("nav") or soup.select_one('[role="navigation"]'):
        score += 10
    return min(score, 100)

class LinkValidator:
    """Check that resume links resolve and score portfolio quality."""

    def __init__(self, timeout: float = 8.0, transport: httpx.BaseTransport | None = None):
        self.timeout = timeout
        self.transport = transport

    def validate(self, url: str) -> LinkValidation:
        """Fetch a link and classify it.

        LinkedIn blocks scrapers with 401/403/999, so anything but a 404 counts
        as a valid LinkedIn profile. Network failures give an invalid result,
        never an exception.
        """
        if not url.startswith("http"):
            url = f"https://{url}"

        try:
            with httpx.Client(
                headers=BROWSER_HEADERS,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Link validation failed for {url}: {e}")
            return LinkValidation(url=url, is_valid=False, error=str(e) or type(e).__name__)

        if "linkedin.com" in url:
            if response.status_code == 404:
                return LinkValidation(
                    url=url, is_valid=False, status=404, error="Profile Not Found"
                )
            return LinkValidation(
                url=url,
                is_valid=True,
                status=response.status_code,
                title="LinkedIn Profile",
                quality_score=LINKEDIN_QUALITY,
            )

        if not response.is_success:
            return LinkValidation(
                url=url,
                is_valid=False,
                status=response.status_code,
                error=f"HTTP {response.status_code}",
            )

        soup = BeautifulSoup(response.text, "html.parser")
        title = page_title(soup)
        description = page_description(soup)

        is_portfolio = "github.com" not in url
        quality = portfolio_quality(soup) if is_portfolio else GITHUB_LINK_QUALITY

        return LinkValidation(
            url=url,
            is_valid=True,
            is_portfolio=is_portfolio,
            status=response.status_code,
            title=title or None,
            description=description or None,
            quality_score=quality,
        )
