"""GitHub evidence collector.

Fetches a user's profile, repositories and recent public events, then
summarizes them into an EvidenceProfile. Network access lives in
GitHubEvidenceCollector; the scoring itself is the pure build_profile().
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from skillproof.errors import NotFoundError, QuotaError, TransientError
from skillproof.models.evidence import EvidenceProfile

logger = logging.getLogger(__name__)

ACTIVE_WINDOW = timedelta(days=180)
MAX_PAGE_SIZE = 100

NO_USERNAME_RISK = "No GitHub username provided"
NOT_FOUND_RISK = "Profile Not Found"
API_ERROR_RISK = "API Error"

_PROFILE_URL = re.compile(r"^(?:https?://)?(?:www\.)?github\.com/", re.IGNORECASE)


def clean_username(value: str) -> str:
    """Accept either a bare username or a full profile URL.

    >>> clean_username("https://github.com/octocat/hello-world")
    'octocat'
    """
    return _PROFILE_URL.sub("", value.strip()).split("/")[0].strip()


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _push_commits(event: dict[str, Any]) -> int:
    payload = event.get("payload") or {}
    return len(payload.get("commits") or [])


def build_profile(
    username: str,
    user: dict[str, Any],
    repos: list[dict[str, Any]],
    events: list[dict[str, Any]],
    now: datetime,
) -> EvidenceProfile:
    """Summarize raw GitHub API payloads into an evidence profile.

    Args:
        username: Cleaned username.
        user: ``GET /users/{username}`` payload.
        repos: ``GET /users/{username}/repos`` payload.
        events: ``GET /users/{username}/events/public`` payload.
        now: Reference time (timezone-aware).

    Returns:
        EvidenceProfile with the 0-100 evidence score, proof points and risks.
    """
    active_since = now - ACTIVE_WINDOW

    forks = sum(1 for repo in repos if repo.get("fork"))
    original_repos = len(repos) - forks
    total_stars = sum(repo.get("stargazers_count") or 0 for repo in repos)
    total_size_kb = sum(repo.get("size") or 0 for repo in repos)

    language_counts: Counter[str] = Counter()
    recent_languages: set[str] = set()
    older_languages: set[str] = set()
    active_repos = 0
    for repo in repos:
        language = repo.get("language")
        created = _parse_time(repo.get("created_at"))
        if language:
            language_counts[language] += 1
            if created is not None and created.year >= now.year - 1:
                recent_languages.add(language)
            else:
                older_languages.add(language)
        updated = _parse_time(repo.get("updated_at"))
        if updated is not None and updated > active_since:
            active_repos += 1

    # most_common keeps first-seen order for ties
    languages = [language for language, _ in language_counts.most_common()]
    new_languages = sorted(recent_languages - older_languages)

    push_events = [e for e in events if e.get("type") == "PushEvent"]
    total_commits = sum(_push_commits(e) for e in push_events)
    recent_commits = sum(
        _push_commits(e)
        for e in push_events
        if (pushed := _parse_time(e.get("created_at"))) is not None and pushed > active_since
    )

    created_at = _parse_time(user.get("created_at"))
    account_age_months = max(0, (now - created_at).days // 30) if created_at else 0

    velocity = min(100, round(recent_commits * 2 + active_repos * 10 + len(new_languages) * 15))

    score = 0.0
    score += min(original_repos * 5, 40)
    score += min(active_repos * 8, 30)
    score += min(total_stars * 2, 20)
    score += min(len(languages) * 3, 15)
    score += min(velocity * 0.15, 15)
    if forks > original_repos * 2:
        score -= 15  # Mostly forked tutorials
    if active_repos == 0:
        score -= 20
    if account_age_months < 6 and original_repos < 3:
        score -= 10

    proof: list[str] = []
    if original_repos >= 5:
        proof.append("Consistent Project History")
    if total_stars >= 10:
        proof.append("Community Recognition")
    if active_repos >= 3:
        proof.append("Recently Active")
    if velocity >= 50:
        proof.append("High Coding Velocity")
    if len(new_languages) >= 2:
        proof.append("Active Learner")
    if account_age_months >= 24:
        proof.append("Experienced Developer")
    if len(languages) >= 5:
        proof.append("Polyglot Developer")

    risks: list[str] = []
    if forks > original_repos:
        risks.append("High fork ratio - possible tutorial dependency")
    if active_repos == 0:
        risks.append("No recent activity")
    if account_age_months < 6:
        risks.append("New GitHub account")
    if original_repos < 3:
        risks.append("Limited original work")

    return EvidenceProfile(
        username=username,
        score=int(min(100, max(0, round(score)))),
        languages=languages,
        top_language=languages[0] if languages else None,
        original_repos=original_repos,
        forks=forks,
        total_stars=total_stars,
        total_size_kb=total_size_kb,
        active_repos=active_repos,
        total_commits=total_commits,
        recent_commits=recent_commits,
        account_age_months=account_age_months,
        velocity_score=velocity,
        new_languages_last_year=new_languages,
        proof=proof,
        risks=risks,
    )


class GitHubEvidenceCollector:
    """Collect evidence profiles from the GitHub REST API."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._now = now
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "SkillProof/1.0",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def _get(self, client: httpx.Client, path: str, **params: Any) -> Any:
        response = client.get(f"{self.api_url}{path}", params=params or None)
        if response.status_code == 404:
            raise NotFoundError(f"GitHub resource not found: {path}")
        rate_limited = (
            response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0"
        )
        if response.status_code == 429 or rate_limited:
            raise QuotaError(f"GitHub rate limit exceeded (HTTP {response.status_code})")
        response.raise_for_status()
        return response.json()

    def fetch(self, username: str) -> tuple[dict, list, list]:
        """Fetch user, repositories and public events.

        Raises:
            NotFoundError: The user does not exist.
            QuotaError: GitHub rejected the call for rate reasons.
            TransientError: Timeouts, network and other HTTP errors.
        """
        try:
            with httpx.Client(
                headers=self.headers, timeout=self.timeout, transport=self.transport
            ) as client:
                user = self._get(client, f"/users/{username}")
                repos = self._get(
                    client, f"/users/{username}/repos", sort="updated", per_page=MAX_PAGE_SIZE
                )
                events = self._get(
                    client, f"/users/{username}/events/public", per_page=MAX_PAGE_SIZE
                )
        except httpx.TimeoutException as e:
            raise TransientError(f"GitHub request timed out for {username}") from e
        except httpx.HTTPError as e:
            raise TransientError(f"GitHub API error for {username}: {e}") from e
        return user, repos, events

    def analyze(self, username: str | None) -> EvidenceProfile:
        """Build the evidence profile for a username or profile URL.

        Never raises: a missing username, an unknown user or an API failure
        all produce a zero profile whose risks name the reason.
        """
        if not username or not clean_username(username):
            return EvidenceProfile.empty(NO_USERNAME_RISK)

        name = clean_username(username)
        try:
            user, repos, events = self.fetch(name)
        except NotFoundError:
            logger.warning(f"GitHub profile not found: {name}")
            return EvidenceProfile.empty(NOT_FOUND_RISK, username=name)
        except (QuotaError, TransientError) as e:
            logger.warning(f"GitHub analysis failed for {name}: {e}")
            return EvidenceProfile.empty(API_ERROR_RISK, username=name)

        profile = build_profile(name, user, repos, events, self._now())
        logger.info(f"GitHub evidence for {name}: score {profile.score}")
        return profile
