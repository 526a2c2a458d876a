"""Markdown output formatting."""

from pathlib import Path

from skillproof.models.results import BatchJob, CandidateAnalysis, CandidateStatus


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _bullets(title: str, items: list[str]) -> list[str]:
    if not items:
        return []
    return [f"### {title}", *(f"- {item}" for item in items), ""]


def format_candidate_analysis(analysis: CandidateAnalysis) -> str:
    """Format one candidate's analysis for display.

    Args:
        analysis: Full analysis payload.

    Returns:
        Formatted markdown.
    """
    ats = analysis.ats
    breakdown = ats.breakdown
    output = [
        f"## Fit Score: {analysis.final_score} ({analysis.recommendation.label})",
        "",
        f"*Job category: {analysis.job_category.value}, "
        f"matching: {analysis.match_source.value}*",
        "",
        "### Score Breakdown",
        f"- **ATS:** {ats.score}",
        f"  - Technical skills: {breakdown.skill_match:.0f}",
        f"  - Tools: {breakdown.tool_match:.0f}",
        f"  - Soft skills: {breakdown.soft_match:.0f}",
        f"  - Experience: {breakdown.experience_match:.0f}",
        f"  - Keyword density: {breakdown.keyword_density:.0f}",
        f"- **Code evidence:** {analysis.evidence.score}",
        f"- **Skill proof:** {analysis.proof.score}",
        f"- **Resume quality:** {analysis.quality.score:.0f}",
        f"- **Link score:** {analysis.link_score:g}",
        "",
    ]

    output += _bullets("Matched Skills", ats.matched_skills)
    output += _bullets("Partial Matches", analysis.match_set.partial_skills())
    output += _bullets("Critical Gaps", analysis.gaps.critical_gaps)
    output += _bullets("Nice-to-have Gaps", analysis.gaps.nice_to_have_gaps)
    output += _bullets("Proven by Code", analysis.proof.proven)
    output += _bullets("Evidence Risks", analysis.evidence.risks)

    if analysis.explanation:
        output += ["### Summary", analysis.explanation, ""]

    return "\n".join(output).rstrip() + "\n"


def format_batch_report(job: BatchJob) -> str:
    """Format a ranked batch as a markdown report.

    Args:
        job: Completed batch.

    Returns:
        Markdown with a ranking table and per-candidate details.
    """
    output = [
        f"# Candidate Ranking ({job.batch_id})",
        "",
        f"- **Candidates:** {job.total_candidates}",
        f"- **Analyzed:** {job.processed}, **cached:** {job.cached}, **failed:** {job.failed}",
        f"- **Duration:** {job.duration_seconds:.1f}s",
        "",
        "| Rank | Candidate | Score | Recommendation | Status |",
        "|---:|---|---:|---|---|",
    ]
    for result in job.candidates:
        label = result.analysis.recommendation.label if result.analysis else "-"
        output.append(
            f"| {result.rank} | {result.name or result.candidate_id} | {result.score} "
            f"| {label} | {result.status.value} |"
        )
    output.append("")

    for result in job.candidates:
        output.append(f"# {result.rank}. {result.name or result.candidate_id}")
        output.append("")
        if result.status is CandidateStatus.FAILED:
            output.append(f"**Failed after {result.attempts} attempt(s):** {result.error}")
            output.append("")
        else:
            output.append(format_candidate_analysis(result.analysis))

    return "\n".join(output).rstrip() + "\n"
