"""CLI entry point for SkillProof."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> skillproof/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markdown import Markdown  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from skillproof.config import Settings, get_settings  # noqa: E402
from skillproof.context import AppContext  # noqa: E402
from skillproof.evidence.github import GitHubEvidenceCollector  # noqa: E402
from skillproof.evidence.links import LinkValidator  # noqa: E402
from skillproof.extractors.combined import CombinedExtractor  # noqa: E402
from skillproof.llm.base import get_llm_provider  # noqa: E402
from skillproof.models.results import CandidateStatus  # noqa: E402
from skillproof.output.markdown import (  # noqa: E402
    format_batch_report,
    format_candidate_analysis,
    save_markdown,
)
from skillproof.processors.batch import BatchOrchestrator, RetryPolicy  # noqa: E402
from skillproof.processors.documents import CandidateDocument  # noqa: E402
from skillproof.processors.pipeline import CandidateAnalyzer  # noqa: E402

app = typer.Typer(
    name="skillproof",
    help="SkillProof - evidence-backed candidate scoring and ranking",
    add_completion=False,
)
console = Console()


class Provider(str, Enum):
    """Supported extraction providers."""

    GOOGLE = "google"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# Recommendation colors as rich styles
RICH_COLORS = {"emerald": "bright_green", "green": "green", "amber": "yellow", "rose": "red"}

ProviderOption = Annotated[
    Provider | None,
    typer.Option("--provider", "-p", help="LLM provider (default from settings)"),
]


def configure_logging(level: str, verbose: bool = False) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level="DEBUG" if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def format_time(seconds: float) -> str:
    """Format seconds into human-readable time."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.0f}s"


def read_text(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def read_document(path: Path) -> CandidateDocument:
    """Read a resume file as raw bytes."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return CandidateDocument(name=path.name, content=path.read_bytes())


def load_settings(provider: Provider | None) -> Settings:
    settings = get_settings()
    if provider is not None:
        settings = settings.model_copy(update={"provider": provider.value})
    return settings


def build_orchestrator(ctx: AppContext, batch: bool = True) -> BatchOrchestrator:
    """Wire the analyzer and orchestrator from the context settings."""
    settings = ctx.settings
    llm_provider = get_llm_provider(
        settings.provider,
        model=settings.model,
        api_key=settings.extraction_api_key,
        timeout=settings.request_timeout_seconds,
    )
    analyzer = CandidateAnalyzer(
        extractor=CombinedExtractor(
            llm_provider,
            max_resume_chars=settings.max_resume_chars,
            max_jd_chars=settings.max_jd_chars,
        ),
        evidence_collector=GitHubEvidenceCollector(
            token=settings.github_token, api_url=settings.github_api_url
        ),
        link_validator=LinkValidator(timeout=settings.link_timeout_seconds),
        caches=ctx.caches,
    )
    return BatchOrchestrator(
        analyzer=analyzer,
        caches=ctx.caches,
        limiter=ctx.batch_limiter if batch else ctx.interactive_limiter,
        policy=RetryPolicy.from_settings(settings),
    )


@app.command()
def rank(
    job: Annotated[Path, typer.Argument(help="Path to the job description")],
    resumes: Annotated[list[Path], typer.Argument(help="Resume files (pdf, txt or md)")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save a markdown report")
    ] = None,
    provider: ProviderOption = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Rank many resumes against one job description."""
    settings = load_settings(provider)
    configure_logging(settings.log_level, verbose)

    console.print(
        Panel.fit(
            f"[bold blue]SkillProof[/bold blue] - Ranking {len(resumes)} candidates",
            border_style="blue",
        )
    )

    jd_text = read_text(job)
    documents = [read_document(path) for path in resumes]

    ctx = AppContext.from_settings(settings)
    orchestrator = build_orchestrator(ctx, batch=True)

    def progress_callback(done: int, total: int) -> None:
        console.print(f"  [green]OK[/green] {done}/{total} candidates")

    console.print()
    batch_job = orchestrator.run(documents, jd_text, on_progress=progress_callback)

    table = Table(title="Candidate Ranking")
    table.add_column("Rank", justify="right")
    table.add_column("Candidate")
    table.add_column("Score", justify="right")
    table.add_column("Recommendation")
    table.add_column("Status")
    table.add_column("Time", justify="right")
    for result in batch_job.candidates:
        if result.analysis:
            rec = result.analysis.recommendation
            color = RICH_COLORS.get(rec.color, "white")
            label = f"[{color}]{rec.label}[/{color}]"
        else:
            label = f"[red]{escape(result.error or '')}[/red]"
        table.add_row(
            str(result.rank),
            escape(result.name or result.candidate_id),
            str(result.score),
            label,
            result.status.value,
            format_time(result.processing_time_ms / 1000),
        )
    console.print()
    console.print(table)
    console.print(
        f"\n[bold]Total time:[/bold] {format_time(batch_job.duration_seconds)} "
        f"[dim]({batch_job.processed} analyzed, {batch_job.cached} cached, "
        f"{batch_job.failed} failed)[/dim]"
    )

    if output:
        save_markdown(format_batch_report(batch_job), output)
        console.print(f"\n[green]Report saved to:[/green] {output}")


@app.command()
def analyze(
    resume: Annotated[Path, typer.Argument(help="Path to the resume (pdf, txt or md)")],
    job: Annotated[Path, typer.Argument(help="Path to the job description")],
    provider: ProviderOption = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Analyze a single candidate against a job description."""
    settings = load_settings(provider)
    configure_logging(settings.log_level, verbose)

    console.print(
        Panel.fit(
            "[bold blue]SkillProof[/bold blue] - Analyzing candidate fit",
            border_style="blue",
        )
    )

    jd_text = read_text(job)
    document = read_document(resume)

    ctx = AppContext.from_settings(settings)
    orchestrator = build_orchestrator(ctx, batch=False)
    result = orchestrator.run([document], jd_text).candidates[0]

    if result.status is CandidateStatus.FAILED:
        console.print(f"\n[red]Error:[/red] {escape(result.error or '')}")
        raise typer.Exit(1)

    console.print()
    console.print(
        Panel(
            Markdown(format_candidate_analysis(result.analysis)),
            title=escape(result.name or document.name),
            border_style=RICH_COLORS.get(result.analysis.recommendation.color, "blue"),
        )
    )


@app.command()
def version() -> None:
    """Show version information."""
    from skillproof import __version__

    console.print(f"SkillProof v{__version__}")


if __name__ == "__main__":
    app()
