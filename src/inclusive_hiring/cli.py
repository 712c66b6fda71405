"""Command-line interface for the Inclusive Hiring Toolkit."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from inclusive_hiring.config import settings
from inclusive_hiring.analysis.bias import BiasDetector, COMPLIANCE_THRESHOLD
from inclusive_hiring.analysis.feedback import FeedbackGenerator
from inclusive_hiring.analysis.models import CandidateProfile, JobRequirements
from inclusive_hiring.postings.schema import JobPostingData, generate_google_jobs_schema
from inclusive_hiring.utils.logging import configure_logging

app = typer.Typer(
    name="ihk",
    help="Inclusive Hiring Toolkit - bias checks for job postings and candidate feedback",
    add_completion=False,
)
console = Console()

NON_COMPLIANT_EXIT_CODE = 2


@app.callback()
def main_callback() -> None:
    """Route structured logs to stderr before any command runs."""
    configure_logging(stream=sys.stderr, cache_loggers=False)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(code=1)


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(code=1)


def _load_model(model_cls, path: Path):
    try:
        return model_cls.model_validate(_read_json(path))
    except ValidationError as e:
        console.print(f"[red]Invalid {model_cls.__name__} in {path}:[/red]\n{e}")
        raise typer.Exit(code=1)


def _print_text(text: str) -> None:
    """Print generated text verbatim, brackets and colons included."""
    console.print(text, markup=False, emoji=False)


def _print_list(title: str, items) -> None:
    console.print(f"\n[bold]{title}[/bold]")
    for item in items:
        _print_text(f"  • {item}")


@app.command("check-bias")
def check_bias(
    path: Path = typer.Argument(..., help="Text file containing the job description"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
    strict: bool = typer.Option(False, help="Exit with code 2 when the posting is not compliant"),
) -> None:
    """Scan a job description for biased language."""
    description = _read_text(path)
    result = asyncio.run(BiasDetector().check_job_description(description))

    if as_json:
        console.print_json(data=result.to_dict())
    else:
        status = "[green]compliant[/green]" if result.compliant else "[red]not compliant[/red]"
        console.print(f"Bias score: [bold]{result.score}[/bold]/100 ({status}, threshold {COMPLIANCE_THRESHOLD})")

        if result.issues:
            table = Table(title="Flagged language")
            table.add_column("Category", style="cyan")
            table.add_column("Text", style="red")
            table.add_column("Severity")
            table.add_column("Suggestion", style="green")

            for issue in result.issues:
                table.add_row(
                    issue.category.value,
                    issue.matched_text,
                    issue.severity.value,
                    issue.suggested_replacement
                )
            console.print(table)

        _print_list("Suggestions", result.suggestions)

    if strict and not result.compliant:
        raise typer.Exit(code=NON_COMPLIANT_EXIT_CODE)


@app.command()
def feedback(
    candidate_file: Path = typer.Argument(..., help="JSON file with the candidate profile"),
    job_file: Path = typer.Argument(..., help="JSON file with the job requirements"),
    reason: str = typer.Option("", help="Internal rejection reason"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
) -> None:
    """Generate rejection feedback for a candidate."""
    candidate = _load_model(CandidateProfile, candidate_file)
    job = _load_model(JobRequirements, job_file)

    result = asyncio.run(FeedbackGenerator().generate_feedback(candidate, job, reason))

    if as_json:
        console.print_json(data=result.to_dict())
        return

    _print_text(result.message)
    _print_list("Strengths", result.strengths)
    _print_list("Areas for improvement", result.improvements)
    _print_list("Suggestions", result.suggestions)
    _print_text(f"\n{result.encouragement}")
    _print_list("Next steps", result.next_steps)


@app.command()
def schema(
    posting_file: Path = typer.Argument(..., help="JSON file with the job posting record"),
    job_id: Optional[str] = typer.Option(None, help="Identifier to publish instead of a generated one"),
) -> None:
    """Print the schema.org JobPosting document for a job record."""
    posting = _load_model(JobPostingData, posting_file)
    console.print_json(data=generate_google_jobs_schema(posting, job_id=job_id))


@app.command()
def serve(
    host: str = typer.Option(settings.host, help="Host to bind to"),
    port: int = typer.Option(settings.port, help="Port to bind to"),
    reload: bool = typer.Option(settings.reload, help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    console.print(f"🚀 Starting Inclusive Hiring API on {host}:{port}")
    uvicorn.run(
        "inclusive_hiring.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="Inclusive Hiring Toolkit Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    # Show non-sensitive settings
    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Log Level", settings.log_level)
    table.add_row("Analytics Enabled", str(settings.analytics_enabled))
    table.add_row("Analytics Endpoint", settings.analytics_endpoint)
    table.add_row("Mixpanel Token", "configured" if settings.mixpanel_token else "not configured")

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from inclusive_hiring import __version__
    console.print(f"Inclusive Hiring Toolkit v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
