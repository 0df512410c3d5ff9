"""CLI entry point for the ATS checker."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Literal

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> ats_checker/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from ats_checker.config import get_settings  # noqa: E402
from ats_checker.exceptions import InputValidationError  # noqa: E402
from ats_checker.llm.base import get_llm_provider  # noqa: E402
from ats_checker.llm.client import LangChainCompletionClient  # noqa: E402
from ats_checker.models.config import ATSConfig  # noqa: E402
from ats_checker.models.llm import LLMConfig, LLMFeatures, LLMModels  # noqa: E402
from ats_checker.models.result import ATSAnalysisResult  # noqa: E402
from ats_checker.output.markdown import format_analysis_result, save_markdown  # noqa: E402
from ats_checker.pipeline import analyze as run_analysis  # noqa: E402
from ats_checker.pipeline import analyze_async  # noqa: E402
from ats_checker.profiles import DEFAULT_PROFILES  # noqa: E402

app = typer.Typer(
    name="ats-checker",
    help="ATS Checker - explainable resume scoring against a job description",
    add_completion=False,
)
console = Console()


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def load_config(path: Path | None, profile: str | None) -> ATSConfig:
    """Load a JSON analysis config, with ``--profile`` taking precedence."""
    try:
        data = json.loads(read_file(path)) if path else {}
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Config is not valid JSON: {e}")
        raise typer.Exit(1) from e
    if profile:
        data["profile"] = profile
    try:
        return ATSConfig.model_validate(data)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid config: {e}")
        raise typer.Exit(1) from e


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def score_color(score: float) -> str:
    return "green" if score >= 70 else "yellow" if score >= 50 else "red"


def build_llm_config(
    provider: Literal["openai", "anthropic", "google"], model: str | None, timeout_ms: int | None
) -> LLMConfig:
    settings = get_settings()
    llm_provider = get_llm_provider(
        provider,
        model=model or settings.model,
        api_key=settings.api_key_for(provider),
    )
    return LLMConfig(
        client=LangChainCompletionClient(llm_provider),
        models=LLMModels(default=llm_provider.model),
        limits=settings.llm_budget,
        enable=LLMFeatures(suggestions=True),
        timeout_ms=timeout_ms or settings.llm_timeout_ms,
    )


def print_result(result: ATSAnalysisResult) -> None:
    color = score_color(result.score)
    console.print(f"\n[bold]ATS Score:[/bold] [{color}]{result.score:g}/100[/{color}]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Component")
    table.add_column("Score", justify="right")
    for name, value in result.breakdown.model_dump().items():
        table.add_row(name.capitalize(), f"{value:g}")
    console.print(table)

    if result.matched_keywords:
        console.print(f"[green]Matched:[/green] {', '.join(result.matched_keywords)}")
    if result.missing_keywords:
        console.print(f"[yellow]Missing:[/yellow] {', '.join(result.missing_keywords)}")
    if result.overused_keywords:
        console.print(f"[red]Overused:[/red] {', '.join(result.overused_keywords)}")

    if result.suggestions:
        console.print("\n[bold]Suggestions:[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  - {suggestion}")
    if result.warnings:
        console.print("\n[bold]Warnings:[/bold]")
        for warning in result.warnings:
            console.print(f"  [dim]- {warning}[/dim]")


@app.command()
def analyze(
    resume: Annotated[Path, typer.Argument(help="Path to your resume (txt or md)")],
    job: Annotated[Path, typer.Argument(help="Path to the job description")],
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON analysis config file")
    ] = None,
    profile: Annotated[
        str | None, typer.Option("--profile", help="Built-in role profile to apply")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the raw JSON result")] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save a markdown report here")
    ] = None,
    enhance: Annotated[
        bool, typer.Option("--enhance", help="Rephrase suggestions with an LLM")
    ] = False,
    provider: Annotated[
        Literal["openai", "anthropic", "google"] | None,
        typer.Option("--provider", "-p", help="LLM provider for --enhance"),
    ] = None,
    model: Annotated[str | None, typer.Option("--model", "-m", help="Model ID")] = None,
    timeout_ms: Annotated[
        int | None, typer.Option("--timeout-ms", help="Enhancement timeout in milliseconds")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Score a resume against a job description."""
    configure_logging(verbose)

    raw_resume = read_file(resume)
    raw_job = read_file(job)
    ats_config = load_config(config, profile)

    if not as_json:
        console.print(
            Panel.fit("[bold blue]ATS Checker[/bold blue] - Analyzing resume", border_style="blue")
        )

    try:
        if enhance:
            llm = build_llm_config(provider or get_settings().provider, model, timeout_ms)
            result = asyncio.run(analyze_async(raw_resume, raw_job, ats_config, llm))
        else:
            result = run_analysis(raw_resume, raw_job, ats_config)
    except InputValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        print_result(result)

    if output:
        save_markdown(format_analysis_result(result), output)
        if not as_json:
            console.print(f"\n[green]Report saved to:[/green] {output}")


@app.command()
def profiles() -> None:
    """List the built-in role profiles."""
    table = Table(title="Built-in profiles", header_style="bold")
    table.add_column("Name")
    table.add_column("Mandatory skills")
    table.add_column("Optional skills")
    table.add_column("Min years", justify="right")
    for profile in DEFAULT_PROFILES.values():
        table.add_row(
            profile.name,
            ", ".join(profile.mandatory_skills),
            ", ".join(profile.optional_skills),
            str(profile.min_experience or "-"),
        )
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from ats_checker import __version__

    console.print(f"ATS Checker v{__version__}")


if __name__ == "__main__":
    app()
