"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from resume_maker.clients.generation_client import GenerationClient
from resume_maker.config import AppConfig, load_config
from resume_maker.export.markdown import SECTION_LABELS, render_markdown
from resume_maker.health import build_health_report
from resume_maker.logging.models import UsageLog
from resume_maker.logging.usage_store import UsageStore
from resume_maker.models.generation import GenerationOutcome, GenerationRequest
from resume_maker.models.health import HealthReport
from resume_maker.parsers.request_parser import load_request

app = typer.Typer(
    name="resume-maker",
    help="Draft resume sections with a local Ollama model.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


async def _generate(config: AppConfig, request: GenerationRequest) -> GenerationOutcome:
    async with GenerationClient(config.ollama) as client:
        return await client.generate_resume_outcome(request)


async def _health(config: AppConfig) -> HealthReport:
    async with GenerationClient(config.ollama) as client:
        return await build_health_report(client, environment=config.environment)


@app.command()
def generate(
    request_file: Path = typer.Argument(help="Request file (YAML or JSON)"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the sections to a Markdown file"),
    as_json: bool = typer.Option(False, "--json", help="Print the sections as JSON"),
    mock: bool = typer.Option(False, "--mock", help="Skip the model and use template content"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate summary, skills, experience and education sections."""
    _setup_logging(verbose)
    try:
        request = load_request(request_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    config = load_config()
    if mock:
        config = replace(config, ollama=replace(config.ollama, mock_mode=True))

    with console.status(f"Generating with {config.ollama.model}..."):
        outcome = asyncio.run(_generate(config, request))

    if config.usage.enabled:
        store = UsageStore(config.usage.resolved_db_path)
        store.save_log(
            UsageLog.from_outcome(outcome, request.template_type, config.ollama.model)
        )

    sections = outcome.sections
    if as_json:
        console.print_json(sections.model_dump_json())
    else:
        for key, label in SECTION_LABELS:
            text = getattr(sections, key)
            console.print(Panel(escape(text) if text else "[dim](empty)[/dim]", title=label))

    source_color = "green" if outcome.source == "model" else "yellow"
    console.print(
        f"[{source_color}]source: {outcome.source}[/{source_color}] | "
        f"attempts: {outcome.attempts} | {outcome.elapsed_seconds:.1f}s"
    )
    if outcome.error:
        console.print(f"[dim]fallback reason: {escape(outcome.error)}[/dim]")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(render_markdown(sections, title="Resume"), encoding="utf-8")
        console.print(f"[green]Saved: {escape(str(output))}[/green]")


@app.command()
def health(
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Check that the generation backend is reachable."""
    config = load_config()
    report = asyncio.run(_health(config))

    if as_json:
        console.print_json(report.model_dump_json())
    else:
        ollama = report.services.ollama
        color = "green" if ollama == "connected" else "red"
        console.print(Panel(
            f"status: {report.status}\n"
            f"ollama: [{color}]{ollama}[/{color}] ({config.ollama.base_url})\n"
            f"model: {config.ollama.model}\n"
            f"mock mode: {report.mock_mode}\n"
            f"environment: {report.environment}",
            title="Health",
        ))

    if report.services.ollama != "connected":
        raise typer.Exit(1)


@app.command()
def usage(
    limit: int = typer.Option(20, "--limit", "-n", help="Number of recent runs to show"),
) -> None:
    """Show recent generations and this month's stats."""
    config = load_config()
    store = UsageStore(config.usage.resolved_db_path)
    logs = store.get_logs(limit=limit)
    if not logs:
        console.print("[yellow]No generations logged yet.[/yellow]")
        return

    table = Table(title="Recent generations")
    table.add_column("Time")
    table.add_column("Template")
    table.add_column("Model")
    table.add_column("Source")
    table.add_column("Attempts", justify="right")
    table.add_column("Elapsed", justify="right")
    for log in logs:
        table.add_row(
            log.timestamp.strftime("%Y-%m-%d %H:%M"),
            log.template_type,
            log.model,
            log.source,
            str(log.attempts),
            f"{log.elapsed_seconds:.1f}s",
        )
    console.print(table)

    stats = store.get_monthly_stats()
    console.print(
        f"{stats['month']}: {stats['total_runs']} runs, "
        f"fallback rate {stats['fallback_rate']:.1f}%, "
        f"avg attempts {stats['avg_attempts']}"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
