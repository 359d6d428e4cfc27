"""CLI entry point for Cover Lens."""

import sys
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
load_dotenv(Path.cwd() / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from cover_lens.analyser import CoverLetterAnalyser  # noqa: E402
from cover_lens.config import configure_logging, get_settings  # noqa: E402
from cover_lens.exceptions import ConfigurationError, InputTooLargeError  # noqa: E402
from cover_lens.models.analysis import CoverLetterAnalysis, ScoreTone  # noqa: E402
from cover_lens.models.lexicon import Severity  # noqa: E402
from cover_lens.models.roles import AIRole  # noqa: E402
from cover_lens.output.markdown import (  # noqa: E402
    DIMENSION_TITLES,
    format_analysis,
    save_markdown,
)
from cover_lens.scoring.aggregate import DIMENSION_WEIGHTS  # noqa: E402
from cover_lens.utils.text import enforce_size_limit  # noqa: E402

TONE_STYLES = {
    ScoreTone.SUCCESS: "green",
    ScoreTone.INFO: "blue",
    ScoreTone.WARNING: "yellow",
    ScoreTone.DANGER: "red",
}

SEVERITY_STYLES = {
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}

app = typer.Typer(
    name="cover-lens",
    help="Cover Lens - rule-based scoring for AI/ML cover letters",
    add_completion=False,
)
console = Console()


def read_letter(path: Path) -> str:
    """Read letter text from a file, or from stdin when path is '-'."""
    if str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        console.print(f"[red]Error:[/red] Letter is not valid UTF-8: {path}")
        raise typer.Exit(1) from e


def render_analysis(analysis: CoverLetterAnalysis) -> None:
    """Print an analysis to the console."""
    style = TONE_STYLES[analysis.label.tone]
    console.print(
        Panel.fit(
            f"[bold {style}]{analysis.overall_percentage}%[/bold {style}] "
            f"[{style}]{analysis.label.label}[/{style}]",
            title="Overall Score",
            border_style=style,
        )
    )

    table = Table(title="Score Breakdown", show_lines=False)
    table.add_column("Dimension")
    table.add_column("Score", justify="right")
    table.add_column("Weight", justify="right")
    for field, title in DIMENSION_TITLES.items():
        result = getattr(analysis, field)
        table.add_row(
            title, f"{result.score}/{result.max_score}", f"{DIMENSION_WEIGHTS[field]:.0%}"
        )
    console.print(table)

    stats = analysis.stats
    console.print(
        f"[dim]{stats.word_count} words, {stats.paragraph_count} paragraphs, "
        f"{stats.sentence_count} sentences, {stats.character_count} characters[/dim]"
    )

    if analysis.keywords.found_keywords:
        found = ", ".join(m.keyword for m in analysis.keywords.found_keywords)
        console.print(f"\n[bold]Keywords found:[/bold] {found}")
    if analysis.action_verbs.found_verbs:
        console.print(f"[bold]Action verbs:[/bold] {', '.join(analysis.action_verbs.found_verbs)}")

    if analysis.red_flags:
        console.print("\n[bold]Red flags:[/bold]")
        for flag in analysis.red_flags:
            flag_style = SEVERITY_STYLES[flag.severity]
            console.print(
                f"  [{flag_style}]{flag.severity.value.upper():<6}[/{flag_style}] {flag.message}"
            )

    if analysis.recommendations:
        console.print("\n[bold]Recommendations:[/bold]")
        for i, recommendation in enumerate(analysis.recommendations, 1):
            console.print(f"  {i}. {recommendation}")


@app.command()
def analyse(
    letter: Annotated[
        Path, typer.Argument(help="Path to the cover letter (txt or md), or - for stdin")
    ],
    role: Annotated[
        AIRole | None,
        typer.Option("--role", "-r", help="Target role for role-specific keywords"),
    ] = None,
    company: Annotated[
        str | None, typer.Option("--company", "-c", help="Company name to look for")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save a Markdown report to this path")
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the full analysis as JSON")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Score a cover letter and suggest improvements."""
    try:
        settings = get_settings()
        configure_logging("DEBUG" if verbose else settings.log_level)
        analyser = CoverLetterAnalyser()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    raw_text = read_letter(letter)
    try:
        text = enforce_size_limit(raw_text, settings.max_input_chars, settings.oversize_policy)
    except InputTooLargeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if len(text) < len(raw_text) and not as_json:
        console.print(
            f"[yellow]Letter truncated to {settings.max_input_chars} characters[/yellow]"
        )

    analysis = analyser.analyse(text, role=role, company_name=company)

    if as_json:
        typer.echo(analysis.model_dump_json(indent=2))
    else:
        render_analysis(analysis)

    if output:
        save_markdown(format_analysis(analysis), output)
        if not as_json:
            console.print(f"\n[green]Report saved to:[/green] {output}")


@app.command()
def roles() -> None:
    """List the supported target roles."""
    for role in AIRole:
        console.print(f"- {role.value}")


@app.command()
def version() -> None:
    """Show version information."""
    from cover_lens import __version__

    console.print(f"Cover Lens v{__version__}")


if __name__ == "__main__":
    app()
