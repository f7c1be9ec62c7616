"""
SkillMatch Command Line Interface

Provides CLI commands for ranking candidates against job requests and
ad-hoc skill searches read from JSON files.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from skillmatch.data.models import Match

app = typer.Typer(
    name="skillmatch",
    help="Candidate ranking engine CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main():
    """Rank candidates against job requests and skill searches."""
    from skillmatch.utils.logger import setup_logging

    setup_logging()


def _print_matches(matches: list[Match], title: str, limit: Optional[int], as_json: bool) -> None:
    """Render matches as a table or as JSON."""
    if limit is not None:
        matches = matches[:limit]

    if as_json:
        typer.echo(json.dumps([m.model_dump(mode="json") for m in matches], indent=2))
        return

    if not matches:
        console.print("[yellow]No matching candidates found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Matching Skills", style="magenta")

    for rank, match in enumerate(matches, start=1):
        table.add_row(
            str(rank),
            str(match.candidate_id),
            match.candidate.name or "-",
            f"{match.score:.2f}",
            ", ".join(match.matching_skills) or "-",
        )

    console.print(table)


@app.command()
def version():
    """Show application version."""
    from skillmatch import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective configuration."""
    from skillmatch.utils.config import get_settings

    settings = get_settings()

    table = Table(title="SkillMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Default Proficiency", str(settings.matching.default_proficiency_level))
    table.add_row("Default Years Experience", str(settings.matching.default_years_experience))
    table.add_row("Use Candidate Skill Values", str(settings.matching.use_candidate_skill_values))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match(
    requirement_file: Path = typer.Argument(..., help="JSON job request or requirement"),
    candidates_file: Path = typer.Argument(..., help="JSON array of candidates"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N matches"),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
):
    """Rank candidates against a job request."""
    from skillmatch.core.matching import get_match_engine
    from skillmatch.data.loaders import DataLoadError, load_candidates, load_requirement

    try:
        requirement = load_requirement(requirement_file)
        candidates = load_candidates(candidates_file)
    except DataLoadError as e:
        console.print(f"[red]Error: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    matches = get_match_engine().find_matches(requirement, candidates)

    title = getattr(requirement, "title", None) or f"Requirement {requirement.id}"
    _print_matches(matches, f"Matches for {title}", limit, as_json)


@app.command()
def search(
    candidates_file: Path = typer.Argument(..., help="JSON array of candidates"),
    required: Optional[list[str]] = typer.Option(None, "--required", "-r", help="Required skill (repeatable)"),
    preferred: Optional[list[str]] = typer.Option(None, "--preferred", "-p", help="Preferred skill (repeatable)"),
    department: Optional[str] = typer.Option(None, "--department", "-d", help="Department"),
    level: Optional[str] = typer.Option(None, "--level", "-l", help="Experience level"),
    location: Optional[str] = typer.Option(None, "--location", help="Location"),
    min_score: Optional[float] = typer.Option(None, "--min-score", "-m", help="Minimum match score"),
    query_file: Optional[Path] = typer.Option(None, "--query-file", "-q", help="JSON search query"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N matches"),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
):
    """Search candidates by skills and attributes."""
    from skillmatch.core.matching import get_match_engine
    from skillmatch.data.loaders import DataLoadError, load_candidates, load_search_query
    from skillmatch.data.models import SearchQuery

    try:
        query = load_search_query(query_file) if query_file else SearchQuery()
        candidates = load_candidates(candidates_file)
    except DataLoadError as e:
        console.print(f"[red]Error: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    # Command line options override the query file
    overrides = {
        "required_skills": required,
        "preferred_skills": preferred,
        "department": department,
        "experience_level": level,
        "location": location,
        "min_match_score": min_score,
    }
    query = SearchQuery.model_validate(
        {**query.model_dump(), **{k: v for k, v in overrides.items() if v not in (None, [], ())}}
    )

    matches = get_match_engine().search_candidates(query, candidates)
    _print_matches(matches, "Search Results", limit, as_json)


if __name__ == "__main__":
    app()
