"""Command-line interface for creatorscore."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from creatorscore import save_json, score_stats, scoring_rules, to_json, __version__
from creatorscore.core.exporter import load_scored, score_file
from creatorscore.config import load_config
from creatorscore.exceptions import ConfigError, SnapshotError
from creatorscore.logging import configure_logging
from creatorscore.models.breakdown import ScoredCreator

app = typer.Typer(
    name="creatorscore",
    help="Creator reputation score engine",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

SCORE_SUFFIX = ".score.json"


def version_callback(value: bool):
    if value:
        console.print(f"creatorscore version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log each computation at debug level"
    ),
):
    """creatorscore - creator reputation score engine."""
    overrides = {"log_level": "DEBUG"} if verbose else {}
    try:
        config = load_config(**overrides)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    configure_logging(config)


@app.command()
def score(
    files: list[Path] = typer.Argument(..., help="Snapshot JSON files to score"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for <name>.score.json files"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print raw JSON instead of tables"
    ),
):
    """Score one or more creator snapshot files."""
    failed = 0

    for path in files:
        try:
            result = score_file(path)
        except SnapshotError as e:
            err_console.print(f"[red]✗[/red] {path}: {escape(str(e))}")
            failed += 1
            continue

        if as_json:
            typer.echo(to_json(result))
        else:
            _print_breakdown(result)

        if output:
            filepath = output / f"{result.creator_id}{SCORE_SUFFIX}"
            save_json(result, filepath)
            if not as_json:
                console.print(f"[dim]Saved to {filepath}[/dim]")

    if failed:
        raise typer.Exit(1)


@app.command()
def stats(
    files: list[Path] = typer.Argument(
        ..., help="Snapshot JSON files or saved *.score.json results to aggregate"
    ),
):
    """Show aggregate statistics over snapshots and saved scores."""
    breakdowns = []
    for path in files:
        try:
            if path.name.endswith(SCORE_SUFFIX):
                breakdowns.append(load_scored(path).breakdown)
            else:
                breakdowns.append(score_file(path).breakdown)
        except SnapshotError as e:
            err_console.print(f"[yellow]Skipping {path}: {escape(str(e))}[/yellow]")

    if not breakdowns:
        err_console.print("[red]No valid snapshots[/red]")
        raise typer.Exit(1)

    summary = score_stats(breakdowns)

    table = Table(title="Creator score statistics", show_header=False)
    table.add_column("Metric", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Creators", str(summary.count))
    table.add_row("Mean total", f"{summary.mean_total:.2f}")
    table.add_row("Median total", f"{summary.median_total:.1f}")
    table.add_row("Min / Max", f"{summary.min_total} / {summary.max_total}")
    table.add_row("Mean profile", f"{summary.mean_profile_points:.2f}")
    table.add_row("Mean email", f"{summary.mean_email_points:.2f}")
    table.add_row("Mean connections", f"{summary.mean_connection_points:.2f}")
    table.add_row("Mean audience", f"{summary.mean_audience_points:.2f}")

    console.print(table)


@app.command()
def rules():
    """Show how points are awarded."""
    r = scoring_rules()

    table = Table(title=f"Creator score (max {r['max_total']})")
    table.add_column("Component")
    table.add_column("Rule")
    table.add_column("Max", justify="right")

    table.add_row(
        "Profile",
        f"{r['profile']['points_per_field']} per field: name, avatar, "
        f"bio ≥ {r['profile']['bio_min_length']} chars, username",
        str(r["profile"]["max_points"]),
    )
    table.add_row("Email", "Verified email", str(r["email"]["max_points"]))
    table.add_row(
        "Connections",
        f"{r['connections']['points_per_connection']} per connected platform",
        str(r["connections"]["max_points"]),
    )
    table.add_row(
        "Audience",
        f"{r['audience']['points_per_decade']} × log10(total followers)",
        str(r["audience"]["max_points"]),
    )

    console.print(table)
    console.print(f"[dim]Platforms: {', '.join(r['supported_platforms'])}[/dim]")


def _print_breakdown(result: ScoredCreator):
    """Print a score breakdown as a table."""
    b = result.breakdown

    table = Table(title=f"{result.creator_id}: {b.total}/100", show_header=False)
    table.add_column("Component", style="dim")
    table.add_column("Points", justify="right")

    table.add_row("Profile", f"{b.profile_points}/20")
    table.add_row("Email", f"{b.email_points}/10")
    table.add_row("Connections", f"{b.connection_points}/50")
    table.add_row("Audience", f"{b.audience_points}/20")
    table.add_row("[bold]Total[/bold]", f"[bold]{b.total}[/bold]")

    console.print(table)


if __name__ == "__main__":
    app()
