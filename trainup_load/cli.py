"""Command-line interface for the TrainUp load tool."""

import json
import logging
import sys
from datetime import timedelta

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from .config import config, Config
from .analysis.load_formula import TrainingType, compute_session_load
from .analysis.aggregation import bucket_by_day, coerce_date, week_label, weekly_loads
from .analysis.acwr import compute_daily_acwr, daily_acwr_series, format_acwr
from .analysis.zones import (
    UNDERTRAINING_BELOW,
    OPTIMAL_MAX,
    acwr_zone_labels,
    build_acwr_report,
    classify_acwr,
)
from .analysis.risk import acwr_alert, assess_load_risk
from .data import SessionImportError, load_sessions_csv

console = Console()

# Zone colors -> rich styles
ZONE_STYLES = {
    "gray": "grey50",
    "blue": "blue",
    "green": "green",
    "yellow": "yellow",
    "red": "red",
}


def _read_sessions(csv_path):
    """Load sessions or exit with an error message."""
    try:
        path = Config.get_sessions_csv(csv_path)
        return load_sessions_csv(path)
    except (SessionImportError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)


def _zone_text(classification) -> str:
    style = ZONE_STYLES.get(classification.color, "white")
    return f"[{style}]{format_acwr(classification.acwr)} {classification.status}[/{style}]"


@click.group()
def cli():
    """TrainUp - training load and ACWR analysis."""
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@cli.command("session-load")
@click.option("--rpe", type=float, required=True, help="Rate of perceived exertion (1-10)")
@click.option("--duration", type=float, required=True, help="Session duration in minutes")
@click.option("--emotional-load", type=click.IntRange(1, 5), default=3, help="Emotional load (1-5)")
@click.option(
    "--type", "training_type",
    type=click.Choice([t.value for t in TrainingType]),
    default=TrainingType.FIELD.value,
    help="Training type",
)
def session_load(rpe, duration, emotional_load, training_type):
    """Calculate the load of a single session."""
    load = compute_session_load(rpe, duration, emotional_load, training_type)
    console.print(f"Session load: [bold]{load:.0f} AU[/bold]")


@cli.command()
@click.argument("csv_path", required=False)
@click.option("--weeks", default=None, type=int, help="Number of weeks to show")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def weekly(csv_path, weeks, as_json):
    """Show weekly loads and the weekly ACWR."""
    sessions = _read_sessions(csv_path)
    loads = weekly_loads(sessions)
    report = build_acwr_report(loads)

    if as_json:
        click.echo(json.dumps(report, ensure_ascii=False))
        return

    console.print(Panel.fit("📊 Weekly Training Load", style="bold blue"))

    table = Table(title="Weekly Loads", box=box.ROUNDED)
    table.add_column("Week", style="cyan")
    table.add_column("Dates")
    table.add_column("Load (AU)", justify="right", style="magenta")

    limit = config.WEEKLY_HISTORY_WEEKS if weeks is None else weeks
    for entry in loads[:limit]:
        table.add_row(entry.week, week_label(entry.week), f"{entry.load:.0f}")

    console.print(table)
    console.print(f"\nWeekly ACWR: {_zone_text(classify_acwr(report['acwr']))}")


@cli.command()
@click.argument("csv_path", required=False)
@click.option("--date", "target", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Target date (YYYY-MM-DD), defaults to the latest session")
@click.option("--days", default=0, type=int, help="Also show the rolling series for this many days")
def daily(csv_path, target, days):
    """Show the rolling 7/28-day ACWR."""
    sessions = _read_sessions(csv_path)
    loads = bucket_by_day(sessions)
    if not loads:
        console.print("[yellow]⚠️  No sessions with load found[/yellow]")
        return

    target_date = coerce_date(target) if target else max(loads)

    if days > 0:
        table = Table(title="Rolling ACWR", box=box.ROUNDED)
        table.add_column("Date", style="cyan")
        table.add_column("Acute", justify="right")
        table.add_column("Chronic", justify="right")
        table.add_column("ACWR", justify="right")
        table.add_column("Zone")

        start = target_date - timedelta(days=days - 1)
        for point in daily_acwr_series(loads, start, target_date):
            classification = classify_acwr(point.acwr)
            table.add_row(
                point.date.isoformat(),
                "—" if point.acute is None else f"{point.acute:.0f}",
                "—" if point.chronic is None else f"{point.chronic:.0f}",
                format_acwr(point.acwr),
                classification.zone.value,
            )
        console.print(table)

    acwr = compute_daily_acwr(loads, target_date)
    console.print(f"Daily ACWR on {target_date.isoformat()}: {_zone_text(classify_acwr(acwr))}")


@cli.command()
@click.argument("csv_path", required=False)
@click.option("--date", "target", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Assessment date (YYYY-MM-DD), defaults to the latest session")
def risk(csv_path, target):
    """Show the load-derived injury risk."""
    sessions = _read_sessions(csv_path)
    assessment = assess_load_risk(sessions, target)

    style = "red" if assessment.score >= 50 else "yellow" if assessment.score > 0 else "green"
    console.print(Panel.fit(f"🚨 Load Risk Score: {assessment.score}", style=f"bold {style}"))

    for factor in assessment.factors:
        console.print(f"   • {factor}")

    alert = acwr_alert(assessment.acwr)
    if alert:
        console.print(f"[red]⚠️  {alert}[/red]")


@cli.command()
def zones():
    """Show ACWR zone boundaries."""
    labels = acwr_zone_labels()

    table = Table(title="ACWR Zones", box=box.ROUNDED)
    table.add_column("Zone")
    table.add_column("Range")
    table.add_row("[blue]Undertraining[/blue]", f"< {UNDERTRAINING_BELOW}")
    table.add_row("[green]Optimal[/green]", f"{UNDERTRAINING_BELOW} – {OPTIMAL_MAX}")
    table.add_row("[yellow]Caution[/yellow]", labels["caution"])
    table.add_row("[red]High risk[/red]", labels["high_risk"])
    console.print(table)


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")


if __name__ == "__main__":
    main()
