"""Mood entry CLI commands."""

import sys

import click
import structlog
from rich.console import Console
from rich.table import Table

from cli.utils import fmt_ts, get_components, parse_when, score_style
from mood.models import MAX_TS, MIN_TS, ts_to_iso
from mood.ranges import last_days_range, range_around

console = Console()
logger = structlog.get_logger()


@click.command()
@click.argument("score", type=int)
@click.option("-n", "--note", help="Optional note")
@click.option("--at", "when", help="When it happened (ISO date/time, default now)")
def add(score: int, note: str | None, when: str | None):
    """Record a mood SCORE from -10 to 10."""
    c = get_components()
    try:
        record = c["store"].add(score, note=note, created_ts=parse_when(when))
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    style = score_style(record.score)
    console.print(
        f"[green]Saved[/] #{record.id} [{style}]{record.score:+d}[/] at {fmt_ts(record.created_ts)}"
    )
    if when:
        overrides = c["config_model"].stats.window_days
        around = range_around(record.created_ts, "day", overrides)
        from_iso = ts_to_iso(max(MIN_TS, around.from_ts))
        to_iso = ts_to_iso(min(MAX_TS, around.to_ts))
        console.print(f"[dim]View it with: moodlog stats --from {from_iso} --to {to_iso}[/]", soft_wrap=True)


@click.command("list")
@click.option("-d", "--days", default=30, help="Lookback days")
@click.option("-n", "--limit", default=50, help="Max entries to show")
def list_entries(days: int, limit: int):
    """List recent mood entries."""
    c = get_components()
    records = c["store"].list_entries(time_range=last_days_range(days), limit=None)
    records = records[-limit:] if limit else records

    if not records:
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("When", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Note")

    for r in records:
        style = score_style(r.score)
        table.add_row(str(r.id), fmt_ts(r.created_ts), f"[{style}]{r.score:+d}[/]", (r.note or "")[:50])

    console.print(table)


@click.command()
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(entry_id: int, yes: bool):
    """Delete a mood entry by ID."""
    c = get_components()
    record = c["store"].get(entry_id)
    if record is None:
        console.print(f"[red]Not found:[/] #{entry_id}")
        sys.exit(1)

    if not yes:
        if not click.confirm(f"Delete #{entry_id} ({record.score:+d} at {fmt_ts(record.created_ts)})?"):
            return

    c["store"].delete(entry_id)
    logger.info("entries.deleted", id=entry_id)
    console.print(f"[green]Deleted:[/] #{entry_id}")
