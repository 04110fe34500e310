"""Mood statistics CLI command."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, parse_when, score_style
from mood.models import MS_PER_DAY
from mood.ranges import next_granularity, open_range, window_days_for
from shared_types import Granularity

console = Console()

_BAR_WIDTH = 10


def _granularity_for(from_, to, time_range) -> Granularity:
    if from_ and to and not time_range.inverted:
        span_days = (time_range.to_ts - time_range.from_ts) / MS_PER_DAY
        return next_granularity(Granularity.DAY, span_days)
    return Granularity.DAY


def _bar(avg: float) -> str:
    """Centered bar: left of the middle for negative moods, right for positive."""
    filled = round(abs(avg) / 10 * _BAR_WIDTH)
    if avg < 0:
        return " " * (_BAR_WIDTH - filled) + "█" * filled + "|" + " " * _BAR_WIDTH
    return " " * _BAR_WIDTH + "|" + "█" * filled + " " * (_BAR_WIDTH - filled)


@click.command()
@click.option(
    "-g",
    "--granularity",
    type=click.Choice([str(g) for g in Granularity]),
    help="Bucket size (default: picked from the --from/--to span, else day)",
)
@click.option("-d", "--days", type=int, help="Lookback days (default depends on granularity)")
@click.option("--from", "from_", help="Range start (ISO date/time)")
@click.option("--to", help="Range end (ISO date/time)")
def stats(granularity: str | None, days: int | None, from_: str | None, to: str | None):
    """Show averaged mood per day, week or month."""
    c = get_components()
    overrides = c["config_model"].stats.window_days
    time_range = open_range(parse_when(from_), parse_when(to))
    if granularity is None:
        granularity = str(_granularity_for(from_, to, time_range))
    result = c["store"].summarize(
        time_range=time_range,
        granularity=granularity,
        days=days,
        default_window_days=window_days_for(granularity, overrides),
    )

    if result.count == 0:
        console.print("[yellow]No entries in range.[/]")
        return

    table = Table(show_header=True, title=f"Mood by {granularity}")
    table.add_column("Bucket", style="cyan")
    table.add_column("Avg", justify="right")
    table.add_column("Min", justify="right", style="dim")
    table.add_column("Max", justify="right", style="dim")
    table.add_column("N", justify="right", style="dim")
    table.add_column("")

    for b in result.series:
        style = score_style(b.avg)
        table.add_row(
            b.key,
            f"[{style}]{b.avg:+.1f}[/]",
            f"{b.min:+d}",
            f"{b.max:+d}",
            str(b.count),
            f"[{style}]{_bar(b.avg)}[/]",
        )

    console.print(table)
    console.print(
        f"\n[bold]Average:[/] {result.avg:+.2f}  |  Min: {result.min:+d}  |  "
        f"Max: {result.max:+d}  |  Entries: {result.count}"
    )
