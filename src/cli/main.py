"""Moodlog command-line interface."""

import click

from cli.commands import add, delete, list_entries, serve, stats
from cli.config import load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """Moodlog - personal mood journal."""
    config = load_config_model()
    level = "DEBUG" if verbose else config.logging.level
    setup_logging(
        json_mode=json_logs or config.logging.json_mode,
        level=level,
        log_file=config.paths.log_file,
    )


cli.add_command(add)
cli.add_command(list_entries)
cli.add_command(delete)
cli.add_command(stats)
cli.add_command(serve)


if __name__ == "__main__":
    cli()
