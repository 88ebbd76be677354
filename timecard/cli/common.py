"""Helpers shared by timecard CLI commands."""

import click
from rich.console import Console
from rich.markup import escape

from timecard.config import TimecardConfig

console = Console()


def get_config(ctx: click.Context) -> TimecardConfig:
    """Configuration loaded by the top-level group."""
    return ctx.find_root().obj["config"]


def get_data_store(ctx: click.Context):
    """Get the data store for the configured database."""
    from timecard.db.store import DataStore

    return DataStore(get_config(ctx).database.path)


def print_error(message: str) -> None:
    """Print a one-line error."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
