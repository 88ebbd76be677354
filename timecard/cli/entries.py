"""Entry commands for timecard CLI.

Handles recording new (or backdated) entries, showing the most recent
entry and deleting it.
"""

from datetime import date

import click
from rich.markup import escape
from rich.table import Table

from timecard.cli.common import console, get_config, get_data_store, print_error
from timecard.errors import TimecardError


@click.command()
@click.argument("start")
@click.argument("stop")
@click.argument("code")
@click.argument("memo", default="")
@click.option(
    "--date",
    "-b",
    "entry_date",
    default="today",
    show_default=True,
    help="Day of the entry: today, yesterday, tomorrow or YYYY-MM-DD.",
)
@click.pass_context
def entry(ctx: click.Context, start: str, stop: str, code: str, memo: str, entry_date: str) -> None:
    """Record a time entry.

    START and STOP are compact times such as 0900 and 1730.
    CODE is the project code, MEMO an optional note.

    \b
    Examples:
      timecard entry 0900 1130 20-008 "site visit"
      timecard entry 1300 1500 20-008 "report" --date yesterday
      timecard entry 0800 1200 19-165 -b 2024-01-05
    """
    from timecard.report.timefmt import build_entry, resolve_date

    store = get_data_store(ctx)

    try:
        day = resolve_date(entry_date, date.today())
        new_entry = build_entry(day, start, stop, code, memo)
    except TimecardError as e:
        print_error(str(e))
        raise SystemExit(1)

    if store.get_project(code) is None:
        console.print(
            f"[yellow]Warning:[/yellow] project code '{escape(code)}' is not in the project list.",
            highlight=False,
        )

    saved = store.add_entry(new_entry)
    console.print(
        f"[green]Entry submitted.[/green] #{saved.id} {saved.week_day} "
        f"{saved.start} - {saved.stop[11:16]} \\[{escape(saved.code)}]",
        highlight=False,
    )


@click.command()
@click.pass_context
def last(ctx: click.Context) -> None:
    """Display the most recent entry."""
    from timecard.report.aggregate import wrap_memo

    store = get_data_store(ctx)
    try:
        latest = store.get_last_entry()
    except TimecardError as e:
        print_error(str(e))
        raise SystemExit(1)

    if latest is None:
        console.print("[dim]No entries recorded yet[/dim]")
        return

    width = get_config(ctx).report.memo_width

    table = Table(show_header=True, header_style="bold")
    table.add_column("Start Time", no_wrap=True)
    table.add_column("Stop Time", no_wrap=True)
    table.add_column("Week Day")
    table.add_column("Code")
    table.add_column("Memo")

    table.add_row(
        latest.start,
        latest.stop,
        latest.week_day,
        escape(latest.code),
        escape(wrap_memo(latest.memo, width)),
    )
    console.print(table)


@click.command()
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_context
def delete(ctx: click.Context, yes: bool) -> None:
    """Delete the most recent entry."""
    store = get_data_store(ctx)

    if not yes:
        try:
            latest = store.get_last_entry()
        except TimecardError as e:
            print_error(str(e))
            raise SystemExit(1)
        if latest is not None:
            click.confirm(
                f"Delete entry {latest.start} - {latest.stop} [{latest.code}]?",
                abort=True,
            )

    try:
        deleted = store.delete_last_entry()
    except TimecardError as e:
        print_error(str(e))
        raise SystemExit(1)

    if deleted is None:
        print_error("No entries to delete.")
        raise SystemExit(1)

    console.print("Most recent entry deleted.")
