"""Weekly report command for timecard CLI."""

from datetime import date
from typing import Optional

import click
from click.core import ParameterSource
from rich.markup import escape
from rich.table import Table

from timecard.cli.common import console, get_config, get_data_store, print_error
from timecard.errors import TimecardError
from timecard.models import ReportTable

ROW_STYLES = {
    "even": "white",
    "odd": "magenta",
}


def to_rich_table(report_table: ReportTable, title: Optional[str] = None) -> Table:
    """Convert a rendered report into a rich Table with alternating colors."""
    table = Table(title=title, show_header=True, header_style="bold", show_lines=True)

    for index, label in enumerate(report_table.header):
        table.add_column(label, justify="left" if index == 0 else "right")

    for row in report_table.rows:
        table.add_row(*(escape(cell) for cell in row.cells), style=ROW_STYLES[row.style])

    return table


def _from_default(ctx: click.Context, name: str) -> bool:
    """True when a flag was not given on the command line."""
    return ctx.get_parameter_source(name) in (None, ParameterSource.DEFAULT)


@click.command()
@click.argument("weeks_ago", type=int, default=0, required=False)
@click.option(
    "--with-memos/--no-with-memos",
    "-m",
    default=False,
    help="Add memo rows to the report (default from config).",
)
@click.option("--width", type=click.IntRange(min=1), default=None, help="Memo wrap width.")
@click.option(
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Show hours with a fixed number of decimals.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Fail on entries that cannot be read (default from config).",
)
@click.option(
    "--legacy-bytes",
    is_flag=True,
    default=False,
    help="Wrap memos by byte count instead of by character.",
)
@click.pass_context
def week(
    ctx: click.Context,
    weeks_ago: int,
    with_memos: bool,
    width: Optional[int],
    precision: Optional[int],
    strict: bool,
    legacy_bytes: bool,
) -> None:
    """Print the weekly report.

    WEEKS_AGO selects the week: 0 is the current week, 1 last week, and
    so on. Weeks run Sunday to Saturday.

    \b
    Examples:
      timecard week          # This week
      timecard week 1 -m     # Last week with memos
      timecard week --precision 2
    """
    from timecard.report.render import format_hours
    from timecard.report.weekly import build_weekly_report

    report_config = get_config(ctx).report
    store = get_data_store(ctx)

    if precision is None:
        precision = report_config.precision
    if _from_default(ctx, "with_memos"):
        with_memos = report_config.with_memos
    if _from_default(ctx, "strict"):
        strict = report_config.strict

    try:
        report = build_weekly_report(
            store,
            today=date.today(),
            weeks_ago=weeks_ago,
            max_memo_width=width or report_config.memo_width,
            with_memos=with_memos,
            precision=precision,
            strict=strict,
            legacy_bytes=legacy_bytes,
        )
    except TimecardError as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print(f"Week Beginning: [bold]{report.window.begin.isoformat()}[/bold]")

    if not report.table.rows:
        console.print("[dim]No hours recorded for this week[/dim]")
    else:
        console.print(to_rich_table(report.table))
        console.print(
            f"[bold]Total hours:[/bold] {format_hours(report.total_hours, precision)}",
            highlight=False,
        )

    for skipped in report.skipped:
        console.print(
            f"[yellow]Skipped entry #{skipped.entry.id}[/yellow] "
            f"({escape(skipped.entry.code)}): {escape(skipped.reason)}",
            highlight=False,
        )
