"""Render aggregated rows into a weekly report table."""

from typing import Optional

from timecard.models import AggregatedRow, ReportRow, ReportTable

MEMO_ROW_LABEL = " "


def format_hours(value: float, precision: Optional[int] = None) -> str:
    """Format an hour total.

    Without a precision the float's own string form is used ("2.0", "1.5").
    """
    if precision is None:
        return str(value)
    return f"{value:.{precision}f}"


def render(
    rows: list[AggregatedRow],
    with_memos: bool = False,
    precision: Optional[int] = None,
) -> ReportTable:
    """Build the report table for a week.

    Projects with no positive hour total get no hour row. When with_memos
    is set, a project with any memo text gets a memo row right after its
    hour row. Both rows of a project share a style that alternates
    between consecutive projects.

    Args:
        rows: Aggregated rows, in display order.
        with_memos: Include memo rows.
        precision: Fixed number of decimals for hours, or None for the
            natural float form.

    Returns:
        ReportTable with the header and project rows.
    """
    if precision is not None and precision < 0:
        raise ValueError(f"Precision must be zero or positive, got {precision}")

    table = ReportTable()
    position = 0

    for row in rows:
        show_hours = row.has_hours()
        show_memos = with_memos and row.has_memos()
        if not (show_hours or show_memos):
            continue

        style = "odd" if position % 2 else "even"
        position += 1

        if show_hours:
            table.rows.append(ReportRow(
                cells=[row.code] + [format_hours(h, precision) for h in row.hours.values()],
                kind="hours",
                style=style,
            ))
        if show_memos:
            table.rows.append(ReportRow(
                cells=[MEMO_ROW_LABEL] + list(row.memos.values()),
                kind="memos",
                style=style,
            ))

    return table
