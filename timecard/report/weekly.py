"""Weekly report pipeline: resolve week, fetch, aggregate, render."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from timecard.constants import MAX_MEMO_WIDTH
from timecard.db.base import EntrySource
from timecard.models import AggregatedRow, ReportTable, SkippedEntry, WeekWindow
from timecard.report.aggregate import aggregate
from timecard.report.render import render
from timecard.report.week import resolve_week

logger = logging.getLogger(__name__)


@dataclass
class WeeklyReport:
    """Result of one weekly report run."""

    window: WeekWindow
    rows: list[AggregatedRow]
    table: ReportTable
    skipped: list[SkippedEntry] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        # Bucket hours are always whole minutes over 60.
        minutes = sum(round(hours * 60) for row in self.rows for hours in row.hours.values())
        return minutes / 60


def build_weekly_report(
    source: EntrySource,
    today: date,
    weeks_ago: int = 0,
    max_memo_width: int = MAX_MEMO_WIDTH,
    with_memos: bool = False,
    precision: Optional[int] = None,
    strict: bool = False,
    legacy_bytes: bool = False,
) -> WeeklyReport:
    """Produce the report for the week ``weeks_ago`` weeks before today's.

    Entries are fetched once for the half-open range from the window's
    Sunday midnight to the following Sunday midnight.

    Raises:
        InvalidOffset: If weeks_ago is negative.
        MalformedTimestamp, EncodingError: Only in strict mode.
    """
    window = resolve_week(today, weeks_ago)
    entries = source.get_entries_between(window.start_timestamp, window.stop_timestamp)
    logger.debug(
        "Fetched %d entries for week %s..%s", len(entries), window.begin, window.end
    )

    skipped: list[SkippedEntry] = []
    rows = aggregate(
        entries,
        max_memo_width,
        strict=strict,
        legacy_bytes=legacy_bytes,
        skipped=skipped,
    )
    table = render(rows, with_memos=with_memos, precision=precision)
    return WeeklyReport(window=window, rows=rows, table=table, skipped=skipped)
