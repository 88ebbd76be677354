"""Entry aggregation: per-project weekday hour totals and memos."""

import logging
from collections import defaultdict
from typing import Iterable, Optional

from timecard.constants import MAX_MEMO_WIDTH, WEEKDAYS
from timecard.errors import EncodingError, MalformedTimestamp
from timecard.models import AggregatedRow, Entry, SkippedEntry
from timecard.report.timefmt import elapsed_minutes, parse_timestamp

logger = logging.getLogger(__name__)

MEMO_SEPARATOR = "; \n"


def wrap_memo(memo: str, width: int = MAX_MEMO_WIDTH, legacy_bytes: bool = False) -> str:
    """Wrap a memo into fixed-width chunks.

    Every chunk that fills the full width is followed by a newline, and the
    wrapped block always ends with the "; \\n" separator so memos from
    several entries can be concatenated.

    Args:
        memo: Memo text.
        width: Chunk width (characters, or bytes in legacy mode).
        legacy_bytes: Chunk the UTF-8 encoding by byte count instead of
            by character.

    Returns:
        The wrapped memo block.

    Raises:
        EncodingError: In legacy mode, when a chunk boundary falls inside
            a multi-byte character.
    """
    if width < 1:
        raise ValueError(f"Memo width must be at least 1, got {width}")

    parts = []
    if legacy_bytes:
        data = memo.encode("utf-8")
        for offset in range(0, len(data), width):
            raw = data[offset:offset + width]
            try:
                parts.append(raw.decode("utf-8"))
            except UnicodeDecodeError:
                raise EncodingError(memo, offset) from None
            if len(raw) >= width:
                parts.append("\n")
    else:
        for offset in range(0, len(memo), width):
            chunk = memo[offset:offset + width]
            parts.append(chunk)
            if len(chunk) >= width:
                parts.append("\n")

    parts.append(MEMO_SEPARATOR)
    return "".join(parts)


def entry_minutes(entry: Entry) -> int:
    """Whole minutes an entry covers; zero or negative values pass through."""
    start = parse_timestamp(entry.start)
    stop = parse_timestamp(entry.stop)
    return elapsed_minutes(start, stop)


def aggregate(
    entries: Iterable[Entry],
    max_memo_width: int = MAX_MEMO_WIDTH,
    *,
    strict: bool = False,
    legacy_bytes: bool = False,
    skipped: Optional[list[SkippedEntry]] = None,
) -> list[AggregatedRow]:
    """Group entries by project code and total them per weekday.

    Rows are returned sorted by project code. Within a row, hours and memos
    are keyed Sun..Sat. Hours are summed as whole minutes and converted at
    the end, so totals do not depend on entry order.

    Args:
        entries: Entries for a single week.
        max_memo_width: Memo wrap width.
        strict: Raise on the first entry that cannot be aggregated instead
            of skipping it.
        legacy_bytes: Wrap memos by UTF-8 byte count.
        skipped: Optional list that receives a SkippedEntry for every entry
            left out.

    Returns:
        One AggregatedRow per distinct project code.

    Raises:
        MalformedTimestamp: In strict mode, for an unparseable start/stop.
        EncodingError: In strict legacy mode, for a memo split mid-character.
    """
    if max_memo_width < 1:
        raise ValueError(f"Memo width must be at least 1, got {max_memo_width}")

    minutes: dict[str, dict[str, int]] = defaultdict(lambda: dict.fromkeys(WEEKDAYS, 0))
    memos: dict[str, dict[str, str]] = defaultdict(lambda: dict.fromkeys(WEEKDAYS, ""))

    for entry in entries:
        try:
            entry_total = entry_minutes(entry)
            wrapped = wrap_memo(entry.memo, max_memo_width, legacy_bytes=legacy_bytes)
        except (MalformedTimestamp, EncodingError) as e:
            if strict:
                raise
            logger.warning("Skipping entry %s for %s: %s", entry.id, entry.code, e)
            if skipped is not None:
                skipped.append(SkippedEntry(entry=entry, error=e))
            continue

        minutes[entry.code][entry.week_day] += entry_total
        memos[entry.code][entry.week_day] += wrapped

    rows = []
    for code in sorted(minutes):
        rows.append(AggregatedRow(
            code=code,
            hours={day: total / 60 for day, total in minutes[code].items()},
            memos=memos[code],
        ))

    logger.debug("Aggregated %d project(s)", len(rows))
    return rows
