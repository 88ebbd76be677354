"""Tests for the weekly report pipeline.

**Feature: weekly-report**
"""

from datetime import date, datetime

import pytest

from timecard.db.base import EntrySource
from timecard.errors import InvalidOffset, MalformedTimestamp
from timecard.models import Entry
from timecard.report.timefmt import parse_timestamp
from timecard.report.weekly import build_weekly_report


class ListSource(EntrySource):
    """In-memory entry source that records the ranges it was asked for."""

    def __init__(self, entries: list[Entry]):
        self.entries = entries
        self.calls: list[tuple[datetime, datetime]] = []

    def get_entries_between(self, start: datetime, end: datetime) -> list[Entry]:
        self.calls.append((start, end))
        return [e for e in self.entries if start <= parse_timestamp(e.start) < end]


SCENARIO = [
    Entry(
        id=1,
        start="2024-01-07 09:00:00",
        stop="2024-01-07 11:00:00",
        week_day="Sun",
        code="20-008",
        memo="kickoff",
    ),
    Entry(
        id=2,
        start="2024-01-08 09:00:00",
        stop="2024-01-08 10:00:00",
        week_day="Mon",
        code="20-008",
        memo="",
    ),
    Entry(
        id=3,
        start="2024-01-03 09:00:00",
        stop="2024-01-03 17:00:00",
        week_day="Wed",
        code="19-165",
        memo="previous week",
    ),
]


class TestBuildWeeklyReport:
    """Resolve, fetch, aggregate and render in one call."""

    def test_current_week(self):
        source = ListSource(SCENARIO)

        report = build_weekly_report(source, today=date(2024, 1, 10))

        assert report.window.begin == date(2024, 1, 7)
        assert source.calls == [(datetime(2024, 1, 7), datetime(2024, 1, 14))]
        assert report.table.as_lists() == [
            ["Project", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
            ["20-008", "2.0", "1.0", "0.0", "0.0", "0.0", "0.0", "0.0"],
        ]
        assert report.total_hours == 3.0
        assert report.skipped == []

    def test_last_week(self):
        report = build_weekly_report(ListSource(SCENARIO), today=date(2024, 1, 10), weeks_ago=1)

        assert report.window.begin == date(2023, 12, 31)
        assert [row.code for row in report.rows] == ["19-165"]
        assert report.table.rows[0].cells[4] == "8.0"

    def test_with_memos(self):
        report = build_weekly_report(
            ListSource(SCENARIO), today=date(2024, 1, 10), with_memos=True
        )

        memo_row = report.table.rows[1]
        assert memo_row.kind == "memos"
        assert memo_row.cells[1] == "kickoff; \n"
        assert memo_row.cells[2] == "; \n"

    def test_precision(self):
        report = build_weekly_report(
            ListSource(SCENARIO), today=date(2024, 1, 10), precision=2
        )
        assert report.table.rows[0].cells[1] == "2.00"

    def test_empty_week(self):
        report = build_weekly_report(ListSource(SCENARIO), today=date(2024, 1, 10), weeks_ago=5)
        assert report.rows == []
        assert report.table.rows == []
        assert report.total_hours == 0

    def test_negative_offset(self):
        source = ListSource(SCENARIO)
        with pytest.raises(InvalidOffset):
            build_weekly_report(source, today=date(2024, 1, 10), weeks_ago=-2)
        assert source.calls == []

    def test_skipped_entries_reported(self):
        broken = Entry(
            id=9,
            start="2024-01-09 09:00:00",
            stop="half past ten",
            week_day="Tue",
            code="20-008",
            memo="",
        )
        report = build_weekly_report(ListSource(SCENARIO + [broken]), today=date(2024, 1, 10))

        assert [s.entry.id for s in report.skipped] == [9]
        assert report.total_hours == 3.0

    def test_strict_propagates(self):
        broken = Entry(
            id=9,
            start="2024-01-09 09:00:00",
            stop="half past ten",
            week_day="Tue",
            code="20-008",
            memo="",
        )
        with pytest.raises(MalformedTimestamp):
            build_weekly_report(
                ListSource(SCENARIO + [broken]), today=date(2024, 1, 10), strict=True
            )

    def test_total_hours_sums_minutes_exactly(self):
        entries = [
            Entry(
                id=i,
                start=f"2024-01-0{day} 09:00:00",
                stop=f"2024-01-0{day} 09:06:00",
                week_day=label,
                code="20-008",
                memo="",
            )
            for i, (day, label) in enumerate([(7, "Sun"), (8, "Mon"), (9, "Tue")], start=1)
        ]

        report = build_weekly_report(ListSource(entries), today=date(2024, 1, 10))

        assert report.total_hours == 0.3
