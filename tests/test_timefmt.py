"""Tests for time parsing and formatting helpers.

**Feature: timecard**
"""

from datetime import date, datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from timecard.constants import WEEKDAYS
from timecard.errors import InvalidDateInput, InvalidTimeInput, MalformedTimestamp
from timecard.report.timefmt import (
    build_entry,
    elapsed_hours,
    elapsed_minutes,
    format_timestamp,
    parse_entry_time,
    parse_timestamp,
    resolve_date,
    weekday_index,
    weekday_label,
)


class TestParseEntryTime:
    """Compact HHMM input is split into hour and minute."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0900", (9, 0)),
            ("900", (9, 0)),
            ("1730", (17, 30)),
            ("0000", (0, 0)),
            ("2359", (23, 59)),
            ("5", (0, 5)),
        ],
    )
    def test_valid_times(self, value: str, expected: tuple[int, int]):
        assert parse_entry_time(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "12:30", "2400", "0960", "12345", "-100", "9.5"],
    )
    def test_invalid_times(self, value: str):
        with pytest.raises(InvalidTimeInput):
            parse_entry_time(value)

    @given(
        hour=st.integers(min_value=0, max_value=23),
        minute=st.integers(min_value=0, max_value=59),
    )
    @settings(max_examples=50)
    def test_formatted_time_parses_back(self, hour: int, minute: int):
        """
        *For any* valid hour and minute, the zero-padded HHMM string
        parses to the same pair.
        """
        assert parse_entry_time(f"{hour:02}{minute:02}") == (hour, minute)


class TestTimestamps:
    """Canonical 'YYYY-MM-DD HH:MM:SS' timestamps."""

    def test_format_timestamp(self):
        assert format_timestamp(date(2024, 1, 7), 9, 0) == "2024-01-07 09:00:00"
        assert format_timestamp(date(2024, 11, 23), 17, 5) == "2024-11-23 17:05:00"

    def test_parse_timestamp(self):
        assert parse_timestamp("2024-01-07 09:30:15") == datetime(2024, 1, 7, 9, 30, 15)

    @pytest.mark.parametrize(
        "value",
        ["2024-01-07", "garbage", "2024-13-01 00:00:00", "07/01/2024 09:00:00", ""],
    )
    def test_malformed_timestamp(self, value: str):
        with pytest.raises(MalformedTimestamp) as excinfo:
            parse_timestamp(value)
        assert excinfo.value.value == value

    def test_elapsed(self):
        start = parse_timestamp("2024-01-07 09:00:00")
        stop = parse_timestamp("2024-01-07 11:30:00")
        assert elapsed_minutes(start, stop) == 150
        assert elapsed_hours(start, stop) == 2.5

    def test_elapsed_negative_passes_through(self):
        start = parse_timestamp("2024-01-07 11:00:00")
        stop = parse_timestamp("2024-01-07 10:00:00")
        assert elapsed_hours(start, stop) == -1.0

    def test_elapsed_ignores_partial_minutes(self):
        start = parse_timestamp("2024-01-07 09:00:00")
        stop = parse_timestamp("2024-01-07 09:01:59")
        assert elapsed_minutes(start, stop) == 1


class TestWeekdayLabels:
    """Sunday-based weekday labels."""

    def test_known_dates(self):
        assert weekday_label(date(2024, 1, 7)) == "Sun"
        assert weekday_label(date(2024, 1, 8)) == "Mon"
        assert weekday_label(date(2024, 1, 13)) == "Sat"

    def test_index_order(self):
        assert [weekday_index(label) for label in WEEKDAYS] == list(range(7))

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            weekday_index("Funday")

    @given(day=st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31)))
    @settings(max_examples=100)
    def test_next_day_is_next_label(self, day: date):
        """
        *For any* date, the following day carries the next label in the
        Sun..Sat cycle.
        """
        current = weekday_index(weekday_label(day))
        following = weekday_index(weekday_label(day + timedelta(days=1)))
        assert following == (current + 1) % 7


class TestResolveDate:
    """Date arguments relative to today."""

    TODAY = date(2024, 1, 10)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("today", date(2024, 1, 10)),
            ("yesterday", date(2024, 1, 9)),
            ("tomorrow", date(2024, 1, 11)),
            ("Yesterday", date(2024, 1, 9)),
            ("2023-12-31", date(2023, 12, 31)),
        ],
    )
    def test_valid_dates(self, value: str, expected: date):
        assert resolve_date(value, self.TODAY) == expected

    @pytest.mark.parametrize("value", ["someday", "2024-02-30", "31/12/2023", ""])
    def test_invalid_dates(self, value: str):
        with pytest.raises(InvalidDateInput):
            resolve_date(value, self.TODAY)


class TestBuildEntry:
    """Entries built from compact input."""

    def test_build_entry(self):
        entry = build_entry(date(2024, 1, 7), "0900", "1130", "20-008", "survey")

        assert entry.id is None
        assert entry.start == "2024-01-07 09:00:00"
        assert entry.stop == "2024-01-07 11:30:00"
        assert entry.week_day == "Sun"
        assert entry.code == "20-008"
        assert entry.memo == "survey"

    def test_build_entry_rejects_bad_time(self):
        with pytest.raises(InvalidTimeInput):
            build_entry(date(2024, 1, 7), "0900", "25:00", "20-008", "")

    @given(day=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)))
    @settings(max_examples=50)
    def test_week_day_matches_start(self, day: date):
        """
        *For any* day, the built entry's weekday label agrees with its
        start timestamp.
        """
        entry = build_entry(day, "0800", "0900", "X", "")
        assert entry.week_day == weekday_label(parse_timestamp(entry.start).date())
