"""Weekly report data models."""

from datetime import date, datetime, time, timedelta
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from timecard.constants import WEEKDAYS
from timecard.errors import TimecardError
from timecard.models.entry import Entry


def _zero_hours() -> dict[str, float]:
    return {day: 0.0 for day in WEEKDAYS}


def _empty_memos() -> dict[str, str]:
    return {day: "" for day in WEEKDAYS}


class WeekWindow(BaseModel):
    """A Sunday-to-Saturday calendar week."""

    begin: date = Field(..., description="First day of the week (a Sunday)")
    end: date = Field(..., description="Last day of the week (begin + 6 days)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_span(self) -> "WeekWindow":
        if self.end - self.begin != timedelta(days=6):
            raise ValueError("week window must span exactly seven days")
        return self

    @property
    def start_timestamp(self) -> datetime:
        """Inclusive lower bound for entry start times."""
        return datetime.combine(self.begin, time.min)

    @property
    def stop_timestamp(self) -> datetime:
        """Exclusive upper bound for entry start times (midnight after end)."""
        return datetime.combine(self.end + timedelta(days=1), time.min)

    def contains(self, day: date) -> bool:
        return self.begin <= day <= self.end

    def days(self) -> list[date]:
        return [self.begin + timedelta(days=i) for i in range(7)]


class AggregatedRow(BaseModel):
    """Per-project weekday hour totals and memos for one week."""

    code: str = Field(..., description="Project code")
    hours: dict[str, float] = Field(default_factory=_zero_hours)
    memos: dict[str, str] = Field(default_factory=_empty_memos)

    def has_hours(self) -> bool:
        return any(value > 0 for value in self.hours.values())

    def has_memos(self) -> bool:
        return any(memo for memo in self.memos.values())

    def total_hours(self) -> float:
        return sum(self.hours.values())


class SkippedEntry(BaseModel):
    """An entry left out of a report, with the error that excluded it."""

    entry: Entry
    error: TimecardError

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def reason(self) -> str:
        return str(self.error)


class ReportRow(BaseModel):
    """A single rendered table row."""

    cells: list[str] = Field(..., min_length=8, max_length=8)
    kind: Literal["hours", "memos"] = Field(..., description="Row content type")
    style: Literal["even", "odd"] = Field(
        ..., description="Alternating emphasis by project position"
    )

    model_config = {"frozen": True}


class ReportTable(BaseModel):
    """Rendered weekly table: header plus project rows."""

    header: list[str] = Field(default_factory=lambda: ["Project", *WEEKDAYS])
    rows: list[ReportRow] = Field(default_factory=list)

    def as_lists(self) -> list[list[str]]:
        """Header followed by every row's cells."""
        return [list(self.header)] + [list(row.cells) for row in self.rows]
