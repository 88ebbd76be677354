"""Entry data model."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from timecard.constants import WEEKDAYS


class Entry(BaseModel):
    """Represents one logged work interval."""

    id: Optional[int] = Field(default=None, description="Database ID")
    start: str = Field(..., description="Start timestamp (YYYY-MM-DD HH:MM:SS)")
    stop: str = Field(..., description="Stop timestamp (YYYY-MM-DD HH:MM:SS)")
    week_day: str = Field(..., description="Weekday label of start (Sun..Sat)")
    code: str = Field(..., min_length=1, description="Project code")
    memo: str = Field(default="", description="Free-text annotation")

    model_config = {"frozen": True}

    @field_validator("week_day")
    @classmethod
    def _normalize_week_day(cls, value: str) -> str:
        label = value.strip().capitalize()
        if label not in WEEKDAYS:
            raise ValueError(f"week_day must be one of {', '.join(WEEKDAYS)}")
        return label
