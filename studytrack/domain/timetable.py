"""Timetable domain models and enums."""

import re
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator


_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class ClassType(StrEnum):
    """Kind of scheduled class."""

    LECTURE = "Lecture"
    LAB = "Lab"
    TUTORIAL = "Tutorial"


class DayOfWeek(StrEnum):
    """Teaching days. Sunday is intentionally absent."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


def validate_clock_time(v: str) -> str:
    """Validate a zero-padded 24h "HH:MM" string (lexical order == time order)."""
    if not _TIME_PATTERN.match(v):
        msg = f"Time must be zero-padded 24h HH:MM (e.g., '09:00'), got {v!r}"
        raise ValueError(msg)
    return v


class TimetableEntry(BaseModel):
    """Weekly timetable slot. Never produces shadow tasks."""

    id: str = Field(..., description="Unique entry ID assigned by the store")
    subject: str = Field(..., description="Subject name")
    day: DayOfWeek = Field(..., description="Day of the week")
    start_time: str = Field(..., description="Start time, HH:MM")
    end_time: str = Field(..., description="End time, HH:MM")
    type: ClassType = Field(..., description="Lecture, Lab or Tutorial")

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_times(cls, v: str) -> str:
        """Validate time format."""
        return validate_clock_time(v)

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Validate that the slot ends after it starts."""
        if self.end_time <= self.start_time:
            msg = "end_time must be after start_time"
            raise ValueError(msg)
        return self
