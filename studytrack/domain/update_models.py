"""Partial update payloads.

Only fields explicitly set on a payload are applied (``exclude_unset``), so an
omitted field is left alone while an explicit ``None`` clears an optional field.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from studytrack.domain.common import Instant, Progress, Topic
from studytrack.domain.hackathon import ChecklistItem
from studytrack.domain.project import ProjectCategory, ProjectTask
from studytrack.domain.subject import Note
from studytrack.domain.task import TaskCategory
from studytrack.domain.timetable import ClassType, DayOfWeek, validate_clock_time


class PartialUpdate(BaseModel):
    """Base class for partial update payloads."""

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller set, as plain values."""
        return self.model_dump(exclude_unset=True)


class TaskUpdate(PartialUpdate):
    """Update payload for a task. Derived fields and source links are not writable."""

    title: str | None = None
    category: TaskCategory | None = None
    subject: str | None = None
    deadline: Instant | None = None
    progress: Progress | None = None
    description: str | None = None


class HandwrittenAssignmentUpdate(PartialUpdate):
    """Update payload for a handwritten assignment."""

    subject: str | None = None
    title: str | None = None
    deadline: Instant | None = None
    progress: Progress | None = None


class OnlineAssignmentUpdate(HandwrittenAssignmentUpdate):
    """Update payload for an online assignment."""

    file_name: str | None = None
    file_type: str | None = None


class ExamUpdate(PartialUpdate):
    """Update payload for an exam."""

    subject: str | None = None
    date: Instant | None = None
    time: str | None = None
    topics: list[Topic] | None = None


class ProjectUpdate(PartialUpdate):
    """Update payload for a project."""

    name: str | None = None
    category: ProjectCategory | None = None
    github_url: str | None = None
    local_path: str | None = None
    tasks: list[ProjectTask] | None = None


class SubjectUpdate(PartialUpdate):
    """Update payload for a subject."""

    name: str | None = None
    code: str | None = None
    topics: list[Topic] | None = None
    notes: list[Note] | None = None


class TimetableEntryUpdate(PartialUpdate):
    """Update payload for a timetable entry. Slot ordering is checked on the merged record."""

    subject: str | None = None
    day: DayOfWeek | None = None
    start_time: str | None = None
    end_time: str | None = None
    type: ClassType | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_times(cls, v: str | None) -> str | None:
        """Validate time format when provided."""
        return validate_clock_time(v) if v is not None else v


class HackathonUpdate(PartialUpdate):
    """Update payload for a hackathon."""

    name: str | None = None
    start_date: Instant | None = None
    end_date: Instant | None = None
    schedule: str | None = None
    checklist: list[ChecklistItem] | None = Field(default=None, description="Replacement checklist")
