"""Pydantic models for creating records in the store.

Create payloads carry neither ids nor derived/link fields: ids are assigned by
the store, ``status``/``priority`` are derived, and ``task_id`` links are set by
the shadow task layer.
"""

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from studytrack.domain.common import Instant, Progress, Topic
from studytrack.domain.hackathon import ChecklistItem
from studytrack.domain.project import ProjectCategory, ProjectTask
from studytrack.domain.subject import Note
from studytrack.domain.task import SourceType, TaskCategory
from studytrack.domain.timetable import ClassType, DayOfWeek, validate_clock_time


class TaskCreate(BaseModel):
    """Pydantic model for creating a task record."""

    title: str = Field(..., min_length=1, description="Task title")
    category: TaskCategory = Field(..., description="Task category")
    subject: str | None = Field(default=None, description="Subject name")
    deadline: Instant = Field(..., description="Deadline instant")
    progress: Progress = 0
    description: str | None = Field(default=None, description="Optional description")
    source_type: SourceType | None = Field(default=None, description="Originating entity kind")
    source_id: str | None = Field(default=None, description="Originating entity ID")


class HandwrittenAssignmentCreate(BaseModel):
    """Pydantic model for creating a handwritten assignment."""

    subject: str = Field(..., min_length=1, description="Subject name")
    title: str = Field(..., min_length=1, description="Assignment title")
    deadline: Instant = Field(..., description="Submission deadline")
    progress: Progress = 0


class OnlineAssignmentCreate(HandwrittenAssignmentCreate):
    """Pydantic model for creating an online assignment."""

    file_name: str | None = Field(default=None, description="Uploaded file name")
    file_type: str | None = Field(default=None, description="Uploaded file type")


class ExamCreate(BaseModel):
    """Pydantic model for creating an exam."""

    subject: str = Field(..., min_length=1, description="Subject name")
    date: Instant = Field(..., description="Exam date")
    time: str = Field(..., min_length=1, description="Exam time as entered")
    topics: list[Topic] = Field(default_factory=list, description="Topics to prepare")


class ProjectCreate(BaseModel):
    """Pydantic model for creating a project."""

    name: str = Field(..., min_length=1, description="Project name")
    category: ProjectCategory = Field(..., description="Project category")
    github_url: str | None = Field(default=None, description="Repository URL")
    local_path: str | None = Field(default=None, description="Local checkout path")
    tasks: list[ProjectTask] = Field(default_factory=list, description="Ordered sub-tasks")


class SubjectCreate(BaseModel):
    """Pydantic model for creating a subject."""

    name: str = Field(..., min_length=1, description="Subject name")
    code: str = Field(..., min_length=1, description="Course code")
    topics: list[Topic] = Field(default_factory=list, description="Syllabus topics")
    notes: list[Note] = Field(default_factory=list, description="Attached notes")


class TimetableEntryCreate(BaseModel):
    """Pydantic model for creating a timetable entry."""

    subject: str = Field(..., min_length=1, description="Subject name")
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


class HackathonCreate(BaseModel):
    """Pydantic model for creating a hackathon."""

    name: str = Field(..., min_length=1, description="Hackathon name")
    start_date: Instant = Field(..., description="Start date")
    end_date: Instant = Field(..., description="End date")
    schedule: str | None = Field(default=None, description="Free-text schedule")
    checklist: list[ChecklistItem] = Field(default_factory=list, description="Preparation checklist")
