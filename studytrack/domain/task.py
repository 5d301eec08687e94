"""Task domain models and enums."""

from enum import StrEnum

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, Progress


class TaskCategory(StrEnum):
    """Fixed task classification."""

    ASSIGNMENT = "Assignment"
    LAB_FILE = "Lab File"
    CONTINUOUS_ASSESSMENT = "Continuous Assessment"
    PPT = "PPT"
    HOMEWORK = "Homework"
    PROJECT_TASK = "Project Task"
    EXAM_PREP = "Exam Prep"
    HACKATHON = "Hackathon"


class TaskStatus(StrEnum):
    """Completion status, derived from deadline and progress."""

    PENDING = "Pending"
    OVERDUE = "Overdue"
    COMPLETED = "Completed"


class TaskPriority(StrEnum):
    """Urgency level, derived from the priority score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class SourceType(StrEnum):
    """Kind of entity a shadow task was created for."""

    ASSIGNMENT = "assignment"
    EXAM = "exam"
    PROJECT = "project"
    HACKATHON = "hackathon"


class Task(BaseModel):
    """Task data transfer object.

    ``status`` and ``priority`` are derived fields; the store recomputes them on
    every write, so values supplied here are placeholders.
    """

    id: str = Field(..., description="Unique task ID assigned by the store")
    title: str = Field(..., description="Task title")
    category: TaskCategory = Field(..., description="Task category")
    subject: str | None = Field(default=None, description="Subject name (free text)")
    deadline: Instant = Field(..., description="Deadline instant")
    progress: Progress = 0
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Derived completion status")
    priority: TaskPriority = Field(default=TaskPriority.LOW, description="Derived urgency priority")
    description: str | None = Field(default=None, description="Optional free-text description")
    source_type: SourceType | None = Field(default=None, description="Originating entity kind for shadow tasks")
    source_id: str | None = Field(default=None, description="Originating entity ID for shadow tasks")

    @property
    def is_shadow(self) -> bool:
        """True if this task mirrors another entity."""
        return self.source_type is not None and self.source_id is not None
