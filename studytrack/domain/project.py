"""Project domain models and enums."""

from enum import StrEnum

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, new_item_id


class ProjectCategory(StrEnum):
    """Project classification."""

    SUBJECT = "Subject"
    PERSONAL = "Personal"
    MINOR = "Minor"
    MAJOR = "Major"


class ProjectTask(BaseModel):
    """Project sub-task. Gets a shadow task once it has a deadline."""

    id: str = Field(default_factory=new_item_id, description="Sub-task ID, unique within its project")
    title: str = Field(..., description="Sub-task title")
    completed: bool = Field(default=False, description="Whether the sub-task is done")
    deadline: Instant | None = Field(default=None, description="Optional deadline")
    task_id: str | None = Field(default=None, description="ID of the linked shadow task (lookup key only)")


class Project(BaseModel):
    """Project data transfer object."""

    id: str = Field(..., description="Unique project ID assigned by the store")
    name: str = Field(..., description="Project name")
    category: ProjectCategory = Field(..., description="Project category")
    github_url: str | None = Field(default=None, description="Repository URL")
    local_path: str | None = Field(default=None, description="Local checkout path")
    tasks: list[ProjectTask] = Field(default_factory=list, description="Ordered sub-tasks")
