"""Assignment domain models."""

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, Progress


class HandwrittenAssignment(BaseModel):
    """Handwritten assignment data transfer object."""

    id: str = Field(..., description="Unique assignment ID assigned by the store")
    subject: str = Field(..., description="Subject name")
    title: str = Field(..., description="Assignment title")
    deadline: Instant = Field(..., description="Submission deadline")
    progress: Progress = 0
    task_id: str | None = Field(default=None, description="ID of the linked shadow task (lookup key only)")


class OnlineAssignment(HandwrittenAssignment):
    """Online assignment with mock upload metadata (no file content is stored)."""

    file_name: str | None = Field(default=None, description="Uploaded file name")
    file_type: str | None = Field(default=None, description="Uploaded file type (e.g., 'PDF')")
