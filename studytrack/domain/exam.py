"""Exam domain models."""

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, Topic


class Exam(BaseModel):
    """Exam data transfer object. Exams never produce shadow tasks."""

    id: str = Field(..., description="Unique exam ID assigned by the store")
    subject: str = Field(..., description="Subject name")
    date: Instant = Field(..., description="Exam date")
    time: str = Field(..., description="Exam time as entered (e.g., '10:00 AM' or '14:00')")
    topics: list[Topic] = Field(default_factory=list, description="Topics to prepare")
