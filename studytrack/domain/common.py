"""Shared field types and nested records used across domain models."""

from datetime import datetime
from typing import Annotated
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, Field

from studytrack.core.clock import ensure_aware


# Deadlines and dates are instants; naive input is read as UTC
Instant = Annotated[datetime, AfterValidator(ensure_aware)]

Progress = Annotated[int, Field(ge=0, le=100, description="Completion percentage (0-100)")]


def new_item_id() -> str:
    """Generate an id for a nested item (topic, note, sub-task, checklist item)."""
    return uuid4().hex[:12]


class Topic(BaseModel):
    """Study topic inside an exam or a subject."""

    id: str = Field(default_factory=new_item_id, description="Topic ID, unique within its owner")
    name: str = Field(..., description="Topic name (e.g., 'Deadlocks')")
    studied: bool = Field(default=False, description="Whether the topic has been studied")
