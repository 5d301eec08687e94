"""Hackathon domain models."""

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, new_item_id


class ChecklistItem(BaseModel):
    """Hackathon preparation checklist item."""

    id: str = Field(default_factory=new_item_id, description="Item ID, unique within its hackathon")
    label: str = Field(..., description="Checklist item label")
    completed: bool = Field(default=False, description="Whether the item is done")


class Hackathon(BaseModel):
    """Hackathon data transfer object."""

    id: str = Field(..., description="Unique hackathon ID assigned by the store")
    name: str = Field(..., description="Hackathon name")
    start_date: Instant = Field(..., description="Start date")
    end_date: Instant = Field(..., description="End date (deadline of the shadow task)")
    schedule: str | None = Field(default=None, description="Free-text schedule (e.g., '9:00 AM - 6:00 PM')")
    checklist: list[ChecklistItem] = Field(default_factory=list, description="Preparation checklist")
    task_id: str | None = Field(default=None, description="ID of the linked shadow task (lookup key only)")
