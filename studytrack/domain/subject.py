"""Subject domain models."""

from pydantic import BaseModel, Field

from studytrack.domain.common import Instant, Topic, new_item_id


class Note(BaseModel):
    """Lecture note attached to a subject (upload is mocked as metadata)."""

    id: str = Field(default_factory=new_item_id, description="Note ID, unique within its subject")
    title: str = Field(..., description="Note title")
    file_name: str | None = Field(default=None, description="Uploaded file name")
    upload_date: Instant = Field(..., description="When the note was added")


class Subject(BaseModel):
    """Subject data transfer object."""

    id: str = Field(..., description="Unique subject ID assigned by the store")
    name: str = Field(..., description="Subject name (e.g., 'Data Structures')")
    code: str = Field(..., description="Course code (e.g., 'CS201')")
    topics: list[Topic] = Field(default_factory=list, description="Syllabus topics")
    notes: list[Note] = Field(default_factory=list, description="Attached notes")
