"""In-memory entity store owning every collection of the tracker.

Each collection keeps its records in insertion order and exposes the only
mutation entry points (``add``, ``update``, ``delete``). Reads hand out deep
copies so callers can never change stored records in place. The task
collection additionally passes every write through ``derive_task`` so status
and priority are always recomputed from the stored fields.
"""

import copy
import itertools
import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from studytrack.core.clock import utc_now
from studytrack.core.errors import DuplicateIdError, RecordNotFoundError
from studytrack.domain.assignment import HandwrittenAssignment, OnlineAssignment
from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import Hackathon
from studytrack.domain.project import Project
from studytrack.domain.subject import Subject
from studytrack.domain.task import Task, TaskPriority, TaskStatus
from studytrack.domain.timetable import TimetableEntry
from studytrack.services.task_derivation import derive_task


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Fields the store owns; callers can never write them through update()
_PROTECTED_FIELDS = frozenset({"id"})
_DERIVED_TASK_FIELDS = frozenset({"status", "priority"})


class Collection(Generic[RecordT]):
    """Insertion-ordered collection of records keyed by id."""

    def __init__(self, name: str, model: type[RecordT]) -> None:
        self.name = name
        self._model = model
        self._records: dict[str, RecordT] = {}
        self._issued_ids: set[str] = set()
        self._reserved_ids: set[str] = set()
        self._id_counter = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.all())

    def _next_id(self) -> str:
        # Skip ids already issued, including seeded and deleted ones
        for candidate in self._id_counter:
            record_id = str(candidate)
            if record_id not in self._issued_ids:
                return record_id
        raise AssertionError("unreachable")

    def reserve_id(self) -> str:
        """Issue an id ahead of insertion so linked records can reference it.

        The reserved id is accepted exactly once by ``insert``.
        """
        record_id = self._next_id()
        self._issued_ids.add(record_id)
        self._reserved_ids.add(record_id)
        return record_id

    def _prepare(self, record: RecordT) -> RecordT:
        """Hook applied to every record before it is stored."""
        return record

    def _merge(self, existing: RecordT, changes: Mapping[str, Any]) -> RecordT:
        writable = {key: copy.deepcopy(value) for key, value in changes.items() if key not in _PROTECTED_FIELDS}
        return self._model.model_validate({**existing.model_dump(), **writable, "id": existing.id})  # type: ignore[attr-defined]

    def insert(self, record: RecordT) -> RecordT:
        """Store a record that already carries its id (seeded records and reserved ids).

        Raises:
            DuplicateIdError: If the id was already issued in this collection
        """
        record_id: str = record.id  # type: ignore[attr-defined]
        if record_id in self._issued_ids and record_id not in self._reserved_ids:
            raise DuplicateIdError(self.name, record_id)

        stored = self._prepare(record.model_copy(deep=True))
        self._issued_ids.add(record_id)
        self._reserved_ids.discard(record_id)
        self._records[record_id] = stored
        return stored.model_copy(deep=True)

    def add(self, data: BaseModel | Mapping[str, Any]) -> RecordT:
        """Assign a fresh id, store the record and return a copy of it."""
        fields = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        fields.pop("id", None)
        record = self._model.model_validate({**fields, "id": self._next_id()})
        stored = self.insert(record)

        logger.info("Created record", extra={"collection": self.name, "record_id": stored.id})
        return stored

    def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        """Merge ``changes`` into the record; unknown ids are a silent no-op returning None."""
        existing = self._records.get(record_id)
        if existing is None:
            logger.debug("Update skipped, record not found", extra={"collection": self.name, "record_id": record_id})
            return None

        updated = self._prepare(self._merge(existing, changes))
        self._records[record_id] = updated

        logger.info("Updated record", extra={"collection": self.name, "record_id": record_id})
        return updated.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        """Remove a record; returns False (and does nothing) when the id is unknown."""
        if self._records.pop(record_id, None) is None:
            logger.debug("Delete skipped, record not found", extra={"collection": self.name, "record_id": record_id})
            return False

        logger.info("Deleted record", extra={"collection": self.name, "record_id": record_id})
        return True

    def get(self, record_id: str) -> RecordT | None:
        """Return a copy of the record, or None if the id is unknown."""
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def require(self, record_id: str) -> RecordT:
        """Return a copy of the record.

        Raises:
            RecordNotFoundError: If the id is unknown
        """
        record = self.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.name, record_id)
        return record

    def all(self) -> list[RecordT]:
        """Return copies of every record in insertion order."""
        return [record.model_copy(deep=True) for record in self._records.values()]


class TaskCollection(Collection[Task]):
    """Task collection that re-derives status and priority on every write."""

    def __init__(self, *, clock: Callable[[], datetime] = utc_now) -> None:
        super().__init__("tasks", Task)
        self._clock = clock

    def _prepare(self, record: Task) -> Task:
        return derive_task(record, now=self._clock())

    def _merge(self, existing: Task, changes: Mapping[str, Any]) -> Task:
        writable = {key: value for key, value in changes.items() if key not in _DERIVED_TASK_FIELDS}
        return super()._merge(existing, writable)

    def add(self, data: BaseModel | Mapping[str, Any]) -> Task:
        """Create a task with placeholder Pending/Low, then derive the real values."""
        fields = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        fields.update(status=TaskStatus.PENDING, priority=TaskPriority.LOW)
        return super().add(fields)

    def refresh(self, *, now: datetime | None = None) -> None:
        """Re-derive every task (status and priority drift as time passes)."""
        moment = now if now is not None else self._clock()
        for record_id, record in self._records.items():
            self._records[record_id] = derive_task(record, now=moment)


class StoreSnapshot(BaseModel):
    """Complete contents of a store; also the shape of a seed bundle."""

    tasks: list[Task] = Field(default_factory=list)
    handwritten_assignments: list[HandwrittenAssignment] = Field(default_factory=list)
    online_assignments: list[OnlineAssignment] = Field(default_factory=list)
    exams: list[Exam] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    subjects: list[Subject] = Field(default_factory=list)
    timetable: list[TimetableEntry] = Field(default_factory=list)
    hackathons: list[Hackathon] = Field(default_factory=list)


class EntityStore:
    """Owner of all tracker collections.

    There is no module-level instance: whoever needs the store receives it
    explicitly (services take ``store=`` and the web app keeps one on
    ``app.state``).
    """

    def __init__(self, *, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self.tasks = TaskCollection(clock=clock)
        self.handwritten_assignments: Collection[HandwrittenAssignment] = Collection(
            "handwritten_assignments", HandwrittenAssignment
        )
        self.online_assignments: Collection[OnlineAssignment] = Collection("online_assignments", OnlineAssignment)
        self.exams: Collection[Exam] = Collection("exams", Exam)
        self.projects: Collection[Project] = Collection("projects", Project)
        self.subjects: Collection[Subject] = Collection("subjects", Subject)
        self.timetable: Collection[TimetableEntry] = Collection("timetable", TimetableEntry)
        self.hackathons: Collection[Hackathon] = Collection("hackathons", Hackathon)

    @classmethod
    def from_seed(cls, seed: StoreSnapshot, *, clock: Callable[[], datetime] = utc_now) -> "EntityStore":
        """Build a store holding a copy of ``seed``; seeded tasks are derived on insert."""
        store = cls(clock=clock)
        for name, collection in store.collections().items():
            for record in getattr(seed, name):
                collection.insert(record)

        logger.info(
            "Seeded entity store",
            extra={name: len(collection) for name, collection in store.collections().items()},
        )
        return store

    def now(self) -> datetime:
        """Current instant according to the store's clock."""
        return self._clock()

    def collections(self) -> dict[str, Collection[Any]]:
        """Map collection names to collections, in a fixed order."""
        return {
            "tasks": self.tasks,
            "handwritten_assignments": self.handwritten_assignments,
            "online_assignments": self.online_assignments,
            "exams": self.exams,
            "projects": self.projects,
            "subjects": self.subjects,
            "timetable": self.timetable,
            "hackathons": self.hackathons,
        }

    def snapshot(self) -> StoreSnapshot:
        """Return a copy of every collection."""
        return StoreSnapshot(**{name: collection.all() for name, collection in self.collections().items()})

    def refresh_tasks(self, *, now: datetime | None = None) -> None:
        """Re-derive all task statuses and priorities against ``now``."""
        self.tasks.refresh(now=now)
