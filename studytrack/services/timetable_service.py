"""Timetable service for weekly class slots."""

import logging

from studytrack.core.logging import span
from studytrack.domain.create_models import TimetableEntryCreate
from studytrack.domain.timetable import TimetableEntry
from studytrack.domain.update_models import TimetableEntryUpdate
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def add_timetable_entry(*, store: EntityStore, data: TimetableEntryCreate) -> TimetableEntry:
    """Create a timetable slot."""
    with span("timetable_service.add_timetable_entry"):
        entry = store.timetable.add(data)
        logger.info("Created class: %s %s %s-%s", entry.subject, entry.day, entry.start_time, entry.end_time)
        return entry


def update_timetable_entry(*, store: EntityStore, entry_id: str, updates: TimetableEntryUpdate) -> None:
    """Update a slot.

    Raises:
        pydantic.ValidationError: If the merged slot would end before it starts
    """
    with span("timetable_service.update_timetable_entry"):
        store.timetable.update(entry_id, updates.changes())


def delete_timetable_entry(*, store: EntityStore, entry_id: str) -> None:
    with span("timetable_service.delete_timetable_entry"):
        store.timetable.delete(entry_id)
