"""Subject service: syllabus topics and lecture notes."""

import logging

from studytrack.core.logging import span
from studytrack.domain.create_models import SubjectCreate
from studytrack.domain.subject import Note, Subject
from studytrack.domain.update_models import SubjectUpdate
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def add_subject(*, store: EntityStore, data: SubjectCreate) -> Subject:
    """Create a subject."""
    with span("subject_service.add_subject"):
        subject = store.subjects.add(data)
        logger.info("Created subject: %s (%s)", subject.name, subject.code)
        return subject


def update_subject(*, store: EntityStore, subject_id: str, updates: SubjectUpdate) -> None:
    with span("subject_service.update_subject"):
        store.subjects.update(subject_id, updates.changes())


def toggle_subject_topic(*, store: EntityStore, subject_id: str, topic_id: str) -> None:
    """Mark a syllabus topic studied, or unstudied if it already was."""
    subject = store.subjects.get(subject_id)
    if subject is None:
        return

    topics = [
        topic.model_copy(update={"studied": not topic.studied}) if topic.id == topic_id else topic
        for topic in subject.topics
    ]
    update_subject(store=store, subject_id=subject_id, updates=SubjectUpdate(topics=topics))


def add_subject_note(
    *,
    store: EntityStore,
    subject_id: str,
    title: str,
    file_name: str | None = None,
) -> Note | None:
    """Attach a note to a subject, stamped with the store's current time.

    Returns:
        The new note, or None when the subject does not exist
    """
    with span("subject_service.add_subject_note"):
        subject = store.subjects.get(subject_id)
        if subject is None:
            return None

        note = Note(title=title, file_name=file_name, upload_date=store.now())
        update_subject(store=store, subject_id=subject_id, updates=SubjectUpdate(notes=[*subject.notes, note]))
        logger.info("Added note to %s: %s", subject.name, note.title)
        return note


def delete_subject(*, store: EntityStore, subject_id: str) -> None:
    with span("subject_service.delete_subject"):
        store.subjects.delete(subject_id)
