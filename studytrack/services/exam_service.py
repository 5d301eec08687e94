"""Exam service. Exams track topic preparation and never produce tasks."""

import logging

from studytrack.core.logging import span
from studytrack.domain.create_models import ExamCreate
from studytrack.domain.exam import Exam
from studytrack.domain.update_models import ExamUpdate
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def add_exam(*, store: EntityStore, data: ExamCreate) -> Exam:
    """Create an exam."""
    with span("exam_service.add_exam"):
        exam = store.exams.add(data)
        logger.info("Created exam: %s on %s", exam.subject, exam.date.date())
        return exam


def update_exam(*, store: EntityStore, exam_id: str, updates: ExamUpdate) -> None:
    with span("exam_service.update_exam"):
        store.exams.update(exam_id, updates.changes())


def toggle_exam_topic(*, store: EntityStore, exam_id: str, topic_id: str) -> None:
    """Mark a topic studied, or unstudied if it already was."""
    exam = store.exams.get(exam_id)
    if exam is None:
        return

    topics = [
        topic.model_copy(update={"studied": not topic.studied}) if topic.id == topic_id else topic
        for topic in exam.topics
    ]
    update_exam(store=store, exam_id=exam_id, updates=ExamUpdate(topics=topics))


def delete_exam(*, store: EntityStore, exam_id: str) -> None:
    with span("exam_service.delete_exam"):
        store.exams.delete(exam_id)
