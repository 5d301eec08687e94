"""Unit tests for exam_service module."""

from datetime import timedelta

import pytest

from studytrack.domain.common import Topic
from studytrack.domain.create_models import ExamCreate
from studytrack.domain.update_models import ExamUpdate
from studytrack.services import analytics_service, exam_service


@pytest.fixture
def exam(store, now):
    data = ExamCreate(
        subject="Operating Systems",
        date=now + timedelta(days=5),
        time="10:00 AM",
        topics=[Topic(id="t1", name="Deadlocks"), Topic(id="t2", name="Paging", studied=True)],
    )
    return exam_service.add_exam(store=store, data=data)


@pytest.mark.unit
class TestExamService:
    """Tests for exam CRUD and topic toggling."""

    def test_add_creates_no_task(self, store, exam):
        assert store.exams.get(exam.id) == exam
        assert len(store.tasks) == 0

    def test_toggle_marks_topic_studied(self, store, exam):
        exam_service.toggle_exam_topic(store=store, exam_id=exam.id, topic_id="t1")

        stored = store.exams.get(exam.id)
        assert [topic.studied for topic in stored.topics] == [True, True]
        assert analytics_service.exam_prep_progress(stored).progress == 100

    def test_toggle_unknown_topic_leaves_topics(self, store, exam):
        exam_service.toggle_exam_topic(store=store, exam_id=exam.id, topic_id="missing")

        assert store.exams.get(exam.id).topics == exam.topics

    def test_update_changes_given_fields(self, store, exam):
        exam_service.update_exam(store=store, exam_id=exam.id, updates=ExamUpdate(time="2:00 PM"))

        stored = store.exams.get(exam.id)
        assert stored.time == "2:00 PM"
        assert stored.subject == "Operating Systems"

    def test_delete_removes_exam(self, store, exam):
        exam_service.delete_exam(store=store, exam_id=exam.id)
        exam_service.delete_exam(store=store, exam_id=exam.id)

        assert len(store.exams) == 0
