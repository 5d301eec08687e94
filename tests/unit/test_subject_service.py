"""Unit tests for subject_service module."""

import pytest

from studytrack.domain.common import Topic
from studytrack.domain.create_models import SubjectCreate
from studytrack.domain.update_models import SubjectUpdate
from studytrack.services import subject_service


@pytest.fixture
def subject(store):
    data = SubjectCreate(
        name="Data Structures",
        code="CS201",
        topics=[Topic(id="t1", name="Trees", studied=True), Topic(id="t2", name="Graphs")],
    )
    return subject_service.add_subject(store=store, data=data)


@pytest.mark.unit
class TestSubjectService:
    """Tests for subject CRUD, topic toggling and notes."""

    def test_toggle_topic(self, store, subject):
        subject_service.toggle_subject_topic(store=store, subject_id=subject.id, topic_id="t1")

        assert [topic.studied for topic in store.subjects.get(subject.id).topics] == [False, False]

    def test_add_note_is_stamped_with_store_time(self, store, subject, now):
        note = subject_service.add_subject_note(
            store=store, subject_id=subject.id, title="Unit 3 Notes", file_name="dsa_unit3.pdf"
        )

        notes = store.subjects.get(subject.id).notes
        assert notes == [note]
        assert note.upload_date == now
        assert note.file_name == "dsa_unit3.pdf"

    def test_add_note_to_unknown_subject_returns_none(self, store):
        assert subject_service.add_subject_note(store=store, subject_id="404", title="Orphan") is None

    def test_update_code(self, store, subject):
        subject_service.update_subject(store=store, subject_id=subject.id, updates=SubjectUpdate(code="CS202"))

        assert store.subjects.get(subject.id).code == "CS202"

    def test_delete(self, store, subject):
        subject_service.delete_subject(store=store, subject_id=subject.id)

        assert store.subjects.get(subject.id) is None
