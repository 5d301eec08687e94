"""Unit tests for the in-memory entity store."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from studytrack.core.errors import DuplicateIdError, RecordNotFoundError
from studytrack.domain.create_models import ExamCreate, TaskCreate
from studytrack.domain.exam import Exam
from studytrack.domain.task import TaskCategory, TaskPriority, TaskStatus
from studytrack.services.entity_store import EntityStore


@pytest.fixture
def task_data(now):
    return TaskCreate(
        title="Read chapter 4",
        category=TaskCategory.HOMEWORK,
        subject="Algorithms",
        deadline=now + timedelta(days=10),
        progress=0,
    )


@pytest.mark.unit
class TestCollectionAdd:
    """Tests for Collection.add id assignment and copying."""

    def test_assigns_sequential_ids(self, store, task_data):
        first = store.tasks.add(task_data)
        second = store.tasks.add(task_data)

        assert first.id == "1"
        assert second.id == "2"
        assert len(store.tasks) == 2

    def test_ignores_caller_supplied_id(self, store, now):
        exam = store.exams.add({"id": "x", "subject": "OS", "date": now, "time": "10:00 AM"})

        assert exam.id == "1"
        assert "x" not in store.exams

    def test_ids_are_not_reused_after_delete(self, store, task_data):
        first = store.tasks.add(task_data)
        store.tasks.delete(first.id)

        second = store.tasks.add(task_data)

        assert second.id == "2"

    def test_seeded_ids_are_skipped(self, seeded_store, task_data):
        task = seeded_store.tasks.add(task_data)

        assert task.id == "8"

    def test_returns_copy(self, store, task_data):
        task = store.tasks.add(task_data)
        task.title = "Changed locally"

        assert store.tasks.get(task.id).title == "Read chapter 4"


@pytest.mark.unit
class TestTaskCollectionDerivation:
    """Tests that the task collection re-derives status and priority on every write."""

    def test_add_derives_fields(self, store, now):
        task = store.tasks.add(
            TaskCreate(
                title="Mid-term revision",
                category=TaskCategory.EXAM_PREP,
                deadline=now + timedelta(hours=12),
                progress=10,
            )
        )

        assert task.status == TaskStatus.PENDING
        assert task.priority == TaskPriority.CRITICAL

    def test_add_ignores_supplied_derived_fields(self, store, now):
        task = store.tasks.add(
            {
                "title": "Homework",
                "category": TaskCategory.HOMEWORK,
                "deadline": now + timedelta(days=10),
                "progress": 80,
                "status": TaskStatus.COMPLETED,
                "priority": TaskPriority.CRITICAL,
            }
        )

        assert task.status == TaskStatus.PENDING
        assert task.priority == TaskPriority.LOW

    def test_update_rederives(self, store, task_data):
        task = store.tasks.add(task_data)

        updated = store.tasks.update(task.id, {"progress": 100})

        assert updated.status == TaskStatus.COMPLETED
        assert updated.priority == TaskPriority.LOW

    def test_update_cannot_write_derived_fields(self, store, task_data):
        task = store.tasks.add(task_data)

        updated = store.tasks.update(task.id, {"status": TaskStatus.COMPLETED, "priority": TaskPriority.CRITICAL})

        assert updated.status == TaskStatus.PENDING
        assert updated.priority == task.priority

    def test_refresh_moves_pending_to_overdue(self, store, task_data, now):
        task = store.tasks.add(task_data)

        store.refresh_tasks(now=now + timedelta(days=11))

        assert store.tasks.get(task.id).status == TaskStatus.OVERDUE


@pytest.mark.unit
class TestCollectionUpdate:
    """Tests for Collection.update merge semantics."""

    def test_merges_only_given_fields(self, store, task_data):
        task = store.tasks.add(task_data)

        updated = store.tasks.update(task.id, {"title": "Read chapter 5"})

        assert updated.title == "Read chapter 5"
        assert updated.subject == "Algorithms"
        assert updated.deadline == task.deadline

    def test_id_is_never_overwritten(self, store, task_data):
        task = store.tasks.add(task_data)

        updated = store.tasks.update(task.id, {"id": "99"})

        assert updated.id == task.id
        assert "99" not in store.tasks

    def test_unknown_id_is_silent_noop(self, store):
        assert store.tasks.update("404", {"title": "Nothing"}) is None
        assert len(store.tasks) == 0

    def test_invalid_merge_raises_and_keeps_record(self, store, task_data):
        task = store.tasks.add(task_data)

        with pytest.raises(ValidationError):
            store.tasks.update(task.id, {"progress": 150})

        assert store.tasks.get(task.id).progress == 0


@pytest.mark.unit
class TestCollectionDeleteAndLookup:
    """Tests for delete, get and require."""

    def test_delete_removes_record(self, store, task_data):
        task = store.tasks.add(task_data)

        assert store.tasks.delete(task.id) is True
        assert store.tasks.get(task.id) is None

    def test_delete_unknown_id_returns_false(self, store):
        assert store.tasks.delete("404") is False

    def test_require_raises_record_not_found(self, store):
        with pytest.raises(RecordNotFoundError) as exc_info:
            store.exams.require("404")

        assert exc_info.value.collection == "exams"
        assert str(exc_info.value) == "Record not found in exams: 404"

    def test_record_not_found_is_a_key_error(self, store):
        with pytest.raises(KeyError):
            store.exams.require("404")

    def test_all_preserves_insertion_order(self, store, now):
        for subject in ("OS", "DBMS", "ML"):
            store.exams.add(ExamCreate(subject=subject, date=now, time="10:00 AM"))

        assert [exam.subject for exam in store.exams.all()] == ["OS", "DBMS", "ML"]


@pytest.mark.unit
class TestInsertAndReserve:
    """Tests for explicit-id insertion and id reservation."""

    def test_insert_duplicate_id_raises(self, store, now):
        exam = Exam(id="1", subject="OS", date=now, time="10:00 AM")
        store.exams.insert(exam)

        with pytest.raises(DuplicateIdError):
            store.exams.insert(exam)

    def test_insert_of_deleted_id_raises(self, store, now):
        exam = Exam(id="1", subject="OS", date=now, time="10:00 AM")
        store.exams.insert(exam)
        store.exams.delete("1")

        with pytest.raises(DuplicateIdError):
            store.exams.insert(exam)

    def test_reserved_id_is_accepted_once(self, store, now):
        reserved = store.exams.reserve_id()
        exam = Exam(id=reserved, subject="OS", date=now, time="10:00 AM")

        store.exams.insert(exam)

        assert reserved in store.exams
        with pytest.raises(DuplicateIdError):
            store.exams.insert(exam)

    def test_reserved_id_is_not_handed_out_again(self, store, now):
        reserved = store.exams.reserve_id()

        exam = store.exams.add(ExamCreate(subject="OS", date=now, time="10:00 AM"))

        assert exam.id != reserved


@pytest.mark.unit
class TestEntityStore:
    """Tests for the EntityStore container."""

    def test_from_seed_copies_every_collection(self, seeded_store):
        snapshot = seeded_store.snapshot()

        assert len(snapshot.tasks) == 7
        assert len(snapshot.timetable) == 9
        assert len(snapshot.hackathons) == 1

    def test_from_seed_derives_seeded_tasks(self, seeded_store):
        overdue_ppt = seeded_store.tasks.get("6")

        assert overdue_ppt.status == TaskStatus.OVERDUE
        assert overdue_ppt.priority == TaskPriority.CRITICAL

    def test_stores_are_independent(self, now, task_data):
        first = EntityStore(clock=lambda: now)
        second = EntityStore(clock=lambda: now)

        first.tasks.add(task_data)

        assert len(second.tasks) == 0

    def test_now_uses_store_clock(self, store, now):
        assert store.now() == now
