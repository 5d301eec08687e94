"""Unit tests for assignment_service module."""

from datetime import timedelta

import pytest

from studytrack.domain.create_models import HandwrittenAssignmentCreate, OnlineAssignmentCreate
from studytrack.domain.task import SourceType, TaskCategory, TaskStatus
from studytrack.domain.update_models import HandwrittenAssignmentUpdate, OnlineAssignmentUpdate
from studytrack.services import assignment_service


@pytest.fixture
def handwritten_data(now):
    return HandwrittenAssignmentCreate(
        subject="Computer Networks",
        title="Network Protocols Report",
        deadline=now + timedelta(days=4),
        progress=20,
    )


@pytest.mark.unit
class TestAddHandwrittenAssignment:
    """Tests for add_handwritten_assignment function."""

    def test_creates_linked_shadow_task(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        task = store.tasks.get(assignment.task_id)
        assert task is not None
        assert task.title == "Network Protocols Report"
        assert task.subject == "Computer Networks"
        assert task.deadline == assignment.deadline
        assert task.progress == 20
        assert task.category == TaskCategory.ASSIGNMENT
        assert task.source_type == SourceType.ASSIGNMENT
        assert task.source_id == assignment.id
        assert task.is_shadow

    def test_assignment_and_task_are_both_stored(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        assert store.handwritten_assignments.get(assignment.id) == assignment
        assert len(store.tasks) == 1

    def test_past_deadline_task_is_overdue(self, store, now):
        data = HandwrittenAssignmentCreate(
            subject="Physics", title="Late lab", deadline=now - timedelta(hours=2), progress=0
        )

        assignment = assignment_service.add_handwritten_assignment(store=store, data=data)

        assert store.tasks.get(assignment.task_id).status == TaskStatus.OVERDUE


@pytest.mark.unit
class TestUpdateHandwrittenAssignment:
    """Tests for update_handwritten_assignment function."""

    def test_mirrors_fields_onto_task(self, store, handwritten_data, now):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)
        new_deadline = now + timedelta(days=6)

        assignment_service.update_handwritten_assignment(
            store=store,
            assignment_id=assignment.id,
            updates=HandwrittenAssignmentUpdate(title="Protocols Report v2", deadline=new_deadline, progress=55),
        )

        task = store.tasks.get(assignment.task_id)
        assert task.title == "Protocols Report v2"
        assert task.deadline == new_deadline
        assert task.progress == 55
        assert store.handwritten_assignments.get(assignment.id).progress == 55

    def test_full_progress_completes_task(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        assignment_service.update_handwritten_assignment(
            store=store, assignment_id=assignment.id, updates=HandwrittenAssignmentUpdate(progress=100)
        )

        assert store.tasks.get(assignment.task_id).status == TaskStatus.COMPLETED

    def test_dangling_task_link_updates_assignment_only(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)
        store.tasks.delete(assignment.task_id)

        assignment_service.update_handwritten_assignment(
            store=store, assignment_id=assignment.id, updates=HandwrittenAssignmentUpdate(progress=70)
        )

        assert store.handwritten_assignments.get(assignment.id).progress == 70
        assert len(store.tasks) == 0

    def test_unknown_assignment_is_noop(self, store):
        assignment_service.update_handwritten_assignment(
            store=store, assignment_id="404", updates=HandwrittenAssignmentUpdate(progress=70)
        )

        assert len(store.handwritten_assignments) == 0
        assert len(store.tasks) == 0

    def test_direct_task_edit_is_overwritten_by_next_source_edit(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)
        store.tasks.update(assignment.task_id, {"title": "Edited on the task list"})

        assignment_service.update_handwritten_assignment(
            store=store, assignment_id=assignment.id, updates=HandwrittenAssignmentUpdate(progress=30)
        )

        assert store.tasks.get(assignment.task_id).title == "Network Protocols Report"


@pytest.mark.unit
class TestDeleteHandwrittenAssignment:
    """Tests for delete_handwritten_assignment function."""

    def test_cascades_to_task(self, store, handwritten_data):
        assignment = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        assignment_service.delete_handwritten_assignment(store=store, assignment_id=assignment.id)

        assert store.handwritten_assignments.get(assignment.id) is None
        assert store.tasks.get(assignment.task_id) is None

    def test_leaves_unrelated_tasks(self, store, handwritten_data):
        first = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)
        second = assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        assignment_service.delete_handwritten_assignment(store=store, assignment_id=first.id)

        assert [task.id for task in store.tasks.all()] == [second.task_id]

    def test_unknown_assignment_is_noop(self, store, handwritten_data):
        assignment_service.add_handwritten_assignment(store=store, data=handwritten_data)

        assignment_service.delete_handwritten_assignment(store=store, assignment_id="404")

        assert len(store.tasks) == 1


@pytest.mark.unit
class TestOnlineAssignments:
    """Tests for the online assignment variants."""

    def test_add_keeps_upload_metadata(self, store, now):
        data = OnlineAssignmentCreate(
            subject="Database Management",
            title="DBMS Assignment - Normalization",
            deadline=now + timedelta(days=3),
            progress=40,
            file_name="dbms_normalization.pdf",
            file_type="PDF",
        )

        assignment = assignment_service.add_online_assignment(store=store, data=data)

        assert assignment.file_name == "dbms_normalization.pdf"
        assert assignment.file_type == "PDF"
        assert store.tasks.get(assignment.task_id).category == TaskCategory.ASSIGNMENT

    def test_update_and_delete_sync_task(self, store, now):
        data = OnlineAssignmentCreate(subject="ML", title="Regression", deadline=now + timedelta(days=3))
        assignment = assignment_service.add_online_assignment(store=store, data=data)

        assignment_service.update_online_assignment(
            store=store, assignment_id=assignment.id, updates=OnlineAssignmentUpdate(subject="Machine Learning")
        )
        assert store.tasks.get(assignment.task_id).subject == "Machine Learning"

        assignment_service.delete_online_assignment(store=store, assignment_id=assignment.id)
        assert len(store.tasks) == 0
        assert len(store.online_assignments) == 0
