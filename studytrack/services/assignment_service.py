"""Assignment service: handwritten and online assignments with shadow tasks.

Every assignment is mirrored by a task in the unified list (category
Assignment, source type ``assignment``). Title, subject, deadline and progress
are copied to the task on create and on every update; deleting the assignment
deletes the task.
"""

import logging
from typing import TypeVar

from studytrack.core.logging import span
from studytrack.domain.assignment import HandwrittenAssignment, OnlineAssignment
from studytrack.domain.create_models import HandwrittenAssignmentCreate, OnlineAssignmentCreate
from studytrack.domain.task import SourceType, TaskCategory
from studytrack.domain.update_models import HandwrittenAssignmentUpdate, OnlineAssignmentUpdate
from studytrack.services.entity_store import Collection, EntityStore
from studytrack.services.shadow_tasks import create_shadow_task, delete_shadow_task, mirror_to_shadow_task


logger = logging.getLogger(__name__)

AssignmentT = TypeVar("AssignmentT", HandwrittenAssignment, OnlineAssignment)


def _mirrored_fields(assignment: HandwrittenAssignment) -> dict:
    return {
        "title": assignment.title,
        "subject": assignment.subject,
        "deadline": assignment.deadline,
        "progress": assignment.progress,
    }


def _add_assignment(
    *,
    store: EntityStore,
    collection: Collection[AssignmentT],
    model: type[AssignmentT],
    data: HandwrittenAssignmentCreate,
) -> AssignmentT:
    # Validate the full record before anything is written
    assignment_id = collection.reserve_id()
    assignment = model.model_validate({**data.model_dump(), "id": assignment_id})

    task = create_shadow_task(
        store=store,
        category=TaskCategory.ASSIGNMENT,
        source_type=SourceType.ASSIGNMENT,
        source_id=assignment_id,
        **_mirrored_fields(assignment),
    )
    stored = collection.insert(assignment.model_copy(update={"task_id": task.id}))

    logger.info("Created assignment: %s (task %s)", stored.title, task.id)
    return stored


def _update_assignment(
    *,
    store: EntityStore,
    collection: Collection[AssignmentT],
    assignment_id: str,
    updates: HandwrittenAssignmentUpdate,
) -> None:
    updated = collection.update(assignment_id, updates.changes())
    if updated is None:
        return

    mirror_to_shadow_task(store=store, task_id=updated.task_id, fields=_mirrored_fields(updated))


def _delete_assignment(*, store: EntityStore, collection: Collection[AssignmentT], assignment_id: str) -> None:
    assignment = collection.get(assignment_id)
    if assignment is None:
        return

    delete_shadow_task(store=store, task_id=assignment.task_id)
    collection.delete(assignment_id)


def add_handwritten_assignment(*, store: EntityStore, data: HandwrittenAssignmentCreate) -> HandwrittenAssignment:
    """Create a handwritten assignment and its shadow task.

    Args:
        store: Entity store to write to
        data: Assignment fields

    Returns:
        The stored assignment; its ``task_id`` resolves to the new task
    """
    with span("assignment_service.add_handwritten_assignment"):
        return _add_assignment(
            store=store,
            collection=store.handwritten_assignments,
            model=HandwrittenAssignment,
            data=data,
        )


def update_handwritten_assignment(
    *, store: EntityStore, assignment_id: str, updates: HandwrittenAssignmentUpdate
) -> None:
    """Update a handwritten assignment and mirror the change onto its task."""
    with span("assignment_service.update_handwritten_assignment"):
        _update_assignment(
            store=store,
            collection=store.handwritten_assignments,
            assignment_id=assignment_id,
            updates=updates,
        )


def delete_handwritten_assignment(*, store: EntityStore, assignment_id: str) -> None:
    """Delete a handwritten assignment together with its task."""
    with span("assignment_service.delete_handwritten_assignment"):
        _delete_assignment(store=store, collection=store.handwritten_assignments, assignment_id=assignment_id)


def add_online_assignment(*, store: EntityStore, data: OnlineAssignmentCreate) -> OnlineAssignment:
    """Create an online assignment (with mock upload metadata) and its shadow task."""
    with span("assignment_service.add_online_assignment"):
        return _add_assignment(
            store=store,
            collection=store.online_assignments,
            model=OnlineAssignment,
            data=data,
        )


def update_online_assignment(*, store: EntityStore, assignment_id: str, updates: OnlineAssignmentUpdate) -> None:
    """Update an online assignment and mirror the change onto its task."""
    with span("assignment_service.update_online_assignment"):
        _update_assignment(
            store=store,
            collection=store.online_assignments,
            assignment_id=assignment_id,
            updates=updates,
        )


def delete_online_assignment(*, store: EntityStore, assignment_id: str) -> None:
    """Delete an online assignment together with its task."""
    with span("assignment_service.delete_online_assignment"):
        _delete_assignment(store=store, collection=store.online_assignments, assignment_id=assignment_id)
