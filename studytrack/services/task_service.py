"""Task service for direct CRUD on the unified task list."""

import logging

from studytrack.core.logging import span
from studytrack.domain.create_models import TaskCreate
from studytrack.domain.task import Task
from studytrack.domain.update_models import TaskUpdate
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def add_task(*, store: EntityStore, data: TaskCreate) -> Task:
    """Create a task; status and priority are derived by the store.

    Args:
        store: Entity store to write to
        data: Task fields (no id, status or priority)

    Returns:
        The stored task, including its new id and derived fields
    """
    with span("task_service.add_task"):
        task = store.tasks.add(data)
        logger.info("Created task: %s (%s, %s)", task.title, task.status, task.priority)
        return task


def update_task(*, store: EntityStore, task_id: str, updates: TaskUpdate) -> None:
    """Merge ``updates`` into a task and re-derive it. Unknown ids are ignored.

    Editing a shadow task directly is allowed; the next edit of its source
    entity overwrites the mirrored fields again.
    """
    with span("task_service.update_task"):
        store.tasks.update(task_id, updates.changes())


def set_task_progress(*, store: EntityStore, task_id: str, progress: int) -> None:
    """Move a task's progress slider."""
    update_task(store=store, task_id=task_id, updates=TaskUpdate(progress=progress))


def delete_task(*, store: EntityStore, task_id: str) -> None:
    """Delete a task. Its source entity, if any, is left in place with a dangling link."""
    with span("task_service.delete_task"):
        store.tasks.delete(task_id)
