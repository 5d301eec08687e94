"""Shadow task lifecycle shared by every task-producing entity.

A shadow task is a Task created and kept in sync on behalf of another entity
(assignment, hackathon, project sub-task). The link is two plain lookup keys:
``task_id`` on the source entity and ``source_type``/``source_id`` on the task.
Neither side owns the other, so source deletions must cascade explicitly and a
``task_id`` that no longer resolves is tolerated.
"""

import logging
from datetime import datetime
from typing import Any

from studytrack.domain.create_models import TaskCreate
from studytrack.domain.task import SourceType, Task, TaskCategory
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def create_shadow_task(
    *,
    store: EntityStore,
    title: str,
    category: TaskCategory,
    deadline: datetime,
    progress: int,
    source_type: SourceType,
    source_id: str,
    subject: str | None = None,
) -> Task:
    """Create the task mirroring a source entity and return it (with its id)."""
    task = store.tasks.add(
        TaskCreate(
            title=title,
            category=category,
            subject=subject,
            deadline=deadline,
            progress=progress,
            source_type=source_type,
            source_id=source_id,
        )
    )
    logger.info(
        "Linked shadow task",
        extra={"task_id": task.id, "source_type": str(source_type), "source_id": source_id},
    )
    return task


def mirror_to_shadow_task(*, store: EntityStore, task_id: str | None, fields: dict[str, Any]) -> Task | None:
    """Copy mirrored fields onto a linked task.

    Unlinked entities (``task_id`` is None) and dangling links are both silent
    no-ops; the source entity's own update still applies.
    """
    if task_id is None:
        return None

    updated = store.tasks.update(task_id, fields)
    if updated is None:
        logger.debug("Shadow task missing, mirrored update dropped", extra={"task_id": task_id})
    return updated


def delete_shadow_task(*, store: EntityStore, task_id: str | None) -> None:
    """Delete a linked task as part of a source entity deletion."""
    if task_id is None:
        return

    if store.tasks.delete(task_id):
        logger.info("Deleted shadow task", extra={"task_id": task_id})
