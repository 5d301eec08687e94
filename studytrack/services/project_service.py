"""Project service with lazily linked sub-task shadow tasks.

A project never gets a task of its own. Each sub-task gets one the first time
an update pass sees it with a deadline and no ``task_id``; projects added with
dated sub-tasks are only linked on their next update. Linked sub-tasks mirror
title ("<project>: <sub-task>"), deadline and binary progress (0 or 100).

Sub-task ``task_id`` links are owned by the store: values sent by callers are
replaced with the stored link for that sub-task id, or None for a new one.
"""

import logging

from studytrack.core.config import Constants
from studytrack.core.logging import span
from studytrack.domain.create_models import ProjectCreate
from studytrack.domain.project import Project, ProjectTask
from studytrack.domain.task import SourceType, TaskCategory
from studytrack.domain.update_models import ProjectUpdate
from studytrack.services.entity_store import EntityStore
from studytrack.services.shadow_tasks import create_shadow_task, delete_shadow_task, mirror_to_shadow_task


logger = logging.getLogger(__name__)


def _shadow_title(project: Project, project_task: ProjectTask) -> str:
    return f"{project.name}: {project_task.title}"


def _shadow_progress(project_task: ProjectTask) -> int:
    return Constants.PROGRESS_MAX if project_task.completed else Constants.PROGRESS_MIN


def _sync_project_tasks(*, store: EntityStore, project: Project) -> list[ProjectTask]:
    """Link or mirror every sub-task and return the sub-task list with task ids filled in."""
    synced = []
    for project_task in project.tasks:
        if project_task.deadline is not None and project_task.task_id is None:
            task = create_shadow_task(
                store=store,
                title=_shadow_title(project, project_task),
                category=TaskCategory.PROJECT_TASK,
                deadline=project_task.deadline,
                progress=_shadow_progress(project_task),
                source_type=SourceType.PROJECT,
                source_id=project_task.id,
            )
            project_task = project_task.model_copy(update={"task_id": task.id})
        elif project_task.task_id is not None:
            fields = {"title": _shadow_title(project, project_task), "progress": _shadow_progress(project_task)}
            # A task always has a deadline; clearing the sub-task's leaves the last one
            if project_task.deadline is not None:
                fields["deadline"] = project_task.deadline
            mirror_to_shadow_task(store=store, task_id=project_task.task_id, fields=fields)
        synced.append(project_task)
    return synced


def _with_stored_links(project_tasks: list[ProjectTask], stored_links: dict[str, str | None]) -> list[dict]:
    """Replace caller-supplied task ids with the links the store already holds (None for new sub-tasks)."""
    return [
        {**project_task.model_dump(), "task_id": stored_links.get(project_task.id)} for project_task in project_tasks
    ]


def add_project(*, store: EntityStore, data: ProjectCreate) -> Project:
    """Create a project. No shadow tasks are created until its first update."""
    with span("project_service.add_project"):
        fields = data.model_dump()
        fields["tasks"] = _with_stored_links(data.tasks, {})
        project = store.projects.add(fields)
        logger.info("Created project: %s (%d sub-tasks)", project.name, len(project.tasks))
        return project


def update_project(*, store: EntityStore, project_id: str, updates: ProjectUpdate) -> None:
    """Update a project and synchronize its sub-tasks' shadow tasks.

    Every update re-scans the whole sub-task list: newly dated sub-tasks are
    linked, linked ones are mirrored, and sub-tasks removed by this update have
    their shadow task deleted.
    """
    with span("project_service.update_project"):
        existing = store.projects.get(project_id)
        if existing is None:
            return

        changes = updates.changes()
        if updates.tasks is not None:
            stored_links = {project_task.id: project_task.task_id for project_task in existing.tasks}
            changes["tasks"] = _with_stored_links(updates.tasks, stored_links)
        # Validate the merged record before touching any task
        merged = Project.model_validate({**existing.model_dump(), **changes, "id": project_id})

        kept_ids = {project_task.id for project_task in merged.tasks}
        for removed in existing.tasks:
            if removed.id not in kept_ids:
                delete_shadow_task(store=store, task_id=removed.task_id)

        synced_tasks = _sync_project_tasks(store=store, project=merged)
        store.projects.update(project_id, {**changes, "tasks": synced_tasks})


def toggle_project_task(*, store: EntityStore, project_id: str, project_task_id: str) -> None:
    """Flip a sub-task's completion; a linked task moves between 0% and 100%."""
    project = store.projects.get(project_id)
    if project is None:
        return

    tasks = [
        project_task.model_copy(update={"completed": not project_task.completed})
        if project_task.id == project_task_id
        else project_task
        for project_task in project.tasks
    ]
    update_project(store=store, project_id=project_id, updates=ProjectUpdate(tasks=tasks))


def delete_project(*, store: EntityStore, project_id: str) -> None:
    """Delete a project and the shadow task of every sub-task."""
    with span("project_service.delete_project"):
        project = store.projects.get(project_id)
        if project is None:
            return

        for project_task in project.tasks:
            delete_shadow_task(store=store, task_id=project_task.task_id)
        store.projects.delete(project_id)
