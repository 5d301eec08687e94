"""Hackathon service with checklist-driven shadow tasks."""

import logging

from studytrack.core.logging import span
from studytrack.domain.create_models import HackathonCreate
from studytrack.domain.hackathon import Hackathon
from studytrack.domain.task import SourceType, TaskCategory
from studytrack.domain.update_models import HackathonUpdate
from studytrack.services.analytics_service import checklist_progress
from studytrack.services.entity_store import EntityStore
from studytrack.services.shadow_tasks import create_shadow_task, delete_shadow_task, mirror_to_shadow_task


logger = logging.getLogger(__name__)


def _mirrored_fields(hackathon: Hackathon) -> dict:
    # The task is due when the hackathon ends; progress follows the checklist
    return {
        "title": hackathon.name,
        "deadline": hackathon.end_date,
        "progress": checklist_progress(hackathon.checklist),
    }


def add_hackathon(*, store: EntityStore, data: HackathonCreate) -> Hackathon:
    """Create a hackathon and its shadow task.

    Args:
        store: Entity store to write to
        data: Hackathon fields

    Returns:
        The stored hackathon; its ``task_id`` resolves to the new task
    """
    with span("hackathon_service.add_hackathon"):
        hackathon_id = store.hackathons.reserve_id()
        hackathon = Hackathon.model_validate({**data.model_dump(), "id": hackathon_id})

        task = create_shadow_task(
            store=store,
            category=TaskCategory.HACKATHON,
            source_type=SourceType.HACKATHON,
            source_id=hackathon_id,
            **_mirrored_fields(hackathon),
        )
        stored = store.hackathons.insert(hackathon.model_copy(update={"task_id": task.id}))

        logger.info("Created hackathon: %s (task %s)", stored.name, task.id)
        return stored


def update_hackathon(*, store: EntityStore, hackathon_id: str, updates: HackathonUpdate) -> None:
    """Update a hackathon and mirror name, end date and checklist progress onto its task."""
    with span("hackathon_service.update_hackathon"):
        updated = store.hackathons.update(hackathon_id, updates.changes())
        if updated is None:
            return

        mirror_to_shadow_task(store=store, task_id=updated.task_id, fields=_mirrored_fields(updated))


def toggle_checklist_item(*, store: EntityStore, hackathon_id: str, item_id: str) -> None:
    """Flip one checklist item; the shadow task's progress follows."""
    hackathon = store.hackathons.get(hackathon_id)
    if hackathon is None:
        return

    checklist = [
        item.model_copy(update={"completed": not item.completed}) if item.id == item_id else item
        for item in hackathon.checklist
    ]
    update_hackathon(store=store, hackathon_id=hackathon_id, updates=HackathonUpdate(checklist=checklist))


def delete_hackathon(*, store: EntityStore, hackathon_id: str) -> None:
    """Delete a hackathon together with its task."""
    with span("hackathon_service.delete_hackathon"):
        hackathon = store.hackathons.get(hackathon_id)
        if hackathon is None:
            return

        delete_shadow_task(store=store, task_id=hackathon.task_id)
        store.hackathons.delete(hackathon_id)
