"""Pure derivation of task status and priority.

A task's ``status`` and ``priority`` are never stored authoritatively: they are
recomputed from deadline, progress and category after every write. The
priority is a score built from three independent terms:

- deadline proximity (overdue +40, <24h +35, <3d +25, <7d +15, later +5)
- progress (<25% +20, <50% +15, <75% +10, otherwise +0)
- category weight (Exam Prep 10 ... Homework 4, unknown categories 5)

and mapped to a level: >=50 Critical, >=35 High, >=20 Medium, else Low.
"""

from datetime import datetime

from studytrack.core import clock
from studytrack.core.config import Constants
from studytrack.domain.task import Task, TaskPriority, TaskStatus


def compute_status(task: Task, *, now: datetime | None = None) -> TaskStatus:
    """Return Completed at full progress, else Overdue past the deadline, else Pending."""
    if task.progress == Constants.PROGRESS_MAX:
        return TaskStatus.COMPLETED

    if clock.is_past(task.deadline, now=now):
        return TaskStatus.OVERDUE

    return TaskStatus.PENDING


def _proximity_points(deadline: datetime, *, now: datetime | None) -> int:
    hours_left = clock.hours_until(deadline, now=now)
    days_left = hours_left / 24

    if days_left < 0:
        return Constants.SCORE_OVERDUE
    if hours_left < Constants.PROXIMITY_HOURS_URGENT:
        return Constants.SCORE_UNDER_24_HOURS
    if days_left < Constants.PROXIMITY_DAYS_SOON:
        return Constants.SCORE_UNDER_3_DAYS
    if days_left < Constants.PROXIMITY_DAYS_WEEK:
        return Constants.SCORE_UNDER_7_DAYS
    return Constants.SCORE_LATER


def _progress_points(progress: int) -> int:
    for upper_bound, points in Constants.PROGRESS_BANDS:
        if progress < upper_bound:
            return points
    return 0


def category_weight(category: str) -> int:
    """Return the fixed weight for a category (5 for anything unlisted)."""
    return Constants.CATEGORY_WEIGHTS.get(category, Constants.DEFAULT_CATEGORY_WEIGHT)


def priority_score(task: Task, *, now: datetime | None = None) -> int:
    """Sum the proximity, progress and category terms for an incomplete task."""
    return (
        _proximity_points(task.deadline, now=now)
        + _progress_points(task.progress)
        + category_weight(task.category)
    )


def score_to_priority(score: int) -> TaskPriority:
    """Map a priority score onto the four-level scale."""
    if score >= Constants.PRIORITY_CRITICAL_MIN:
        return TaskPriority.CRITICAL
    if score >= Constants.PRIORITY_HIGH_MIN:
        return TaskPriority.HIGH
    if score >= Constants.PRIORITY_MEDIUM_MIN:
        return TaskPriority.MEDIUM
    return TaskPriority.LOW


def compute_priority(task: Task, *, now: datetime | None = None) -> TaskPriority:
    """Return Low for completed tasks, otherwise the level of the priority score."""
    if task.progress == Constants.PROGRESS_MAX:
        return TaskPriority.LOW

    return score_to_priority(priority_score(task, now=now))


def derive_task(task: Task, *, now: datetime | None = None) -> Task:
    """Return a copy of ``task`` with status and priority recomputed.

    Both derived fields are evaluated against the same instant so they never
    disagree about whether the deadline has passed.
    """
    moment = now if now is not None else clock.utc_now()
    return task.model_copy(
        update={
            "status": compute_status(task, now=moment),
            "priority": compute_priority(task, now=moment),
        }
    )
