"""Read-only aggregation views over the tracker's collections.

This module provides functions for:
- Picking the single task to work on next (top priority task)
- Upcoming deadline and overdue task lists
- Filtering and sorting the task list
- Progress rollups for exams, subjects, projects and hackathons
- The dashboard summary combining all of the above

Every function takes collection snapshots (or the store) and computes its
result fresh on each call; nothing is cached.

Key Concepts:
- Top priority task: among incomplete tasks, the Critical one with the earliest
  deadline, or failing that the highest priority task (ties keep list order).
- Completion percentage: done / total rounded half-up to a whole percent, 0 for
  an empty list.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from studytrack.core import clock
from studytrack.core.config import settings
from studytrack.core.logging import span
from studytrack.domain.common import Topic
from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import ChecklistItem, Hackathon
from studytrack.domain.project import Project
from studytrack.domain.subject import Subject
from studytrack.domain.task import Task, TaskPriority, TaskStatus
from studytrack.domain.timetable import DayOfWeek, TimetableEntry
from studytrack.models.service_models import (
    DashboardSummary,
    ExamPrepProgress,
    HackathonProgress,
    ProjectProgress,
    SubjectProgress,
    TaskStatistics,
)
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)

PRIORITY_ORDER: dict[TaskPriority, int] = {
    TaskPriority.CRITICAL: 4,
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


# Rollup helpers


def completion_percentage(done: int, total: int) -> int:
    """Return done / total as a whole percent rounded half-up (0 if total is 0)."""
    if total == 0:
        return 0
    return math.floor(done * 100 / total + 0.5)


def completion_rate(tasks: Sequence[Task]) -> int:
    """Percentage of tasks whose status is Completed."""
    return completion_percentage(len(completed_tasks(tasks)), len(tasks))


def topic_progress(topics: Sequence[Topic]) -> int:
    """Percentage of studied topics."""
    return completion_percentage(sum(1 for topic in topics if topic.studied), len(topics))


def checklist_progress(items: Sequence[ChecklistItem]) -> int:
    """Percentage of completed checklist items."""
    return completion_percentage(sum(1 for item in items if item.completed), len(items))


def project_progress(project: Project) -> int:
    """Percentage of completed project sub-tasks."""
    return completion_percentage(sum(1 for task in project.tasks if task.completed), len(project.tasks))


# Task filters and ordering


def overdue_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Tasks whose status is Overdue."""
    return [task for task in tasks if task.status == TaskStatus.OVERDUE]


def pending_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Tasks whose status is Pending."""
    return [task for task in tasks if task.status == TaskStatus.PENDING]


def completed_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Tasks whose status is Completed."""
    return [task for task in tasks if task.status == TaskStatus.COMPLETED]


def tasks_by_priority(tasks: Iterable[Task], priority: TaskPriority) -> list[Task]:
    """Tasks at exactly the given priority level."""
    return [task for task in tasks if task.priority == priority]


def filter_tasks(
    tasks: Iterable[Task],
    *,
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
) -> list[Task]:
    """Filter by status and/or priority; None means no constraint."""
    return [
        task
        for task in tasks
        if (status is None or task.status == status) and (priority is None or task.priority == priority)
    ]


def sort_by_deadline(tasks: Iterable[Task]) -> list[Task]:
    """Earliest deadline first (stable)."""
    return sorted(tasks, key=lambda task: task.deadline)


def sort_by_priority(tasks: Iterable[Task]) -> list[Task]:
    """Highest priority first (stable, so equal priorities keep their order)."""
    return sorted(tasks, key=lambda task: PRIORITY_ORDER[task.priority], reverse=True)


def top_priority_task(tasks: Iterable[Task]) -> Task | None:
    """Return the task to work on next, or None if everything is completed."""
    incomplete = [task for task in tasks if task.status != TaskStatus.COMPLETED]
    if not incomplete:
        return None

    by_priority = sort_by_priority(incomplete)
    critical = [task for task in by_priority if task.priority == TaskPriority.CRITICAL]
    if critical:
        return sort_by_deadline(critical)[0]

    return by_priority[0]


def upcoming_deadlines(
    tasks: Iterable[Task],
    window_days: float = 7,
    *,
    now: datetime | None = None,
) -> list[Task]:
    """Incomplete tasks due within ``[now, now + window_days]`` (both ends inclusive)."""
    start = clock.ensure_aware(now) if now is not None else clock.utc_now()
    end = start + timedelta(days=window_days)
    return [task for task in tasks if task.status != TaskStatus.COMPLETED and start <= task.deadline <= end]


def task_statistics(tasks: Sequence[Task]) -> TaskStatistics:
    """Workload counters shown above the task list and on the dashboard."""
    return TaskStatistics(
        total=len(tasks),
        completed=len(completed_tasks(tasks)),
        pending=len(pending_tasks(tasks)),
        overdue=len(overdue_tasks(tasks)),
        critical=len(tasks_by_priority(tasks, TaskPriority.CRITICAL)),
        high=len(tasks_by_priority(tasks, TaskPriority.HIGH)),
        completion_rate=completion_rate(tasks),
    )


# Per-entity views


def exam_prep_progress(exam: Exam) -> ExamPrepProgress:
    """Topic coverage for one exam."""
    studied = sum(1 for topic in exam.topics if topic.studied)
    return ExamPrepProgress(
        exam=exam,
        studied_topics=studied,
        total_topics=len(exam.topics),
        progress=topic_progress(exam.topics),
    )


def upcoming_exams(exams: Iterable[Exam], limit: int = 3, *, now: datetime | None = None) -> list[ExamPrepProgress]:
    """Exams dated now or later, earliest first, with their preparation progress."""
    start = clock.ensure_aware(now) if now is not None else clock.utc_now()
    future = sorted((exam for exam in exams if exam.date >= start), key=lambda exam: exam.date)
    return [exam_prep_progress(exam) for exam in future[:limit]]


def subject_progress(subjects: Iterable[Subject]) -> list[SubjectProgress]:
    """Topic coverage for every subject."""
    results = []
    for subject in subjects:
        studied = sum(1 for topic in subject.topics if topic.studied)
        results.append(
            SubjectProgress(
                subject=subject,
                studied_topics=studied,
                total_topics=len(subject.topics),
                progress=topic_progress(subject.topics),
            )
        )
    return results


def active_projects(projects: Iterable[Project]) -> list[ProjectProgress]:
    """Projects with at least one incomplete sub-task."""
    results = []
    for project in projects:
        if all(task.completed for task in project.tasks):
            continue
        completed = sum(1 for task in project.tasks if task.completed)
        results.append(
            ProjectProgress(
                project=project,
                completed_tasks=completed,
                total_tasks=len(project.tasks),
                progress=project_progress(project),
            )
        )
    return results


def hackathon_progress(hackathons: Iterable[Hackathon]) -> list[HackathonProgress]:
    """Checklist completion for every hackathon."""
    results = []
    for hackathon in hackathons:
        completed = sum(1 for item in hackathon.checklist if item.completed)
        results.append(
            HackathonProgress(
                hackathon=hackathon,
                completed_items=completed,
                total_items=len(hackathon.checklist),
                progress=checklist_progress(hackathon.checklist),
            )
        )
    return results


def classes_for_day(timetable: Iterable[TimetableEntry], day: DayOfWeek | str) -> list[TimetableEntry]:
    """Entries on ``day`` ordered by start time (HH:MM sorts lexically)."""
    return sorted((entry for entry in timetable if entry.day == day), key=lambda entry: entry.start_time)


def weekly_timetable(timetable: Iterable[TimetableEntry]) -> dict[DayOfWeek, list[TimetableEntry]]:
    """Entries grouped by teaching day, Monday to Saturday, each day sorted."""
    entries = list(timetable)
    return {day: classes_for_day(entries, day) for day in DayOfWeek}


def todays_classes(timetable: Iterable[TimetableEntry], *, now: datetime | None = None) -> list[TimetableEntry]:
    """Entries for the current weekday; Sunday has no classes."""
    moment = clock.ensure_aware(now) if now is not None else clock.utc_now()
    return classes_for_day(timetable, clock.day_of_week(moment))


# Dashboard


def dashboard_summary(
    store: EntityStore,
    *,
    now: datetime | None = None,
    window_days: int | None = None,
    upcoming_limit: int | None = None,
    exam_limit: int | None = None,
) -> DashboardSummary:
    """Compute every dashboard view from the store's current contents.

    Args:
        store: Entity store to read from
        now: Reference instant (defaults to the store's clock)
        window_days: Upcoming deadline window (defaults to settings)
        upcoming_limit: Max upcoming deadlines returned (defaults to settings)
        exam_limit: Max upcoming exams returned (defaults to settings)

    Returns:
        DashboardSummary with all aggregates
    """
    with span("analytics_service.dashboard_summary"):
        moment = now if now is not None else store.now()
        window = window_days if window_days is not None else settings.upcoming_window_days
        deadline_limit = upcoming_limit if upcoming_limit is not None else settings.dashboard_upcoming_limit
        exams_shown = exam_limit if exam_limit is not None else settings.dashboard_exam_limit

        tasks = store.tasks.all()

        summary = DashboardSummary(
            generated_at=moment,
            top_priority_task=top_priority_task(tasks),
            overdue_tasks=overdue_tasks(tasks),
            upcoming_deadlines=upcoming_deadlines(tasks, window, now=moment)[:deadline_limit],
            statistics=task_statistics(tasks),
            upcoming_exams=upcoming_exams(store.exams.all(), exams_shown, now=moment),
            todays_classes=todays_classes(store.timetable.all(), now=moment),
            active_projects=active_projects(store.projects.all()),
            subject_progress=subject_progress(store.subjects.all()),
            hackathon_progress=hackathon_progress(store.hackathons.all()),
        )

        logger.info(
            "Generated dashboard summary",
            extra={"task_count": summary.statistics.total, "overdue_count": len(summary.overdue_tasks)},
        )
        return summary
