"""Pydantic models for service layer return types.

These models give the aggregation views a typed shape at the service boundary
and serialize directly as JSON responses.
"""

from datetime import datetime

from pydantic import BaseModel

from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import Hackathon
from studytrack.domain.project import Project
from studytrack.domain.subject import Subject
from studytrack.domain.task import Task
from studytrack.domain.timetable import TimetableEntry


class TaskStatistics(BaseModel):
    """Workload counters over the task list."""

    total: int
    completed: int
    pending: int
    overdue: int
    critical: int
    high: int
    completion_rate: int


class ExamPrepProgress(BaseModel):
    """Topic coverage for an upcoming exam."""

    exam: Exam
    studied_topics: int
    total_topics: int
    progress: int


class SubjectProgress(BaseModel):
    """Topic coverage for a subject."""

    subject: Subject
    studied_topics: int
    total_topics: int
    progress: int


class ProjectProgress(BaseModel):
    """Sub-task completion for a project."""

    project: Project
    completed_tasks: int
    total_tasks: int
    progress: int


class HackathonProgress(BaseModel):
    """Checklist completion for a hackathon."""

    hackathon: Hackathon
    completed_items: int
    total_items: int
    progress: int


class DashboardSummary(BaseModel):
    """Everything the dashboard shows, computed in one pass."""

    generated_at: datetime
    top_priority_task: Task | None
    overdue_tasks: list[Task]
    upcoming_deadlines: list[Task]
    statistics: TaskStatistics
    upcoming_exams: list[ExamPrepProgress]
    todays_classes: list[TimetableEntry]
    active_projects: list[ProjectProgress]
    subject_progress: list[SubjectProgress]
    hackathon_progress: list[HackathonProgress]
