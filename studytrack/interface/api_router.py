"""JSON API over the entity store.

Reads hand out copies from the store; writes go through the services so shadow
tasks stay synchronized. Updates and deletes of unknown ids answer 204 like any
other successful write.
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import BaseModel

from studytrack.core.config import settings
from studytrack.core.errors import RecordNotFoundError
from studytrack.domain.assignment import HandwrittenAssignment, OnlineAssignment
from studytrack.domain.create_models import (
    ExamCreate,
    HackathonCreate,
    HandwrittenAssignmentCreate,
    OnlineAssignmentCreate,
    ProjectCreate,
    SubjectCreate,
    TaskCreate,
    TimetableEntryCreate,
)
from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import Hackathon
from studytrack.domain.project import Project
from studytrack.domain.subject import Note, Subject
from studytrack.domain.task import Task, TaskPriority, TaskStatus
from studytrack.domain.timetable import DayOfWeek, TimetableEntry
from studytrack.domain.update_models import (
    ExamUpdate,
    HackathonUpdate,
    HandwrittenAssignmentUpdate,
    OnlineAssignmentUpdate,
    ProjectUpdate,
    SubjectUpdate,
    TaskUpdate,
    TimetableEntryUpdate,
)
from studytrack.models.service_models import DashboardSummary
from studytrack.services import (
    analytics_service,
    assignment_service,
    exam_service,
    hackathon_service,
    project_service,
    subject_service,
    task_service,
    timetable_service,
)
from studytrack.services.entity_store import EntityStore


router = APIRouter(tags=["tracker"])


class NoteCreate(BaseModel):
    """Request body for attaching a note to a subject."""

    title: str
    file_name: str | None = None


def get_store(request: Request) -> EntityStore:
    """Return the app's store with task status and priority re-derived for this request."""
    store: EntityStore = request.app.state.store
    store.refresh_tasks()
    return store


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Tasks


@router.get("/tasks")
async def list_tasks(
    store: EntityStore = Depends(get_store),
    task_status: TaskStatus | None = Query(default=None, alias="status"),
    priority: TaskPriority | None = None,
) -> list[Task]:
    """List tasks, optionally filtered by status and/or priority."""
    return analytics_service.filter_tasks(store.tasks.all(), status=task_status, priority=priority)


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, store: EntityStore = Depends(get_store)) -> Task:
    return task_service.add_task(store=store, data=data)


@router.get("/tasks/overdue")
async def get_overdue_tasks(store: EntityStore = Depends(get_store)) -> list[Task]:
    return analytics_service.overdue_tasks(store.tasks.all())


@router.get("/tasks/upcoming")
async def get_upcoming_tasks(
    store: EntityStore = Depends(get_store),
    days: float = Query(default=settings.upcoming_window_days, ge=0),
) -> list[Task]:
    """Incomplete tasks due within the next ``days`` days."""
    return analytics_service.upcoming_deadlines(store.tasks.all(), days, now=store.now())


@router.get("/tasks/top")
async def get_top_priority_task(store: EntityStore = Depends(get_store)) -> Task | None:
    return analytics_service.top_priority_task(store.tasks.all())


@router.get("/tasks/{task_id}")
async def get_task(task_id: str, store: EntityStore = Depends(get_store)) -> Task:
    return store.tasks.require(task_id)


@router.patch("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_task(task_id: str, updates: TaskUpdate, store: EntityStore = Depends(get_store)) -> Response:
    task_service.update_task(store=store, task_id=task_id, updates=updates)
    return _no_content()


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_task(task_id: str, store: EntityStore = Depends(get_store)) -> Response:
    task_service.delete_task(store=store, task_id=task_id)
    return _no_content()


# Assignments


@router.get("/assignments/handwritten")
async def list_handwritten_assignments(store: EntityStore = Depends(get_store)) -> list[HandwrittenAssignment]:
    return store.handwritten_assignments.all()


@router.post("/assignments/handwritten", status_code=status.HTTP_201_CREATED)
async def create_handwritten_assignment(
    data: HandwrittenAssignmentCreate, store: EntityStore = Depends(get_store)
) -> HandwrittenAssignment:
    return assignment_service.add_handwritten_assignment(store=store, data=data)


@router.get("/assignments/handwritten/{assignment_id}")
async def get_handwritten_assignment(
    assignment_id: str, store: EntityStore = Depends(get_store)
) -> HandwrittenAssignment:
    return store.handwritten_assignments.require(assignment_id)


@router.patch("/assignments/handwritten/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_handwritten_assignment(
    assignment_id: str, updates: HandwrittenAssignmentUpdate, store: EntityStore = Depends(get_store)
) -> Response:
    assignment_service.update_handwritten_assignment(store=store, assignment_id=assignment_id, updates=updates)
    return _no_content()


@router.delete("/assignments/handwritten/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_handwritten_assignment(assignment_id: str, store: EntityStore = Depends(get_store)) -> Response:
    assignment_service.delete_handwritten_assignment(store=store, assignment_id=assignment_id)
    return _no_content()


@router.get("/assignments/online")
async def list_online_assignments(store: EntityStore = Depends(get_store)) -> list[OnlineAssignment]:
    return store.online_assignments.all()


@router.post("/assignments/online", status_code=status.HTTP_201_CREATED)
async def create_online_assignment(
    data: OnlineAssignmentCreate, store: EntityStore = Depends(get_store)
) -> OnlineAssignment:
    return assignment_service.add_online_assignment(store=store, data=data)


@router.get("/assignments/online/{assignment_id}")
async def get_online_assignment(assignment_id: str, store: EntityStore = Depends(get_store)) -> OnlineAssignment:
    return store.online_assignments.require(assignment_id)


@router.patch("/assignments/online/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_online_assignment(
    assignment_id: str, updates: OnlineAssignmentUpdate, store: EntityStore = Depends(get_store)
) -> Response:
    assignment_service.update_online_assignment(store=store, assignment_id=assignment_id, updates=updates)
    return _no_content()


@router.delete("/assignments/online/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_online_assignment(assignment_id: str, store: EntityStore = Depends(get_store)) -> Response:
    assignment_service.delete_online_assignment(store=store, assignment_id=assignment_id)
    return _no_content()


# Exams


@router.get("/exams")
async def list_exams(store: EntityStore = Depends(get_store)) -> list[Exam]:
    return store.exams.all()


@router.post("/exams", status_code=status.HTTP_201_CREATED)
async def create_exam(data: ExamCreate, store: EntityStore = Depends(get_store)) -> Exam:
    return exam_service.add_exam(store=store, data=data)


@router.get("/exams/{exam_id}")
async def get_exam(exam_id: str, store: EntityStore = Depends(get_store)) -> Exam:
    return store.exams.require(exam_id)


@router.patch("/exams/{exam_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_exam(exam_id: str, updates: ExamUpdate, store: EntityStore = Depends(get_store)) -> Response:
    exam_service.update_exam(store=store, exam_id=exam_id, updates=updates)
    return _no_content()


@router.post("/exams/{exam_id}/topics/{topic_id}/toggle", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_exam_topic(exam_id: str, topic_id: str, store: EntityStore = Depends(get_store)) -> Response:
    exam_service.toggle_exam_topic(store=store, exam_id=exam_id, topic_id=topic_id)
    return _no_content()


@router.delete("/exams/{exam_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_exam(exam_id: str, store: EntityStore = Depends(get_store)) -> Response:
    exam_service.delete_exam(store=store, exam_id=exam_id)
    return _no_content()


# Projects


@router.get("/projects")
async def list_projects(store: EntityStore = Depends(get_store)) -> list[Project]:
    return store.projects.all()


@router.post("/projects", status_code=status.HTTP_201_CREATED)
async def create_project(data: ProjectCreate, store: EntityStore = Depends(get_store)) -> Project:
    return project_service.add_project(store=store, data=data)


@router.get("/projects/{project_id}")
async def get_project(project_id: str, store: EntityStore = Depends(get_store)) -> Project:
    return store.projects.require(project_id)


@router.patch("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_project(project_id: str, updates: ProjectUpdate, store: EntityStore = Depends(get_store)) -> Response:
    project_service.update_project(store=store, project_id=project_id, updates=updates)
    return _no_content()


@router.post("/projects/{project_id}/tasks/{project_task_id}/toggle", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_project_task(
    project_id: str, project_task_id: str, store: EntityStore = Depends(get_store)
) -> Response:
    project_service.toggle_project_task(store=store, project_id=project_id, project_task_id=project_task_id)
    return _no_content()


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_project(project_id: str, store: EntityStore = Depends(get_store)) -> Response:
    project_service.delete_project(store=store, project_id=project_id)
    return _no_content()


# Subjects


@router.get("/subjects")
async def list_subjects(store: EntityStore = Depends(get_store)) -> list[Subject]:
    return store.subjects.all()


@router.post("/subjects", status_code=status.HTTP_201_CREATED)
async def create_subject(data: SubjectCreate, store: EntityStore = Depends(get_store)) -> Subject:
    return subject_service.add_subject(store=store, data=data)


@router.get("/subjects/{subject_id}")
async def get_subject(subject_id: str, store: EntityStore = Depends(get_store)) -> Subject:
    return store.subjects.require(subject_id)


@router.patch("/subjects/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_subject(subject_id: str, updates: SubjectUpdate, store: EntityStore = Depends(get_store)) -> Response:
    subject_service.update_subject(store=store, subject_id=subject_id, updates=updates)
    return _no_content()


@router.post("/subjects/{subject_id}/topics/{topic_id}/toggle", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_subject_topic(subject_id: str, topic_id: str, store: EntityStore = Depends(get_store)) -> Response:
    subject_service.toggle_subject_topic(store=store, subject_id=subject_id, topic_id=topic_id)
    return _no_content()


@router.post("/subjects/{subject_id}/notes", status_code=status.HTTP_201_CREATED)
async def add_subject_note(subject_id: str, data: NoteCreate, store: EntityStore = Depends(get_store)) -> Note:
    note = subject_service.add_subject_note(
        store=store, subject_id=subject_id, title=data.title, file_name=data.file_name
    )
    if note is None:
        raise RecordNotFoundError("subjects", subject_id)
    return note


@router.delete("/subjects/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_subject(subject_id: str, store: EntityStore = Depends(get_store)) -> Response:
    subject_service.delete_subject(store=store, subject_id=subject_id)
    return _no_content()


# Timetable


@router.get("/timetable")
async def list_timetable(store: EntityStore = Depends(get_store)) -> list[TimetableEntry]:
    return store.timetable.all()


@router.get("/timetable/week")
async def get_weekly_timetable(store: EntityStore = Depends(get_store)) -> dict[DayOfWeek, list[TimetableEntry]]:
    """Entries grouped by day, Monday to Saturday, each sorted by start time."""
    return analytics_service.weekly_timetable(store.timetable.all())


@router.post("/timetable", status_code=status.HTTP_201_CREATED)
async def create_timetable_entry(data: TimetableEntryCreate, store: EntityStore = Depends(get_store)) -> TimetableEntry:
    return timetable_service.add_timetable_entry(store=store, data=data)


@router.get("/timetable/{entry_id}")
async def get_timetable_entry(entry_id: str, store: EntityStore = Depends(get_store)) -> TimetableEntry:
    return store.timetable.require(entry_id)


@router.patch("/timetable/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_timetable_entry(
    entry_id: str, updates: TimetableEntryUpdate, store: EntityStore = Depends(get_store)
) -> Response:
    timetable_service.update_timetable_entry(store=store, entry_id=entry_id, updates=updates)
    return _no_content()


@router.delete("/timetable/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_timetable_entry(entry_id: str, store: EntityStore = Depends(get_store)) -> Response:
    timetable_service.delete_timetable_entry(store=store, entry_id=entry_id)
    return _no_content()


# Hackathons


@router.get("/hackathons")
async def list_hackathons(store: EntityStore = Depends(get_store)) -> list[Hackathon]:
    return store.hackathons.all()


@router.post("/hackathons", status_code=status.HTTP_201_CREATED)
async def create_hackathon(data: HackathonCreate, store: EntityStore = Depends(get_store)) -> Hackathon:
    return hackathon_service.add_hackathon(store=store, data=data)


@router.get("/hackathons/{hackathon_id}")
async def get_hackathon(hackathon_id: str, store: EntityStore = Depends(get_store)) -> Hackathon:
    return store.hackathons.require(hackathon_id)


@router.patch("/hackathons/{hackathon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_hackathon(
    hackathon_id: str, updates: HackathonUpdate, store: EntityStore = Depends(get_store)
) -> Response:
    hackathon_service.update_hackathon(store=store, hackathon_id=hackathon_id, updates=updates)
    return _no_content()


@router.post("/hackathons/{hackathon_id}/checklist/{item_id}/toggle", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_checklist_item(hackathon_id: str, item_id: str, store: EntityStore = Depends(get_store)) -> Response:
    hackathon_service.toggle_checklist_item(store=store, hackathon_id=hackathon_id, item_id=item_id)
    return _no_content()


@router.delete("/hackathons/{hackathon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_hackathon(hackathon_id: str, store: EntityStore = Depends(get_store)) -> Response:
    hackathon_service.delete_hackathon(store=store, hackathon_id=hackathon_id)
    return _no_content()


# Dashboard


@router.get("/dashboard")
async def get_dashboard(store: EntityStore = Depends(get_store)) -> DashboardSummary:
    """Every dashboard view computed against the current time."""
    return analytics_service.dashboard_summary(store)
