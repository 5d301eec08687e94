"""Domain models and DTOs."""

from studytrack.domain.assignment import HandwrittenAssignment, OnlineAssignment
from studytrack.domain.common import Topic
from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import ChecklistItem, Hackathon
from studytrack.domain.project import Project, ProjectCategory, ProjectTask
from studytrack.domain.subject import Note, Subject
from studytrack.domain.task import SourceType, Task, TaskCategory, TaskPriority, TaskStatus
from studytrack.domain.timetable import ClassType, DayOfWeek, TimetableEntry


__all__ = [
    "ChecklistItem",
    "ClassType",
    "DayOfWeek",
    "Exam",
    "Hackathon",
    "HandwrittenAssignment",
    "Note",
    "OnlineAssignment",
    "Project",
    "ProjectCategory",
    "ProjectTask",
    "SourceType",
    "Subject",
    "Task",
    "TaskCategory",
    "TaskPriority",
    "TaskStatus",
    "TimetableEntry",
    "Topic",
]
