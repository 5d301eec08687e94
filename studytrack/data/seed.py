"""Demo seed bundle: a semester's worth of coursework relative to ``now``.

Seeded tasks carry placeholder status and priority; the store derives the real
values on insert. The seeded links (``task_id`` / ``source_id``) are consistent
with each other, except that the Exam Prep task and the ML project task point at
their source entities without the exam or sub-task being synchronized.
"""

from datetime import UTC, datetime, timedelta

from studytrack.core.clock import utc_now
from studytrack.domain.assignment import HandwrittenAssignment, OnlineAssignment
from studytrack.domain.common import Topic
from studytrack.domain.exam import Exam
from studytrack.domain.hackathon import ChecklistItem, Hackathon
from studytrack.domain.project import Project, ProjectCategory, ProjectTask
from studytrack.domain.subject import Note, Subject
from studytrack.domain.task import SourceType, Task, TaskCategory
from studytrack.domain.timetable import ClassType, DayOfWeek, TimetableEntry
from studytrack.services.entity_store import StoreSnapshot


def _topics(start_id: int, *entries: tuple[str, bool]) -> list[Topic]:
    return [
        Topic(id=str(start_id + offset), name=name, studied=studied) for offset, (name, studied) in enumerate(entries)
    ]


def _tasks(now: datetime) -> list[Task]:
    def days(n: int) -> datetime:
        return now + timedelta(days=n)

    return [
        Task(
            id="1",
            title="Data Structures Lab 5",
            category=TaskCategory.LAB_FILE,
            subject="Data Structures",
            deadline=days(1),
            progress=65,
            source_type=SourceType.ASSIGNMENT,
            source_id="1",
        ),
        Task(
            id="2",
            title="DBMS Assignment - Normalization",
            category=TaskCategory.ASSIGNMENT,
            subject="Database Management",
            deadline=days(3),
            progress=40,
            source_type=SourceType.ASSIGNMENT,
            source_id="2",
        ),
        Task(
            id="3",
            title="Operating Systems Mid-Term Prep",
            category=TaskCategory.EXAM_PREP,
            subject="Operating Systems",
            deadline=days(5),
            progress=55,
            source_type=SourceType.EXAM,
            source_id="1",
        ),
        Task(
            id="4",
            title="Machine Learning Project: Neural Networks",
            category=TaskCategory.PROJECT_TASK,
            subject="Machine Learning",
            deadline=days(14),
            progress=30,
            source_type=SourceType.PROJECT,
            source_id="1",
        ),
        Task(
            id="5",
            title="Algorithms Homework - Dynamic Programming",
            category=TaskCategory.HOMEWORK,
            subject="Algorithms",
            deadline=days(2),
            progress=80,
        ),
        Task(
            id="6",
            title="Web Development PPT",
            category=TaskCategory.PPT,
            subject="Web Development",
            deadline=days(-1),
            progress=60,
        ),
        Task(
            id="7",
            title="Smart Campus Hackathon",
            category=TaskCategory.HACKATHON,
            deadline=days(7),
            progress=25,
            source_type=SourceType.HACKATHON,
            source_id="1",
        ),
    ]


def _timetable() -> list[TimetableEntry]:
    slots = [
        ("Data Structures", DayOfWeek.MONDAY, "09:00", "10:00", ClassType.LECTURE),
        ("Operating Systems", DayOfWeek.MONDAY, "11:00", "12:00", ClassType.LECTURE),
        ("Database Management", DayOfWeek.TUESDAY, "10:00", "11:00", ClassType.LECTURE),
        ("Data Structures", DayOfWeek.TUESDAY, "14:00", "16:00", ClassType.LAB),
        ("Machine Learning", DayOfWeek.WEDNESDAY, "09:00", "10:00", ClassType.LECTURE),
        ("Algorithms", DayOfWeek.WEDNESDAY, "11:00", "12:00", ClassType.TUTORIAL),
        ("Operating Systems", DayOfWeek.THURSDAY, "10:00", "12:00", ClassType.LAB),
        ("Web Development", DayOfWeek.FRIDAY, "09:00", "10:00", ClassType.LECTURE),
        ("Database Management", DayOfWeek.FRIDAY, "14:00", "16:00", ClassType.LAB),
    ]
    return [
        TimetableEntry(id=str(index), subject=subject, day=day, start_time=start, end_time=end, type=class_type)
        for index, (subject, day, start, end, class_type) in enumerate(slots, start=1)
    ]


def build_seed(now: datetime | None = None) -> StoreSnapshot:
    """Build the demo bundle with deadlines relative to ``now`` (defaults to the current time)."""
    now = now if now is not None else utc_now()

    def days(n: int) -> datetime:
        return now + timedelta(days=n)

    return StoreSnapshot(
        tasks=_tasks(now),
        handwritten_assignments=[
            HandwrittenAssignment(
                id="1",
                subject="Data Structures",
                title="Data Structures Lab 5",
                deadline=days(1),
                progress=65,
                task_id="1",
            ),
            HandwrittenAssignment(
                id="3",
                subject="Computer Networks",
                title="Network Protocols Report",
                deadline=days(10),
                progress=20,
            ),
        ],
        online_assignments=[
            OnlineAssignment(
                id="2",
                subject="Database Management",
                title="DBMS Assignment - Normalization",
                deadline=days(3),
                progress=40,
                file_name="dbms_normalization.pdf",
                file_type="PDF",
                task_id="2",
            ),
        ],
        exams=[
            Exam(
                id="1",
                subject="Operating Systems",
                date=days(5),
                time="10:00 AM",
                topics=_topics(
                    1,
                    ("Process Management", True),
                    ("Memory Management", True),
                    ("File Systems", False),
                    ("Deadlocks", False),
                    ("CPU Scheduling", True),
                ),
            ),
            Exam(
                id="2",
                subject="Database Management",
                date=days(10),
                time="2:00 PM",
                topics=_topics(
                    6,
                    ("SQL Queries", True),
                    ("Normalization", False),
                    ("Transactions", False),
                    ("Indexing", False),
                ),
            ),
        ],
        projects=[
            Project(
                id="1",
                name="ML Neural Network Classifier",
                category=ProjectCategory.SUBJECT,
                github_url="https://github.com/username/ml-neural-net",
                local_path="/projects/ml-neural-net",
                tasks=[
                    ProjectTask(id="1", title="Data Collection", completed=True),
                    ProjectTask(id="2", title="Data Preprocessing", completed=True),
                    ProjectTask(id="3", title="Model Training", deadline=days(14), task_id="4"),
                    ProjectTask(id="4", title="Testing & Validation"),
                    ProjectTask(id="5", title="Documentation"),
                ],
            ),
            Project(
                id="2",
                name="Personal Portfolio Website",
                category=ProjectCategory.PERSONAL,
                github_url="https://github.com/username/portfolio",
                local_path="/projects/portfolio",
                tasks=[
                    ProjectTask(id="6", title="Design Mockups", completed=True),
                    ProjectTask(id="7", title="Frontend Development"),
                    ProjectTask(id="8", title="Deployment"),
                ],
            ),
        ],
        subjects=[
            Subject(
                id="1",
                name="Data Structures",
                code="CS201",
                topics=_topics(
                    1,
                    ("Arrays & Linked Lists", True),
                    ("Stacks & Queues", True),
                    ("Trees", True),
                    ("Graphs", False),
                    ("Hashing", False),
                ),
                notes=[
                    Note(
                        id="1",
                        title="DSA Unit 1 Notes",
                        file_name="dsa_unit1.pdf",
                        upload_date=datetime(2026, 1, 10, tzinfo=UTC),
                    ),
                    Note(
                        id="2",
                        title="DSA Unit 2 Notes",
                        file_name="dsa_unit2.pdf",
                        upload_date=datetime(2026, 1, 12, tzinfo=UTC),
                    ),
                ],
            ),
            Subject(
                id="2",
                name="Operating Systems",
                code="CS301",
                topics=_topics(
                    6,
                    ("Introduction to OS", True),
                    ("Process Management", True),
                    ("Memory Management", True),
                    ("File Systems", False),
                    ("Deadlocks", False),
                ),
                notes=[
                    Note(
                        id="3",
                        title="OS Lecture Notes",
                        file_name="os_notes.pdf",
                        upload_date=datetime(2026, 1, 8, tzinfo=UTC),
                    ),
                ],
            ),
            Subject(
                id="3",
                name="Database Management",
                code="CS302",
                topics=_topics(
                    11,
                    ("Introduction to DBMS", True),
                    ("SQL Basics", True),
                    ("Normalization", False),
                    ("Transactions", False),
                ),
            ),
        ],
        timetable=_timetable(),
        hackathons=[
            Hackathon(
                id="1",
                name="Smart Campus Hackathon",
                start_date=days(5),
                end_date=days(7),
                schedule="9:00 AM - 6:00 PM",
                checklist=[
                    ChecklistItem(id="1", label="Team Formation", completed=True),
                    ChecklistItem(id="2", label="Idea Finalization"),
                    ChecklistItem(id="3", label="Prototype Development"),
                    ChecklistItem(id="4", label="Presentation Ready"),
                ],
                task_id="7",
            ),
        ],
    )
