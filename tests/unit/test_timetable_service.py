"""Unit tests for timetable_service module and timetable validation."""

import pytest
from pydantic import ValidationError

from studytrack.domain.create_models import TimetableEntryCreate
from studytrack.domain.timetable import ClassType, DayOfWeek
from studytrack.domain.update_models import TimetableEntryUpdate
from studytrack.services import timetable_service


@pytest.fixture
def entry(store):
    data = TimetableEntryCreate(
        subject="Algorithms", day=DayOfWeek.WEDNESDAY, start_time="11:00", end_time="12:00", type=ClassType.TUTORIAL
    )
    return timetable_service.add_timetable_entry(store=store, data=data)


@pytest.mark.unit
class TestTimetableValidation:
    """Tests for slot time validation."""

    @pytest.mark.parametrize("bad_time", ["9:00", "24:00", "12:60", "noon"])
    def test_rejects_malformed_times(self, bad_time):
        with pytest.raises(ValidationError):
            TimetableEntryCreate(
                subject="Algorithms", day=DayOfWeek.MONDAY, start_time=bad_time, end_time="23:00", type=ClassType.LAB
            )

    def test_rejects_slot_ending_before_start(self):
        with pytest.raises(ValidationError, match="end_time must be after start_time"):
            TimetableEntryCreate(
                subject="Algorithms", day=DayOfWeek.MONDAY, start_time="10:00", end_time="09:00", type=ClassType.LAB
            )

    def test_rejects_sunday(self):
        with pytest.raises(ValidationError):
            TimetableEntryCreate(
                subject="Algorithms", day="Sunday", start_time="09:00", end_time="10:00", type=ClassType.LAB
            )


@pytest.mark.unit
class TestTimetableService:
    """Tests for timetable CRUD."""

    def test_update_moves_slot(self, store, entry):
        timetable_service.update_timetable_entry(
            store=store,
            entry_id=entry.id,
            updates=TimetableEntryUpdate(day=DayOfWeek.FRIDAY, start_time="14:00", end_time="16:00"),
        )

        stored = store.timetable.get(entry.id)
        assert stored.day == DayOfWeek.FRIDAY
        assert (stored.start_time, stored.end_time) == ("14:00", "16:00")

    def test_update_checks_merged_slot_order(self, store, entry):
        with pytest.raises(ValidationError):
            timetable_service.update_timetable_entry(
                store=store, entry_id=entry.id, updates=TimetableEntryUpdate(end_time="10:00")
            )

        assert store.timetable.get(entry.id) == entry

    def test_delete(self, store, entry):
        timetable_service.delete_timetable_entry(store=store, entry_id=entry.id)

        assert len(store.timetable) == 0
