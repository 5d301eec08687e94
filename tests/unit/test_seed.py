"""Tests for the demo seed bundle."""

from datetime import timedelta

import pytest

from studytrack.data.seed import build_seed
from studytrack.domain.task import SourceType


@pytest.mark.unit
class TestBuildSeed:
    """Tests for build_seed function."""

    def test_collection_sizes(self, now):
        seed = build_seed(now)

        assert len(seed.tasks) == 7
        assert len(seed.handwritten_assignments) == 2
        assert len(seed.online_assignments) == 1
        assert len(seed.exams) == 2
        assert len(seed.projects) == 2
        assert len(seed.subjects) == 3
        assert len(seed.timetable) == 9
        assert len(seed.hackathons) == 1

    def test_deadlines_are_relative_to_now(self, now):
        seed = build_seed(now)

        assert seed.tasks[0].deadline == now + timedelta(days=1)
        assert seed.tasks[5].deadline == now - timedelta(days=1)
        assert seed.hackathons[0].end_date == now + timedelta(days=7)

    def test_links_resolve_both_ways(self, seeded_store):
        assignment = seeded_store.handwritten_assignments.get("1")
        online = seeded_store.online_assignments.get("2")
        hackathon = seeded_store.hackathons.get("1")

        for source, source_type in ((assignment, SourceType.ASSIGNMENT), (online, SourceType.ASSIGNMENT)):
            task = seeded_store.tasks.get(source.task_id)
            assert task.source_type == source_type
            assert task.source_id == source.id

        hackathon_task = seeded_store.tasks.get(hackathon.task_id)
        assert hackathon_task.source_type == SourceType.HACKATHON
        assert hackathon_task.title == hackathon.name

    def test_unlinked_assignment_has_no_task(self, seeded_store):
        assert seeded_store.handwritten_assignments.get("3").task_id is None
