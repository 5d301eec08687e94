"""Pytest configuration and fixtures for unit tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from studytrack.data.seed import build_seed
from studytrack.domain.task import Task, TaskCategory
from studytrack.services.entity_store import EntityStore
from studytrack.services.task_derivation import derive_task


# A Wednesday, midday UTC
NOW = datetime(2026, 3, 4, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Pinned reference instant shared by the store clock and assertions."""
    return NOW


@pytest.fixture
def store(now: datetime) -> EntityStore:
    """Provides a fresh, empty EntityStore whose clock is pinned to ``now``."""
    return EntityStore(clock=lambda: now)


@pytest.fixture
def seeded_store(now: datetime) -> EntityStore:
    """Provides a store loaded with the demo bundle built relative to ``now``."""
    return EntityStore.from_seed(build_seed(now), clock=lambda: now)


@pytest.fixture
def make_task(now: datetime) -> Callable[..., Task]:
    """Factory for standalone, derived Task records (not stored).

    Explicit ``status`` / ``priority`` overrides win over the derived values.
    """
    counter = iter(range(1, 1000))

    def _make(
        *,
        hours: float = 240,
        progress: int = 0,
        category: TaskCategory = TaskCategory.HOMEWORK,
        **overrides: Any,
    ) -> Task:
        fields = {
            "id": str(next(counter)),
            "title": "Task",
            "category": category,
            "deadline": now + timedelta(hours=hours),
            "progress": progress,
        }
        fields.update(overrides)
        task = derive_task(Task(**fields), now=now)
        pinned = {key: overrides[key] for key in ("status", "priority") if key in overrides}
        return task.model_copy(update=pinned)

    return _make
