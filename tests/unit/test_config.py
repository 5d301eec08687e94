"""Tests for configuration module."""

import pytest
from pydantic import ValidationError

from studytrack.core.config import Constants, Settings, constants
from studytrack.domain.task import TaskCategory


@pytest.mark.unit
class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ("SEED_DEMO_DATA", "UPCOMING_WINDOW_DAYS", "DASHBOARD_UPCOMING_LIMIT", "DASHBOARD_EXAM_LIMIT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.seed_demo_data is True
        assert settings.upcoming_window_days == 7
        assert settings.dashboard_upcoming_limit == 5
        assert settings.dashboard_exam_limit == 3

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        monkeypatch.setenv("UPCOMING_WINDOW_DAYS", "14")

        settings = Settings(_env_file=None)

        assert settings.seed_demo_data is False
        assert settings.upcoming_window_days == 14

    def test_rejects_non_positive_limits(self, monkeypatch):
        monkeypatch.setenv("DASHBOARD_UPCOMING_LIMIT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


@pytest.mark.unit
class TestConstants:
    """Tests for scoring constants."""

    def test_every_category_has_a_weight(self):
        assert set(Constants.CATEGORY_WEIGHTS) == set(TaskCategory)

    def test_level_thresholds_are_ordered(self):
        assert constants.PRIORITY_CRITICAL_MIN > constants.PRIORITY_HIGH_MIN > constants.PRIORITY_MEDIUM_MIN
