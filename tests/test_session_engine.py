"""Unit tests for SessionEngine - draft arithmetic and entry creation."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from custom_components.studytracker import const
from custom_components.studytracker.engines.session_engine import SessionEngine


class TestAdjustHours:
    """Tests for SessionEngine.adjust_hours."""

    def test_increment(self) -> None:
        """Positive deltas add to the draft."""
        assert SessionEngine.adjust_hours(2.5, 0.5) == 3.0

    def test_decrement(self) -> None:
        """Negative deltas subtract from the draft."""
        assert SessionEngine.adjust_hours(2.5, -0.5) == 2.0

    def test_clamped_at_zero(self) -> None:
        """The draft never goes below zero."""
        assert SessionEngine.adjust_hours(0.0, -0.5) == 0.0
        assert SessionEngine.adjust_hours(0.5, -2.0) == 0.0

    def test_increment_unbounded(self) -> None:
        """There is no upper bound on the draft."""
        assert SessionEngine.adjust_hours(24.0, 0.5) == 24.5


class TestDailyGoalProgress:
    """Tests for SessionEngine.daily_goal_progress."""

    def test_default_session_share(self) -> None:
        """The default 2.5 h draft fills 2.5/8 of the daily goal."""
        progress = SessionEngine.daily_goal_progress(const.DEFAULT_SESSION_HOURS)

        assert progress == pytest.approx(2.5 / 8)

    def test_capped_at_one(self) -> None:
        """Exceeding the goal caps the ring at full."""
        assert SessionEngine.daily_goal_progress(12.0) == 1.0

    def test_zero_goal(self) -> None:
        """A zero goal counts as met."""
        assert SessionEngine.daily_goal_progress(1.0, daily_goal=0) == 1.0


class TestCreateEntry:
    """Tests for SessionEngine.create_entry and new_entry_id."""

    def test_entry_fields(self) -> None:
        """The entry carries hours, subject and the creation time."""
        now = datetime(2026, 1, 18, 12, 30, tzinfo=UTC)

        entry = SessionEngine.create_entry(2.5, "japanese", now=now)

        assert entry[const.DATA_LOG_ENTRY_HOURS] == 2.5
        assert entry[const.DATA_LOG_ENTRY_SUBJECT_ID] == "japanese"
        assert entry[const.DATA_LOG_ENTRY_DATE] == "2026-01-18T12:30:00+00:00"
        assert entry[const.DATA_LOG_ENTRY_ID]

    def test_ids_unique_for_same_instant(self) -> None:
        """Entries created at the same instant still get distinct ids."""
        now = datetime(2026, 1, 18, 12, 30, tzinfo=UTC)

        ids = {
            SessionEngine.create_entry(1.0, "sat", now=now)[const.DATA_LOG_ENTRY_ID]
            for _ in range(100)
        }

        assert len(ids) == 100

    def test_subject_not_validated(self) -> None:
        """Unknown subject ids are accepted as given."""
        entry = SessionEngine.create_entry(1.0, "nonexistent")

        assert entry[const.DATA_LOG_ENTRY_SUBJECT_ID] == "nonexistent"
