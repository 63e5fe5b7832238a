"""Session Engine - Pure logic for drafting and creating study sessions.

ARCHITECTURE: Pure logic, NO Home Assistant dependencies.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
import uuid

from .. import const

if TYPE_CHECKING:
    from ..type_defs import LogEntryData


class SessionEngine:
    """Stateless helpers for the session draft and new log entries."""

    @staticmethod
    def new_entry_id() -> str:
        """Return a collision-resistant log entry id."""
        return uuid.uuid4().hex

    @staticmethod
    def adjust_hours(hours: float, delta: float) -> float:
        """Apply a draft adjustment.

        Increments are unbounded; decrements clamp at zero.
        """
        return max(float(const.DEFAULT_ZERO), hours + delta)

    @staticmethod
    def daily_goal_progress(
        hours: float, daily_goal: float = const.DAILY_GOAL_HOURS
    ) -> float:
        """Return the draft's share of the daily goal, capped at 1.0."""
        if daily_goal <= 0:
            return 1.0
        return min(1.0, max(0.0, hours / daily_goal))

    @classmethod
    def create_entry(
        cls,
        hours: float,
        subject_id: str,
        now: datetime | None = None,
    ) -> LogEntryData:
        """Build a new log entry stamped with the creation time.

        Args:
            hours: Hours studied (not validated here)
            subject_id: Catalog subject id (not validated here)
            now: Optional creation time override for deterministic tests

        Returns:
            LogEntryData ready to append to the Log Store
        """
        created = now or datetime.now(UTC)
        return {
            const.DATA_LOG_ENTRY_ID: cls.new_entry_id(),
            const.DATA_LOG_ENTRY_DATE: created.isoformat(),
            const.DATA_LOG_ENTRY_HOURS: hours,
            const.DATA_LOG_ENTRY_SUBJECT_ID: subject_id,
        }
