"""Badge Engine - Pure logic for cumulative-hour badge awards.

This engine provides stateless, pure Python functions for:
- Building the canonical badge set from the templates
- Reconciling a loaded badge list against the templates
- Threshold evaluation with one-way (never revoked) awards
- Progress reporting toward each threshold

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions operate on passed-in data and never mutate it.
The BadgeManager is responsible for persistence and notifications.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..type_defs import BadgeData, BadgeEvaluation


def _now_iso() -> str:
    """Return current UTC time as ISO string (engine-internal helper)."""
    return datetime.now(UTC).isoformat()


class BadgeEngine:
    """Pure logic engine for badge evaluation.

    All methods are static - no instance state.

    Award rules:
        - Badges are evaluated in catalog (ascending threshold) order.
        - A badge is earned when total_hours >= hoursRequired.
        - dateEarned moves from the empty sentinel to a timestamp exactly once.
        - Earned badges stay earned even if the total later drops.
        - One evaluation pass may earn several badges; all share the pass
          timestamp and are returned together so the caller can persist them
          in a single replacement of the badge collection.
    """

    @staticmethod
    def default_badges() -> list[BadgeData]:
        """Return fresh, unearned copies of the badge templates."""
        return [
            {
                const.DATA_BADGE_ID: template[const.DATA_BADGE_ID],
                const.DATA_BADGE_EMOJI: template[const.DATA_BADGE_EMOJI],
                const.DATA_BADGE_NAME: template[const.DATA_BADGE_NAME],
                const.DATA_BADGE_HOURS_REQUIRED: template[
                    const.DATA_BADGE_HOURS_REQUIRED
                ],
                const.DATA_BADGE_DATE_EARNED: const.BADGE_UNEARNED,
            }
            for template in const.BADGE_TEMPLATES
        ]

    @staticmethod
    def is_earned(badge: BadgeData) -> bool:
        """Return True when the badge carries a non-empty award timestamp."""
        return badge.get(const.DATA_BADGE_DATE_EARNED, const.BADGE_UNEARNED) != (
            const.BADGE_UNEARNED
        )

    @classmethod
    def merge_with_templates(cls, stored: Iterable[BadgeData]) -> list[BadgeData]:
        """Reconcile stored badges with the canonical templates.

        Template order and definition fields win. The stored dateEarned of a
        matching id is kept; ids that are not templates are dropped; templates
        missing from storage come back unearned. When an id is stored more
        than once, the first non-empty dateEarned wins.
        """
        earned_dates: dict[str, str] = {}
        for badge in stored:
            date_earned = badge[const.DATA_BADGE_DATE_EARNED]
            if date_earned:
                earned_dates.setdefault(badge[const.DATA_BADGE_ID], date_earned)
        merged = cls.default_badges()
        for badge in merged:
            date_earned = earned_dates.get(badge[const.DATA_BADGE_ID])
            if date_earned:
                badge[const.DATA_BADGE_DATE_EARNED] = date_earned
        return merged

    @classmethod
    def evaluate(
        cls,
        total_hours: float,
        badges: Sequence[BadgeData],
        now_iso: str | None = None,
    ) -> BadgeEvaluation:
        """Evaluate every badge against the current total.

        Pure function - the input sequence and its badges are not modified.

        Args:
            total_hours: Current grand total of logged hours
            badges: Badge collection in catalog order
            now_iso: Optional award timestamp override for deterministic tests

        Returns:
            Tuple of (updated_badges, newly_earned). updated_badges is a full
            replacement collection; newly_earned preserves catalog order.
        """
        timestamp = now_iso or _now_iso()
        updated: list[BadgeData] = []
        newly_earned: list[BadgeData] = []

        for badge in badges:
            if (
                not cls.is_earned(badge)
                and total_hours >= badge[const.DATA_BADGE_HOURS_REQUIRED]
            ):
                earned_badge: BadgeData = {
                    **badge,
                    const.DATA_BADGE_DATE_EARNED: timestamp,
                }
                updated.append(earned_badge)
                newly_earned.append(earned_badge)
            else:
                updated.append(badge)

        return updated, newly_earned

    @classmethod
    def badge_progress(cls, total_hours: float, badge: BadgeData) -> float:
        """Return progress toward a badge as a percentage capped at 100."""
        if cls.is_earned(badge):
            return const.PERCENT_COMPLETE

        hours_required = badge[const.DATA_BADGE_HOURS_REQUIRED]
        if hours_required <= 0:
            return const.PERCENT_COMPLETE

        return min(
            const.PERCENT_COMPLETE,
            max(0.0, total_hours / hours_required * const.PERCENT_COMPLETE),
        )

    @classmethod
    def next_badge(cls, badges: Iterable[BadgeData]) -> BadgeData | None:
        """Return the first unearned badge in catalog order, if any."""
        for badge in badges:
            if not cls.is_earned(badge):
                return badge
        return None
