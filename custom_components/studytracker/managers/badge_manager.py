"""Badge Manager - applies badge evaluations and persists award state.

The BadgeEngine decides which badges are earned; this manager owns the side
effects that follow: one atomic replacement of the badge collection and one
storage write per evaluation pass that changed anything. Notifications are
left to the caller, which receives the newly earned badges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..engines.badge_engine import BadgeEngine

if TYPE_CHECKING:
    from ..store import StudyTrackerStore
    from ..type_defs import BadgeData


class BadgeManager:
    """Stateful wrapper around BadgeEngine for the loaded badge collection."""

    def __init__(self, store: StudyTrackerStore) -> None:
        """Initialize manager.

        Args:
            store: Loaded storage wrapper holding the badge record
        """
        self._store = store

    @property
    def badges(self) -> list[BadgeData]:
        """Return a copy of the badge collection in catalog order."""
        return list(self._store.badges)

    async def async_setup(self) -> None:
        """Reconcile loaded badges with the canonical templates.

        A missing or invalid badge record arrives here as an empty list and
        becomes the default template set. Storage is rewritten only when the
        reconciled collection differs from what was loaded.
        """
        merged = BadgeEngine.merge_with_templates(self._store.badges)
        if merged != self._store.badges:
            const.LOGGER.info(
                "INFO: Badge Setup - Reconciled %s stored badge(s) with %s templates",
                len(self._store.badges),
                len(merged),
            )
            self._store.set_badges(merged)
            await self._store.async_save_badges()

    async def async_evaluate(
        self, total_hours: float, now_iso: str | None = None
    ) -> list[BadgeData]:
        """Evaluate thresholds against the current total.

        All badges earned in this pass are applied together as a single
        replacement of the collection, followed by a single write.

        Args:
            total_hours: Current grand total of logged hours
            now_iso: Optional award timestamp override for deterministic tests

        Returns:
            Newly earned badges in catalog order (empty if none)
        """
        updated, newly_earned = BadgeEngine.evaluate(
            total_hours, self._store.badges, now_iso
        )
        if not newly_earned:
            return []

        for badge in newly_earned:
            const.LOGGER.info(
                "INFO: Award Badge - Awarding badge '%s' (%s) at %s total hours",
                badge[const.DATA_BADGE_ID],
                badge[const.DATA_BADGE_NAME],
                total_hours,
            )

        self._store.set_badges(updated)
        await self._store.async_save_badges()
        return newly_earned
