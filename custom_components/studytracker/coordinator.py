# File: coordinator.py
"""Coordinator for the Study Tracker integration.

Owns the in-memory snapshot and runs the study-session pipeline explicitly:

    log mutation (persist study log)
      -> aggregation
      -> badge evaluation (persist badges once, if anything changed)
      -> one event + one persistent notification per newly earned badge
      -> listener update

There are no background refreshes and no hidden watchers; every step is
awaited in order inside the calling coroutine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.components import persistent_notification
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from . import const
from . import st_helpers as sh
from .engines.aggregation_engine import AggregationEngine
from .engines.session_engine import SessionEngine
from .managers.badge_manager import BadgeManager
from .managers.log_manager import LogManager
from .type_defs import StudySnapshot

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .store import StudyTrackerStore
    from .type_defs import BadgeData, LogEntryData, SubjectData


class StudyTrackerCoordinator(DataUpdateCoordinator[StudySnapshot]):
    """Coordinator for Study Tracker integration.

    Also holds the session draft (selected subject and hours), which lives in
    memory only and is reset after every commit.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        store: StudyTrackerStore,
    ) -> None:
        """Initialize the StudyTrackerCoordinator."""
        super().__init__(
            hass,
            const.LOGGER,
            config_entry=config_entry,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=None,
        )
        self.store = store
        self.log_manager = LogManager(store)
        self.badge_manager = BadgeManager(store)
        self.selected_subject: str = const.SUBJECTS[0][const.DATA_SUBJECT_ID]
        self.draft_hours: float = const.DEFAULT_SESSION_HOURS

    # -------------------------------------------------------------------------------------
    # Read Accessors
    # -------------------------------------------------------------------------------------

    @property
    def subjects(self) -> list[SubjectData]:
        """Return the static subject catalog."""
        return list(const.SUBJECTS)

    @property
    def log_entries(self) -> list[LogEntryData]:
        """Return the study log in insertion order."""
        return self.log_manager.all()

    @property
    def badges(self) -> list[BadgeData]:
        """Return the badge collection in catalog order."""
        return self.badge_manager.badges

    @property
    def total_hours(self) -> float:
        """Return the grand total, recomputed from the full log."""
        return AggregationEngine.total_hours(self.log_manager.all())

    @property
    def subject_totals(self) -> dict[str, float]:
        """Return hours per catalog subject, recomputed from the full log."""
        return AggregationEngine.subject_totals(self.log_manager.all())

    def _build_snapshot(self) -> StudySnapshot:
        """Derive the published snapshot from the current log and badges."""
        log = self.log_manager.all()
        return StudySnapshot(
            total_hours=AggregationEngine.total_hours(log),
            subject_totals=AggregationEngine.subject_totals(log),
            unknown_subject_hours=AggregationEngine.unknown_subject_hours(log),
            study_log=log,
            badges=self.badge_manager.badges,
        )

    # -------------------------------------------------------------------------------------
    # First Refresh
    # -------------------------------------------------------------------------------------

    async def _async_update_data(self) -> StudySnapshot:
        """Return the current snapshot (no polling source)."""
        return self._build_snapshot()

    async def async_config_entry_first_refresh(self) -> None:
        """Reconcile badges and catch up any award the stored state missed."""
        await self.badge_manager.async_setup()

        # Badge record may lag the log, e.g. after a badge file was reset.
        total = self.total_hours
        newly_earned = await self.badge_manager.async_evaluate(total)
        for badge in newly_earned:
            self._announce_badge(badge, total)

        await super().async_config_entry_first_refresh()

    # -------------------------------------------------------------------------------------
    # Session Pipeline
    # -------------------------------------------------------------------------------------

    async def async_record_session(
        self, subject_id: str, hours: float
    ) -> list[BadgeData]:
        """Append a new session and run the pipeline.

        The subject id is not validated here; unknown subjects are tolerated
        and simply excluded from every subject total.

        Returns:
            Badges newly earned by this session (empty if none)
        """
        entry = SessionEngine.create_entry(hours, subject_id)
        await self.log_manager.async_append(entry)
        const.LOGGER.info(
            "INFO: Recorded %s h of '%s' (entry '%s')",
            hours,
            sh.get_subject_display_name(subject_id),
            entry[const.DATA_LOG_ENTRY_ID],
        )
        return await self._async_after_log_change()

    async def async_delete_session(self, entry_id: str) -> list[BadgeData]:
        """Remove a session and run the pipeline.

        Earned badges are never revoked, so this normally returns [].
        """
        await self.log_manager.async_remove(entry_id)
        const.LOGGER.info("INFO: Deleted study session '%s'", entry_id)
        return await self._async_after_log_change()

    async def async_commit_draft(self) -> list[BadgeData]:
        """Record the current draft and reset draft hours to the default."""
        hours = self.draft_hours
        self.draft_hours = const.DEFAULT_SESSION_HOURS
        return await self.async_record_session(self.selected_subject, hours)

    async def _async_after_log_change(self) -> list[BadgeData]:
        """Aggregate, evaluate badges, announce awards, update listeners."""
        total = self.total_hours
        newly_earned = await self.badge_manager.async_evaluate(total)
        for badge in newly_earned:
            self._announce_badge(badge, total)

        self.async_set_updated_data(self._build_snapshot())
        return newly_earned

    def _announce_badge(self, badge: BadgeData, total_hours: float) -> None:
        """Fire the badge-earned event and raise a one-shot notification."""
        badge_id = badge[const.DATA_BADGE_ID]
        self.hass.bus.async_fire(
            const.EVENT_BADGE_EARNED,
            {
                const.ATTR_BADGE_ID: badge_id,
                const.ATTR_BADGE_NAME: badge[const.DATA_BADGE_NAME],
                const.ATTR_BADGE_EMOJI: badge[const.DATA_BADGE_EMOJI],
                const.ATTR_HOURS_REQUIRED: badge[const.DATA_BADGE_HOURS_REQUIRED],
                const.ATTR_DATE_EARNED: badge[const.DATA_BADGE_DATE_EARNED],
                const.ATTR_TOTAL_HOURS: total_hours,
            },
        )
        persistent_notification.async_create(
            self.hass,
            f"{badge[const.DATA_BADGE_EMOJI]} You earned '{badge[const.DATA_BADGE_NAME]}' "
            f"for studying {badge[const.DATA_BADGE_HOURS_REQUIRED]} hours!",
            title=const.NOTIFICATION_TITLE_BADGE_EARNED,
            notification_id=f"{const.NOTIFICATION_ID_BADGE_PREFIX}{badge_id}",
        )

    # -------------------------------------------------------------------------------------
    # Session Draft
    # -------------------------------------------------------------------------------------

    def set_selected_subject(self, subject_id: str) -> None:
        """Select the subject the next committed session is logged against."""
        sh.ensure_known_subject(subject_id)
        self.selected_subject = subject_id
        self.async_update_listeners()

    def adjust_draft_hours(self, delta: float) -> float:
        """Adjust the draft hours (clamped at zero) and return the new value."""
        self.draft_hours = SessionEngine.adjust_hours(self.draft_hours, delta)
        self.async_update_listeners()
        return self.draft_hours
