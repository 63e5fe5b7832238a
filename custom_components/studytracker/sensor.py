# File: sensor.py
"""Sensors for the Study Tracker integration.

Sensors Defined in This File (5 types):

01. StudyTotalHoursSensor      - grand total of logged hours
02. SubjectHoursSensor         - hours per catalog subject (one per subject)
03. StudyBadgeSensor           - earned/locked state per badge (one per badge)
04. StudySessionLogSensor      - session count, sessions newest first
05. StudyDraftHoursSensor      - hours of the not-yet-committed session
"""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import UnitOfTime
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from . import const
from . import st_helpers as sh
from .coordinator import StudyTrackerCoordinator
from .engines.aggregation_engine import AggregationEngine
from .engines.badge_engine import BadgeEngine
from .engines.session_engine import SessionEngine
from .entity import StudyTrackerCoordinatorEntity
from .type_defs import BadgeData, SubjectData


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up sensors for Study Tracker integration."""
    data = hass.data[const.DOMAIN][entry.entry_id]
    coordinator: StudyTrackerCoordinator = data[const.COORDINATOR]

    entities: list[SensorEntity] = [
        StudyTotalHoursSensor(coordinator, entry),
        StudySessionLogSensor(coordinator, entry),
        StudyDraftHoursSensor(coordinator, entry),
    ]

    for subject in coordinator.subjects:
        entities.append(SubjectHoursSensor(coordinator, entry, subject))

    for badge in coordinator.badges:
        entities.append(StudyBadgeSensor(coordinator, entry, badge))

    async_add_entities(entities)


# ------------------------------------------------------------------------------------------
class StudyTotalHoursSensor(StudyTrackerCoordinatorEntity, SensorEntity):
    """Sensor for the grand total of logged study hours.

    Uses MEASUREMENT rather than TOTAL_INCREASING because deleting a session
    lowers the total.
    """

    _attr_translation_key = const.TRANS_KEY_SENSOR_TOTAL_HOURS
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = UnitOfTime.HOURS
    _attr_icon = "mdi:book-clock"

    def __init__(
        self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SENSOR_ST_UID_SUFFIX_TOTAL_HOURS}"
        self.entity_id = f"{const.SENSOR_ST_PREFIX}{const.SENSOR_ST_EID_TOTAL_HOURS}"

    @property
    def native_value(self) -> float:
        """Return total hours across all sessions."""
        return AggregationEngine.round_hours(self.coordinator.total_hours)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose badge standing and hours logged against unknown subjects."""
        log = self.coordinator.log_entries
        badges = self.coordinator.badges
        total = self.coordinator.total_hours
        next_badge = BadgeEngine.next_badge(badges)

        attributes: dict[str, Any] = {
            const.ATTR_SESSION_COUNT: len(log),
            const.ATTR_UNKNOWN_SUBJECT_HOURS: AggregationEngine.round_hours(
                AggregationEngine.unknown_subject_hours(log)
            ),
            const.ATTR_BADGES_EARNED: [
                badge[const.DATA_BADGE_NAME]
                for badge in badges
                if BadgeEngine.is_earned(badge)
            ],
            const.ATTR_NEXT_BADGE: None,
            const.ATTR_HOURS_TO_NEXT_BADGE: None,
        }
        if next_badge is not None:
            attributes[const.ATTR_NEXT_BADGE] = next_badge[const.DATA_BADGE_NAME]
            attributes[const.ATTR_HOURS_TO_NEXT_BADGE] = AggregationEngine.round_hours(
                max(0.0, next_badge[const.DATA_BADGE_HOURS_REQUIRED] - total)
            )
        return attributes


# ------------------------------------------------------------------------------------------
class SubjectHoursSensor(StudyTrackerCoordinatorEntity, SensorEntity):
    """Sensor for hours logged against a single catalog subject."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_SUBJECT_HOURS
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = UnitOfTime.HOURS

    def __init__(
        self,
        coordinator: StudyTrackerCoordinator,
        entry: ConfigEntry,
        subject: SubjectData,
    ) -> None:
        """Initialize the sensor.

        Args:
            coordinator: StudyTrackerCoordinator instance for data access.
            entry: ConfigEntry for this integration instance.
            subject: Catalog entry this sensor reports on.
        """
        super().__init__(coordinator, entry)
        self._subject_id = subject[const.DATA_SUBJECT_ID]
        self._subject_name = subject[const.DATA_SUBJECT_NAME]
        self._subject_emoji = subject[const.DATA_SUBJECT_EMOJI]
        self._attr_unique_id = (
            f"{entry.entry_id}_{self._subject_id}"
            f"{const.SENSOR_ST_UID_SUFFIX_SUBJECT_HOURS}"
        )
        self._attr_translation_placeholders = {
            const.TRANS_KEY_PLACEHOLDER_SUBJECT_NAME: self._subject_name,
        }
        self.entity_id = (
            f"{const.SENSOR_ST_PREFIX}{self._subject_id}"
            f"{const.SENSOR_ST_EID_SUFFIX_SUBJECT_HOURS}"
        )

    @property
    def native_value(self) -> float:
        """Return hours logged for this subject."""
        totals = self.coordinator.subject_totals
        return AggregationEngine.round_hours(
            totals.get(self._subject_id, float(const.DEFAULT_ZERO))
        )

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose catalog details of the subject."""
        return {
            const.ATTR_SUBJECT_ID: self._subject_id,
            const.ATTR_SUBJECT_NAME: self._subject_name,
            const.ATTR_SUBJECT_EMOJI: self._subject_emoji,
        }


# ------------------------------------------------------------------------------------------
class StudyBadgeSensor(StudyTrackerCoordinatorEntity, SensorEntity):
    """Sensor showing whether a badge is earned and progress toward it."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_BADGE

    def __init__(
        self,
        coordinator: StudyTrackerCoordinator,
        entry: ConfigEntry,
        badge: BadgeData,
    ) -> None:
        """Initialize the sensor for one badge of the catalog."""
        super().__init__(coordinator, entry)
        self._badge_id = badge[const.DATA_BADGE_ID]
        self._attr_unique_id = (
            f"{entry.entry_id}_{self._badge_id}{const.SENSOR_ST_UID_SUFFIX_BADGE}"
        )
        self._attr_translation_placeholders = {
            const.TRANS_KEY_PLACEHOLDER_BADGE_NAME: badge[const.DATA_BADGE_NAME],
        }
        self.entity_id = (
            f"{const.SENSOR_ST_PREFIX}{const.SENSOR_ST_EID_PREFIX_BADGE}{self._badge_id}"
        )

    def _current_badge(self) -> BadgeData | None:
        for badge in self.coordinator.badges:
            if badge[const.DATA_BADGE_ID] == self._badge_id:
                return badge
        return None

    @property
    def native_value(self) -> str | None:
        """Return 'earned' or 'locked'."""
        badge = self._current_badge()
        if badge is None:
            return None
        if BadgeEngine.is_earned(badge):
            return const.BADGE_STATE_EARNED
        return const.BADGE_STATE_LOCKED

    @property
    def icon(self) -> str:
        """Return a trophy icon once earned, a lock before that."""
        if self.native_value == const.BADGE_STATE_EARNED:
            return "mdi:trophy-award"
        return "mdi:lock-outline"

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose badge definition, award date and progress."""
        badge = self._current_badge()
        if badge is None:
            return {}
        return {
            const.ATTR_BADGE_ID: self._badge_id,
            const.ATTR_BADGE_NAME: badge[const.DATA_BADGE_NAME],
            const.ATTR_BADGE_EMOJI: badge[const.DATA_BADGE_EMOJI],
            const.ATTR_HOURS_REQUIRED: badge[const.DATA_BADGE_HOURS_REQUIRED],
            const.ATTR_DATE_EARNED: badge[const.DATA_BADGE_DATE_EARNED] or None,
            const.ATTR_PROGRESS: AggregationEngine.round_hours(
                BadgeEngine.badge_progress(self.coordinator.total_hours, badge)
            ),
        }


# ------------------------------------------------------------------------------------------
class StudySessionLogSensor(StudyTrackerCoordinatorEntity, SensorEntity):
    """Sensor listing logged sessions, newest first.

    Sessions referencing a subject missing from the catalog are shown with
    the unknown-subject placeholder instead of failing.
    """

    _attr_translation_key = const.TRANS_KEY_SENSOR_SESSION_LOG
    _attr_icon = "mdi:format-list-bulleted"

    def __init__(
        self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SENSOR_ST_UID_SUFFIX_SESSION_LOG}"
        self.entity_id = f"{const.SENSOR_ST_PREFIX}{const.SENSOR_ST_EID_SESSION_LOG}"

    @property
    def native_value(self) -> int:
        """Return the number of logged sessions."""
        return len(self.coordinator.log_entries)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose every session with its resolved subject."""
        sessions = []
        for entry in self.coordinator.log_manager.reverse_chronological():
            subject_id = entry[const.DATA_LOG_ENTRY_SUBJECT_ID]
            subject = sh.get_subject(subject_id)
            sessions.append(
                {
                    const.ATTR_ENTRY_ID: entry[const.DATA_LOG_ENTRY_ID],
                    const.ATTR_DATE: entry[const.DATA_LOG_ENTRY_DATE],
                    const.ATTR_HOURS: entry[const.DATA_LOG_ENTRY_HOURS],
                    const.ATTR_SUBJECT_ID: subject_id,
                    const.ATTR_SUBJECT_NAME: sh.get_subject_display_name(subject_id),
                    const.ATTR_SUBJECT_EMOJI: (
                        subject[const.DATA_SUBJECT_EMOJI] if subject else None
                    ),
                }
            )
        return {const.ATTR_SESSIONS: sessions}


# ------------------------------------------------------------------------------------------
class StudyDraftHoursSensor(StudyTrackerCoordinatorEntity, SensorEntity):
    """Sensor for the hours of the session being prepared."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_DRAFT_HOURS
    _attr_native_unit_of_measurement = UnitOfTime.HOURS
    _attr_icon = "mdi:timer-edit-outline"

    def __init__(
        self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SENSOR_ST_UID_SUFFIX_DRAFT_HOURS}"
        self.entity_id = f"{const.SENSOR_ST_PREFIX}{const.SENSOR_ST_EID_DRAFT_HOURS}"

    @property
    def native_value(self) -> float:
        """Return the draft hours."""
        return self.coordinator.draft_hours

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the selected subject and the daily goal ring fill."""
        subject_id = self.coordinator.selected_subject
        return {
            const.ATTR_SUBJECT_ID: subject_id,
            const.ATTR_SUBJECT_NAME: sh.get_subject_display_name(subject_id),
            const.ATTR_DAILY_GOAL_HOURS: const.DAILY_GOAL_HOURS,
            const.ATTR_DAILY_GOAL_PROGRESS: AggregationEngine.round_hours(
                SessionEngine.daily_goal_progress(self.coordinator.draft_hours)
            ),
        }
