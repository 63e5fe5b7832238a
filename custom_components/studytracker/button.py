# File: button.py
"""Buttons for Study Tracker integration.

Features:
1) StudyDraftAdjustButton: nudges the draft hours up or down by one step.
2) StudyCommitButton: logs the draft as a new study session.
"""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from . import const
from .coordinator import StudyTrackerCoordinator
from .entity import StudyTrackerCoordinatorEntity

# Serialized: the commit button runs the persistence pipeline
PARALLEL_UPDATES = 1


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Study Tracker buttons."""
    data = hass.data[const.DOMAIN][entry.entry_id]
    coordinator: StudyTrackerCoordinator = data[const.COORDINATOR]

    async_add_entities(
        [
            StudyDraftAdjustButton(
                coordinator,
                entry,
                delta=const.SESSION_HOURS_STEP,
                translation_key=const.TRANS_KEY_BUTTON_DRAFT_INCREASE,
                uid_suffix=const.BUTTON_ST_UID_SUFFIX_DRAFT_INCREASE,
                eid_suffix=const.BUTTON_ST_EID_DRAFT_INCREASE,
                icon="mdi:plus-circle-outline",
            ),
            StudyDraftAdjustButton(
                coordinator,
                entry,
                delta=-const.SESSION_HOURS_STEP,
                translation_key=const.TRANS_KEY_BUTTON_DRAFT_DECREASE,
                uid_suffix=const.BUTTON_ST_UID_SUFFIX_DRAFT_DECREASE,
                eid_suffix=const.BUTTON_ST_EID_DRAFT_DECREASE,
                icon="mdi:minus-circle-outline",
            ),
            StudyCommitButton(coordinator, entry),
        ]
    )


class StudyDraftAdjustButton(StudyTrackerCoordinatorEntity, ButtonEntity):
    """Button that adds a fixed delta to the draft hours (never below zero)."""

    def __init__(
        self,
        coordinator: StudyTrackerCoordinator,
        entry: ConfigEntry,
        *,
        delta: float,
        translation_key: str,
        uid_suffix: str,
        eid_suffix: str,
        icon: str,
    ):
        """Initialize the draft adjustment button.

        Args:
            coordinator: StudyTrackerCoordinator instance for data access and updates.
            entry: ConfigEntry for this integration instance.
            delta: Hours added to the draft on each press (negative to decrease).
            translation_key: Translation key for the entity name.
            uid_suffix: Suffix appended to the entry id for the unique id.
            eid_suffix: Object id part of the entity id.
            icon: Material design icon.
        """
        super().__init__(coordinator, entry)
        self._delta = delta
        self._attr_translation_key = translation_key
        self._attr_icon = icon
        self._attr_unique_id = f"{entry.entry_id}{uid_suffix}"
        self.entity_id = f"{const.BUTTON_ST_PREFIX}{eid_suffix}"

    async def async_press(self) -> None:
        """Handle the button press event."""
        new_hours = self.coordinator.adjust_draft_hours(self._delta)
        const.LOGGER.debug(
            "DEBUG: Draft hours adjusted by %s to %s", self._delta, new_hours
        )


class StudyCommitButton(StudyTrackerCoordinatorEntity, ButtonEntity):
    """Button that logs the current draft as a study session."""

    _attr_translation_key = const.TRANS_KEY_BUTTON_COMMIT
    _attr_icon = "mdi:check-circle-outline"

    def __init__(self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry):
        """Initialize the commit button."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.BUTTON_ST_UID_SUFFIX_COMMIT}"
        self.entity_id = f"{const.BUTTON_ST_PREFIX}{const.BUTTON_ST_EID_COMMIT}"

    async def async_press(self) -> None:
        """Handle the button press event."""
        try:
            newly_earned = await self.coordinator.async_commit_draft()
        except HomeAssistantError as e:
            const.LOGGER.error("ERROR: Failed to log study session: %s", e)
            return
        if newly_earned:
            const.LOGGER.info(
                "INFO: Session committed, %d new badge(s) earned", len(newly_earned)
            )
