# File: select.py
"""Select entity for the Study Tracker integration.

Lets the user pick which catalog subject the next committed session is
logged against.
"""

from __future__ import annotations

from typing import Optional

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from . import const
from . import st_helpers as sh
from .coordinator import StudyTrackerCoordinator
from .entity import StudyTrackerCoordinatorEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Study Tracker select entity from a config entry."""
    data = hass.data[const.DOMAIN][entry.entry_id]
    coordinator: StudyTrackerCoordinator = data[const.COORDINATOR]

    async_add_entities([SubjectSelect(coordinator, entry)])


class SubjectSelect(StudyTrackerCoordinatorEntity, SelectEntity):
    """Select entity listing every catalog subject by name."""

    _attr_translation_key = const.TRANS_KEY_SELECT_SUBJECT
    _attr_icon = "mdi:bookshelf"

    def __init__(self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry):
        """Initialize the subject select entity."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}{const.SELECT_ST_UID_SUFFIX_SUBJECT}"
        self.entity_id = f"{const.SELECT_ST_PREFIX}{const.SELECT_ST_EID_SUBJECT}"

    @property
    def options(self) -> list[str]:
        """Return subject names in catalog order."""
        return [subject[const.DATA_SUBJECT_NAME] for subject in self.coordinator.subjects]

    @property
    def current_option(self) -> Optional[str]:
        """Return the name of the selected subject."""
        subject = sh.get_subject(self.coordinator.selected_subject)
        return subject[const.DATA_SUBJECT_NAME] if subject else None

    async def async_select_option(self, option: str) -> None:
        """Map the chosen name back to its subject id and store it on the draft."""
        subject_id = sh.get_subject_id_by_name(option)
        if subject_id is None:
            const.LOGGER.warning("WARNING: Unknown subject option '%s'", option)
            return
        self.coordinator.set_selected_subject(subject_id)
