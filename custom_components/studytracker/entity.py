"""Base entity classes for Study Tracker integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.helpers.update_coordinator import CoordinatorEntity

from . import st_helpers as sh
from .coordinator import StudyTrackerCoordinator

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry


class StudyTrackerCoordinatorEntity(CoordinatorEntity[StudyTrackerCoordinator]):
    """Base entity class for Study Tracker entities with typed coordinator access.

    Every entity belongs to the single tracker device of its config entry.
    """

    _attr_has_entity_name = True

    def __init__(
        self, coordinator: StudyTrackerCoordinator, entry: ConfigEntry
    ) -> None:
        """Initialize the entity and attach it to the tracker device."""
        super().__init__(coordinator)
        self._attr_device_info = sh.create_tracker_device_info(entry)

    @property
    def coordinator(self) -> StudyTrackerCoordinator:
        """Return typed coordinator.

        Uses object.__getattribute__ to access the private _coordinator attribute
        set by the parent CoordinatorEntity class.
        """
        return object.__getattribute__(self, "_coordinator")

    @coordinator.setter
    def coordinator(self, value: StudyTrackerCoordinator) -> None:
        """Set coordinator with proper typing."""
        object.__setattr__(self, "_coordinator", value)
