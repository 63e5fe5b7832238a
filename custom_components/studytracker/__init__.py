# File: __init__.py
"""Initialization file for the Study Tracker integration.

Handles setting up the integration, including loading configuration entries,
initializing data storage, and preparing the coordinator for data handling.

Key Features:
- Config entry setup and unload support.
- Coordinator initialization with badge reconciliation on startup.
- Storage removal when the entry is deleted.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady

from . import const
from .coordinator import StudyTrackerCoordinator
from .services import async_setup_services, async_unload_services
from .store import StudyTrackerStore


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Study Tracker entry: %s", entry.entry_id)

    # Load both records; bad or missing storage falls back to empty collections.
    store = StudyTrackerStore(hass)
    await store.async_initialize()

    coordinator = StudyTrackerCoordinator(hass, entry, store)

    try:
        # Reconciles badges with the catalog and awards any missed thresholds.
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady as e:
        const.LOGGER.error("ERROR: Failed to refresh coordinator data: %s", e)
        raise ConfigEntryNotReady from e

    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORE: store,
    }

    async_setup_services(hass)

    await hass.config_entries.async_forward_entry_setups(entry, const.PLATFORMS)

    const.LOGGER.info("INFO: Study Tracker setup complete for entry: %s", entry.entry_id)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Study Tracker entry: %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, const.PLATFORMS)

    if unload_ok:
        hass.data[const.DOMAIN].pop(entry.entry_id)
        await async_unload_services(hass)

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry by deleting both storage records."""
    const.LOGGER.info("INFO: Removing Study Tracker entry: %s", entry.entry_id)

    entry_data = hass.data.get(const.DOMAIN, {}).get(entry.entry_id)
    if entry_data is not None:
        store: StudyTrackerStore = entry_data[const.STORE]
    else:
        # Entry is normally unloaded before removal.
        store = StudyTrackerStore(hass)
    await store.async_delete_storage()

    const.LOGGER.info("INFO: Study Tracker entry data cleared: %s", entry.entry_id)
