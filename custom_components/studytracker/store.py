# File: store.py
"""Handles persistent data storage for the Study Tracker integration.

Uses Home Assistant's Storage helper to keep two independent keyed records:
the study log and the badge collection. Loaded content is validated with
voluptuous schemas; an absent, unreadable or invalid record falls back to an
empty collection so startup never fails on bad storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import voluptuous as vol
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store
from homeassistant.util import dt as dt_util

from . import const

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .type_defs import BadgeData, LogEntryData


# =============================================================================
# Record Validators
# =============================================================================


def _number(value: Any) -> float:
    """Validate a JSON number (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise vol.Invalid(f"expected a number, got {value!r}")
    return value


def _iso_timestamp(value: Any) -> str:
    """Validate a non-empty ISO 8601 timestamp, returned unchanged."""
    if not isinstance(value, str) or not value:
        raise vol.Invalid(f"expected an ISO 8601 timestamp, got {value!r}")
    try:
        parsed = dt_util.parse_datetime(value)
    except ValueError as err:
        raise vol.Invalid(f"invalid ISO 8601 timestamp {value!r}") from err
    if parsed is None:
        raise vol.Invalid(f"invalid ISO 8601 timestamp {value!r}")
    return value


_NON_EMPTY_STRING = vol.All(str, vol.Length(min=1))

LOG_ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_LOG_ENTRY_ID): _NON_EMPTY_STRING,
        vol.Required(const.DATA_LOG_ENTRY_DATE): _iso_timestamp,
        vol.Required(const.DATA_LOG_ENTRY_HOURS): _number,
        vol.Required(const.DATA_LOG_ENTRY_SUBJECT_ID): str,
    },
    extra=vol.REMOVE_EXTRA,
)

BADGE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_BADGE_ID): _NON_EMPTY_STRING,
        vol.Required(const.DATA_BADGE_EMOJI): str,
        vol.Required(const.DATA_BADGE_NAME): str,
        vol.Required(const.DATA_BADGE_HOURS_REQUIRED): _number,
        vol.Required(const.DATA_BADGE_DATE_EARNED): vol.Any(
            const.BADGE_UNEARNED, _iso_timestamp
        ),
    },
    extra=vol.REMOVE_EXTRA,
)

STUDY_LOG_RECORD_SCHEMA = vol.Schema(
    {vol.Required(const.DATA_STUDY_LOG): [LOG_ENTRY_SCHEMA]},
    extra=vol.REMOVE_EXTRA,
)

BADGES_RECORD_SCHEMA = vol.Schema(
    {vol.Required(const.DATA_BADGES): [BADGE_SCHEMA]},
    extra=vol.REMOVE_EXTRA,
)


class StudyTrackerStore:
    """Handles persistent storage operations for Study Tracker data.

    Thin wrapper around Home Assistant's Store API. Each record lives in its
    own storage file and is written independently, so a study-log write never
    rewrites badge state and vice versa.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        study_log_key: str = const.STORAGE_KEY_STUDY_LOG,
        badges_key: str = const.STORAGE_KEY_BADGES,
    ) -> None:
        """Initialize the store.

        Args:
            hass: Home Assistant core object.
            study_log_key: Storage key for the study log record.
            badges_key: Storage key for the badge record.

        """
        self.hass = hass
        self._study_log_store: Store[dict[str, Any]] = Store(
            hass, const.STORAGE_VERSION, study_log_key
        )
        self._badges_store: Store[dict[str, Any]] = Store(
            hass, const.STORAGE_VERSION, badges_key
        )
        self._study_log: list[LogEntryData] = []
        self._badges: list[BadgeData] = []

    async def async_initialize(self) -> None:
        """Load both records from storage during startup.

        A record that is missing, unreadable or invalid is replaced with an
        empty collection. Badge defaults are applied by the BadgeManager.
        """
        const.LOGGER.debug("DEBUG: StudyTrackerStore: Loading data from storage")
        self._study_log = await self._async_load_record(
            self._study_log_store, STUDY_LOG_RECORD_SCHEMA, const.DATA_STUDY_LOG
        )
        self._badges = await self._async_load_record(
            self._badges_store, BADGES_RECORD_SCHEMA, const.DATA_BADGES
        )
        const.LOGGER.debug(
            "DEBUG: Loaded storage: %s",
            {
                "log_entries": len(self._study_log),
                "badges": len(self._badges),
            },
        )

    async def _async_load_record(
        self,
        store: Store[dict[str, Any]],
        schema: vol.Schema,
        record_key: str,
    ) -> list[Any]:
        """Load and validate one record, returning [] on any failure."""
        try:
            raw = await store.async_load()
        except (HomeAssistantError, KeyError, TypeError, ValueError) as err:
            const.LOGGER.warning(
                "WARNING: Failed to read storage '%s': %s. Falling back to defaults",
                store.key,
                err,
            )
            return []

        if raw is None:
            const.LOGGER.info(
                "INFO: No existing storage found for '%s'. Initializing new data",
                store.key,
            )
            return []

        try:
            validated = schema(raw)
        except vol.Invalid as err:
            const.LOGGER.warning(
                "WARNING: Storage '%s' failed validation: %s. Falling back to defaults",
                store.key,
                err,
            )
            return []

        return validated[record_key]

    @property
    def study_log(self) -> list[LogEntryData]:
        """Retrieve the in-memory study log (insertion order)."""
        return self._study_log

    @property
    def badges(self) -> list[BadgeData]:
        """Retrieve the in-memory badge collection."""
        return self._badges

    def set_study_log(self, study_log: list[LogEntryData]) -> None:
        """Replace the in-memory study log."""
        self._study_log = study_log

    def set_badges(self, badges: list[BadgeData]) -> None:
        """Replace the in-memory badge collection."""
        self._badges = badges

    def get_storage_paths(self) -> list[str]:
        """Get the storage file paths for both records."""
        return [self._study_log_store.path, self._badges_store.path]

    async def async_save_study_log(self) -> None:
        """Persist the study log record."""
        await self._async_save(
            self._study_log_store, {const.DATA_STUDY_LOG: list(self._study_log)}
        )

    async def async_save_badges(self) -> None:
        """Persist the badge record."""
        await self._async_save(
            self._badges_store, {const.DATA_BADGES: list(self._badges)}
        )

    async def _async_save(
        self, store: Store[dict[str, Any]], record: dict[str, Any]
    ) -> None:
        """Save one record to storage.

        Raises:
            No exceptions raised - errors are logged but do not stop execution.
            OSError: Logged when file system issues prevent saving.
            TypeError: Logged when data contains non-serializable types.
            ValueError: Logged when data is invalid for JSON serialization.
        """
        try:
            await store.async_save(record)
            const.LOGGER.debug("DEBUG: Data saved successfully to '%s'", store.key)
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                store.path,
            )
        except TypeError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to non-serializable data: %s. "
                "Data contains types that cannot be converted to JSON",
                err,
            )
        except ValueError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to invalid data format: %s. "
                "Data structure may be corrupted",
                err,
            )

    async def async_delete_storage(self) -> None:
        """Delete both storage files and clear in-memory data."""
        const.LOGGER.warning(
            "WARNING: Clearing all Study Tracker data and removing storage"
        )
        self._study_log = []
        self._badges = []

        for store in (self._study_log_store, self._badges_store):
            try:
                await store.async_remove()
                const.LOGGER.info(
                    "INFO: Storage file removed successfully: %s", store.path
                )
            except OSError as err:
                const.LOGGER.error(
                    "ERROR: Failed to remove storage file %s: %s. Check file permissions",
                    store.path,
                    err,
                )
