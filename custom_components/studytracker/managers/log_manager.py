"""Log Manager - the ordered, write-through study session log."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from ..store import StudyTrackerStore
    from ..type_defs import LogEntryData


class LogManager:
    """Owns the study log and persists it after every mutation.

    Entries are kept in insertion (chronological) order. Presentation order
    is the caller's concern; reverse_chronological() is provided for entities.
    Entry contents, including hours, are not validated here.
    """

    def __init__(self, store: StudyTrackerStore) -> None:
        """Initialize manager.

        Args:
            store: Loaded storage wrapper holding the study log record
        """
        self._store = store

    def all(self) -> list[LogEntryData]:
        """Return a copy of the log in insertion order."""
        return list(self._store.study_log)

    def reverse_chronological(self) -> list[LogEntryData]:
        """Return a copy of the log, newest entry first."""
        return list(reversed(self._store.study_log))

    def get(self, entry_id: str) -> LogEntryData | None:
        """Return the first entry with the given id, if any."""
        for entry in self._store.study_log:
            if entry[const.DATA_LOG_ENTRY_ID] == entry_id:
                return entry
        return None

    async def async_append(self, entry: LogEntryData) -> None:
        """Append an entry to the end of the log and persist."""
        self._store.set_study_log([*self._store.study_log, entry])
        const.LOGGER.debug(
            "DEBUG: Log Entry - Appended '%s' (%s h, subject '%s')",
            entry[const.DATA_LOG_ENTRY_ID],
            entry[const.DATA_LOG_ENTRY_HOURS],
            entry[const.DATA_LOG_ENTRY_SUBJECT_ID],
        )
        await self._store.async_save_study_log()

    async def async_remove(self, entry_id: str) -> None:
        """Remove every entry with the given id and persist.

        An unknown id leaves the log unchanged; the write still happens so the
        contract stays "every mutation request persists".
        """
        remaining = [
            entry
            for entry in self._store.study_log
            if entry[const.DATA_LOG_ENTRY_ID] != entry_id
        ]
        removed = len(self._store.study_log) - len(remaining)
        if removed:
            const.LOGGER.debug(
                "DEBUG: Log Entry - Removed %s entry(ies) with id '%s'",
                removed,
                entry_id,
            )
        else:
            const.LOGGER.debug(
                "DEBUG: Log Entry - No entry with id '%s' to remove", entry_id
            )
        self._store.set_study_log(remaining)
        await self._store.async_save_study_log()
