"""Aggregation Engine - Pure logic for deriving study-hour totals.

This engine provides stateless, pure Python functions for:
- Grand total of logged hours
- Per-subject totals over the static subject catalog
- Hours carried by entries that reference an unknown subject

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data. Totals are
always recomputed from the full log; nothing is cached between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..type_defs import LogEntryData, SubjectData


class AggregationEngine:
    """Pure logic engine for study-hour aggregation.

    All methods are static - no instance state. This enables easy unit testing
    without any Home Assistant mocking.

    Partition guarantee:
        sum(subject_totals(...).values()) + unknown_subject_hours(...)
        equals total_hours(...) for the same log and catalog.
    """

    @staticmethod
    def round_hours(
        value: float, precision: int = const.DATA_FLOAT_PRECISION
    ) -> float:
        """Round hours for display.

        Aggregation itself never rounds; this is applied by entities only.
        """
        return round(value, precision)

    @staticmethod
    def total_hours(log: Iterable[LogEntryData]) -> float:
        """Return the sum of hours over every entry in the log."""
        return sum(
            (entry[const.DATA_LOG_ENTRY_HOURS] for entry in log),
            float(const.DEFAULT_ZERO),
        )

    @staticmethod
    def subject_totals(
        log: Iterable[LogEntryData],
        subjects: Sequence[SubjectData] = const.SUBJECTS,
    ) -> dict[str, float]:
        """Return hours per catalog subject.

        Every catalog subject is present in the result, in catalog order;
        subjects without entries report 0. Entries whose subjectId is not in
        the catalog are excluded from every subject.
        """
        totals: dict[str, float] = {
            subject[const.DATA_SUBJECT_ID]: float(const.DEFAULT_ZERO)
            for subject in subjects
        }
        for entry in log:
            subject_id = entry[const.DATA_LOG_ENTRY_SUBJECT_ID]
            if subject_id in totals:
                totals[subject_id] += entry[const.DATA_LOG_ENTRY_HOURS]
        return totals

    @staticmethod
    def unknown_subject_hours(
        log: Iterable[LogEntryData],
        subjects: Sequence[SubjectData] = const.SUBJECTS,
    ) -> float:
        """Return hours logged against subject ids missing from the catalog."""
        known_ids = {subject[const.DATA_SUBJECT_ID] for subject in subjects}
        return sum(
            (
                entry[const.DATA_LOG_ENTRY_HOURS]
                for entry in log
                if entry[const.DATA_LOG_ENTRY_SUBJECT_ID] not in known_ids
            ),
            float(const.DEFAULT_ZERO),
        )
