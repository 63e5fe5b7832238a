"""Type definitions for Study Tracker data structures.

Persisted records keep the field names of the storage layout (``subjectId``,
``hoursRequired``, ``dateEarned``), so the TypedDicts below mirror them
exactly.

IMPORTANT: This file must NOT import from coordinator.py, st_helpers.py, or
any file that imports coordinator to avoid circular dependencies.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation of loaded data
happens in store.py with voluptuous schemas.
"""

from typing import TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

SubjectId = str
BadgeId = str
LogEntryId = str  # uuid4 hex string
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00+00:00"


# =============================================================================
# Entity Types
# =============================================================================


class SubjectData(TypedDict):
    """Static catalog entry. Never persisted, only referenced by id."""

    id: SubjectId
    name: str
    emoji: str


class LogEntryData(TypedDict):
    """A single committed study session."""

    id: LogEntryId
    date: ISODatetime
    hours: float
    subjectId: SubjectId  # Not validated against the catalog


class BadgeData(TypedDict):
    """Badge definition merged with its award state.

    ``dateEarned`` is the empty string while unearned and an ISO timestamp
    once earned.
    """

    id: BadgeId
    emoji: str
    name: str
    hoursRequired: float
    dateEarned: ISODatetime


# =============================================================================
# Engine Results
# =============================================================================

# (updated_badges, newly_earned)
BadgeEvaluation = tuple[list[BadgeData], list[BadgeData]]


class StudySnapshot(TypedDict):
    """Derived view published to entities after every pipeline run."""

    total_hours: float
    subject_totals: dict[SubjectId, float]
    unknown_subject_hours: float
    study_log: list[LogEntryData]
    badges: list[BadgeData]
