# File: const.py
"""Constants for the Study Tracker integration.

This file centralizes storage keys, field names, the static subject and badge
catalogs, defaults, service and event names, and platform identifiers for
consistency across the integration.
"""

import logging

from homeassistant.const import Platform

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
STUDYTRACKER_TITLE = "Study Tracker"

# Integration Domain
DOMAIN = "studytracker"

# Logger
LOGGER = logging.getLogger(__package__)

# Supported Platforms
PLATFORMS = [
    Platform.BUTTON,
    Platform.SELECT,
    Platform.SENSOR,
]

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Storage and Versioning
STORE = "store"
STORAGE_VERSION = 1
STORAGE_KEY_STUDY_LOG = "studytracker.study_log"
STORAGE_KEY_BADGES = "studytracker.badges"

# ------------------------------------------------------------------------------------------------
# Persisted Records
# ------------------------------------------------------------------------------------------------
# Record keys (one per storage file)
DATA_STUDY_LOG = "studyLog"
DATA_BADGES = "badges"

# Log entry fields
DATA_LOG_ENTRY_ID = "id"
DATA_LOG_ENTRY_DATE = "date"
DATA_LOG_ENTRY_HOURS = "hours"
DATA_LOG_ENTRY_SUBJECT_ID = "subjectId"

# Badge fields
DATA_BADGE_ID = "id"
DATA_BADGE_EMOJI = "emoji"
DATA_BADGE_NAME = "name"
DATA_BADGE_HOURS_REQUIRED = "hoursRequired"
DATA_BADGE_DATE_EARNED = "dateEarned"

# Subject fields (catalog only, never persisted)
DATA_SUBJECT_ID = "id"
DATA_SUBJECT_NAME = "name"
DATA_SUBJECT_EMOJI = "emoji"

# Unearned sentinel for DATA_BADGE_DATE_EARNED
BADGE_UNEARNED = ""

# ------------------------------------------------------------------------------------------------
# Static Catalogs
# ------------------------------------------------------------------------------------------------
SUBJECTS = (
    {DATA_SUBJECT_ID: "precalc", DATA_SUBJECT_NAME: "Pre-Calculus", DATA_SUBJECT_EMOJI: "📐"},
    {DATA_SUBJECT_ID: "hlit", DATA_SUBJECT_NAME: "Honors Literature", DATA_SUBJECT_EMOJI: "📚"},
    {DATA_SUBJECT_ID: "webdesign", DATA_SUBJECT_NAME: "Web Design", DATA_SUBJECT_EMOJI: "💻"},
    {DATA_SUBJECT_ID: "japanese", DATA_SUBJECT_NAME: "Japanese", DATA_SUBJECT_EMOJI: "🏯"},
    {DATA_SUBJECT_ID: "apworld", DATA_SUBJECT_NAME: "AP World History", DATA_SUBJECT_EMOJI: "🌍"},
    {DATA_SUBJECT_ID: "deca", DATA_SUBJECT_NAME: "DECA", DATA_SUBJECT_EMOJI: "💼"},
    {DATA_SUBJECT_ID: "chemistry", DATA_SUBJECT_NAME: "Chemistry", DATA_SUBJECT_EMOJI: "🧪"},
    {DATA_SUBJECT_ID: "sat", DATA_SUBJECT_NAME: "SAT", DATA_SUBJECT_EMOJI: "📝"},
)

# Ascending by threshold; order is the evaluation order.
BADGE_TEMPLATES = (
    {
        DATA_BADGE_ID: "badge1",
        DATA_BADGE_EMOJI: "🌟",
        DATA_BADGE_NAME: "Study Star",
        DATA_BADGE_HOURS_REQUIRED: 15,
        DATA_BADGE_DATE_EARNED: BADGE_UNEARNED,
    },
    {
        DATA_BADGE_ID: "badge2",
        DATA_BADGE_EMOJI: "🎯",
        DATA_BADGE_NAME: "Focus Master",
        DATA_BADGE_HOURS_REQUIRED: 30,
        DATA_BADGE_DATE_EARNED: BADGE_UNEARNED,
    },
    {
        DATA_BADGE_ID: "badge3",
        DATA_BADGE_EMOJI: "⚡",
        DATA_BADGE_NAME: "Power Learner",
        DATA_BADGE_HOURS_REQUIRED: 50,
        DATA_BADGE_DATE_EARNED: BADGE_UNEARNED,
    },
    {
        DATA_BADGE_ID: "badge4",
        DATA_BADGE_EMOJI: "🏆",
        DATA_BADGE_NAME: "Study Champion",
        DATA_BADGE_HOURS_REQUIRED: 100,
        DATA_BADGE_DATE_EARNED: BADGE_UNEARNED,
    },
    {
        DATA_BADGE_ID: "badge5",
        DATA_BADGE_EMOJI: "👑",
        DATA_BADGE_NAME: "Knowledge King",
        DATA_BADGE_HOURS_REQUIRED: 200,
        DATA_BADGE_DATE_EARNED: BADGE_UNEARNED,
    },
)

# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_ZERO = 0
DEFAULT_SESSION_HOURS = 2.5
SESSION_HOURS_STEP = 0.5
DAILY_GOAL_HOURS = 8.0
DATA_FLOAT_PRECISION = 2
PERCENT_COMPLETE = 100.0

DISPLAY_UNKNOWN_SUBJECT = "Unknown subject"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_RECORD_SESSION = "record_session"
SERVICE_DELETE_SESSION = "delete_session"
SERVICE_SELECT_SUBJECT = "select_subject"
SERVICE_ADJUST_DRAFT_HOURS = "adjust_draft_hours"
SERVICE_COMMIT_DRAFT = "commit_draft"

# Service fields
FIELD_SUBJECT_ID = "subject_id"
FIELD_HOURS = "hours"
FIELD_ENTRY_ID = "entry_id"
FIELD_DELTA = "delta"

# Service response keys
RESPONSE_NEWLY_EARNED = "newly_earned"
RESPONSE_TOTAL_HOURS = "total_hours"

MSG_NO_ENTRY_FOUND = "No Study Tracker entry found"

# ------------------------------------------------------------------------------------------------
# Events / Notifications
# ------------------------------------------------------------------------------------------------
EVENT_BADGE_EARNED = "studytracker_badge_earned"

NOTIFICATION_ID_BADGE_PREFIX = "studytracker_badge_"
NOTIFICATION_TITLE_BADGE_EARNED = "New Badge Earned!"

# ------------------------------------------------------------------------------------------------
# Attributes
# ------------------------------------------------------------------------------------------------
ATTR_BADGE_ID = "badge_id"
ATTR_BADGE_NAME = "name"
ATTR_BADGE_EMOJI = "emoji"
ATTR_HOURS_REQUIRED = "hours_required"
ATTR_DATE_EARNED = "date_earned"
ATTR_TOTAL_HOURS = "total_hours"
ATTR_PROGRESS = "progress"
ATTR_SUBJECT_ID = "subject_id"
ATTR_SUBJECT_NAME = "subject_name"
ATTR_SUBJECT_EMOJI = "subject_emoji"
ATTR_SESSION_COUNT = "session_count"
ATTR_SESSIONS = "sessions"
ATTR_ENTRY_ID = "entry_id"
ATTR_DATE = "date"
ATTR_HOURS = "hours"
ATTR_UNKNOWN_SUBJECT_HOURS = "unknown_subject_hours"
ATTR_NEXT_BADGE = "next_badge"
ATTR_HOURS_TO_NEXT_BADGE = "hours_to_next_badge"
ATTR_BADGES_EARNED = "badges_earned"
ATTR_DAILY_GOAL_HOURS = "daily_goal_hours"
ATTR_DAILY_GOAL_PROGRESS = "daily_goal_progress"

# Badge sensor states
BADGE_STATE_EARNED = "earned"
BADGE_STATE_LOCKED = "locked"

# ------------------------------------------------------------------------------------------------
# Entity Identifiers
# ------------------------------------------------------------------------------------------------
SENSOR_ST_PREFIX = "sensor.studytracker_"
SELECT_ST_PREFIX = "select.studytracker_"
BUTTON_ST_PREFIX = "button.studytracker_"

SENSOR_ST_UID_SUFFIX_TOTAL_HOURS = "_total_hours"
SENSOR_ST_UID_SUFFIX_SUBJECT_HOURS = "_subject_hours"
SENSOR_ST_UID_SUFFIX_BADGE = "_badge"
SENSOR_ST_UID_SUFFIX_SESSION_LOG = "_session_log"
SENSOR_ST_UID_SUFFIX_DRAFT_HOURS = "_draft_hours"
SELECT_ST_UID_SUFFIX_SUBJECT = "_subject_select"
BUTTON_ST_UID_SUFFIX_DRAFT_INCREASE = "_draft_increase"
BUTTON_ST_UID_SUFFIX_DRAFT_DECREASE = "_draft_decrease"
BUTTON_ST_UID_SUFFIX_COMMIT = "_commit_session"

SENSOR_ST_EID_TOTAL_HOURS = "total_hours"
SENSOR_ST_EID_SUFFIX_SUBJECT_HOURS = "_hours"
SENSOR_ST_EID_PREFIX_BADGE = "badge_"
SENSOR_ST_EID_SESSION_LOG = "session_log"
SENSOR_ST_EID_DRAFT_HOURS = "draft_hours"
SELECT_ST_EID_SUBJECT = "subject"
BUTTON_ST_EID_DRAFT_INCREASE = "draft_increase"
BUTTON_ST_EID_DRAFT_DECREASE = "draft_decrease"
BUTTON_ST_EID_COMMIT = "log_session"

# ------------------------------------------------------------------------------------------------
# Translation Keys
# ------------------------------------------------------------------------------------------------
TRANS_KEY_SENSOR_TOTAL_HOURS = "total_hours"
TRANS_KEY_SENSOR_SUBJECT_HOURS = "subject_hours"
TRANS_KEY_SENSOR_BADGE = "badge"
TRANS_KEY_SENSOR_SESSION_LOG = "session_log"
TRANS_KEY_SENSOR_DRAFT_HOURS = "draft_hours"
TRANS_KEY_SELECT_SUBJECT = "subject"
TRANS_KEY_BUTTON_DRAFT_INCREASE = "draft_increase"
TRANS_KEY_BUTTON_DRAFT_DECREASE = "draft_decrease"
TRANS_KEY_BUTTON_COMMIT = "log_session"

TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
TRANS_KEY_ERROR_UNKNOWN_SUBJECT = "unknown_subject"

TRANS_KEY_PLACEHOLDER_SUBJECT_NAME = "subject_name"
TRANS_KEY_PLACEHOLDER_BADGE_NAME = "badge_name"
