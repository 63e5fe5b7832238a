# File: st_helpers.py
"""Study Tracker helper functions and shared logic."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers.device_registry import DeviceInfo

from . import const

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .type_defs import SubjectData


# -------- Entry Lookup --------
def get_first_studytracker_entry(hass: HomeAssistant) -> Optional[str]:
    """Retrieve the first Study Tracker config entry ID."""
    domain_entries = hass.data.get(const.DOMAIN)
    if not domain_entries:
        return None
    return next(iter(domain_entries.keys()), None)


# -------- Subject Catalog --------
def get_subject(subject_id: str) -> Optional[SubjectData]:
    """Return the catalog entry for a subject id, or None if unknown."""
    for subject in const.SUBJECTS:
        if subject[const.DATA_SUBJECT_ID] == subject_id:
            return subject
    return None


def get_subject_id_by_name(subject_name: str) -> Optional[str]:
    """Retrieve the subject_id for a given display name."""
    for subject in const.SUBJECTS:
        if subject[const.DATA_SUBJECT_NAME] == subject_name:
            return subject[const.DATA_SUBJECT_ID]
    return None


def get_subject_display_name(subject_id: str) -> str:
    """Return the subject's name, or the unknown-subject placeholder."""
    subject = get_subject(subject_id)
    if subject is None:
        return const.DISPLAY_UNKNOWN_SUBJECT
    return subject[const.DATA_SUBJECT_NAME]


def ensure_known_subject(subject_id: str) -> None:
    """Raise ServiceValidationError when a subject id is not in the catalog."""
    if get_subject(subject_id) is None:
        raise ServiceValidationError(
            translation_domain=const.DOMAIN,
            translation_key=const.TRANS_KEY_ERROR_UNKNOWN_SUBJECT,
            translation_placeholders={"subject_id": subject_id},
        )


# -------- Devices --------
def create_tracker_device_info(config_entry: ConfigEntry) -> DeviceInfo:
    """Create device info grouping every Study Tracker entity."""
    return DeviceInfo(
        identifiers={(const.DOMAIN, config_entry.entry_id)},
        name=config_entry.title,
        manufacturer=const.STUDYTRACKER_TITLE,
        model="Study Log",
    )
