# File: services.py
"""Defines custom services for the Study Tracker integration.

These services allow logging and deleting study sessions, and driving the
session draft, from scripts or automations.
"""

from __future__ import annotations

import math
from typing import Any

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.helpers import config_validation as cv

from . import const
from . import st_helpers as sh
from .coordinator import StudyTrackerCoordinator


def _finite(value: float) -> float:
    """Reject infinite and NaN values."""
    if not math.isfinite(value):
        raise vol.Invalid("value must be a finite number")
    return value


def _half_hour_step(value: float) -> float:
    """Validate that a value is a multiple of the draft step."""
    if (value / const.SESSION_HOURS_STEP) % 1:
        raise vol.Invalid(f"delta must be a multiple of {const.SESSION_HOURS_STEP}")
    return value


# --- Service Schemas ---
RECORD_SESSION_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_SUBJECT_ID): cv.string,
        vol.Optional(
            const.FIELD_HOURS, default=const.DEFAULT_SESSION_HOURS
        ): vol.All(vol.Coerce(float), _finite, vol.Range(min=0)),
    }
)

DELETE_SESSION_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_ENTRY_ID): cv.string,
    }
)

SELECT_SUBJECT_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_SUBJECT_ID): cv.string,
    }
)

ADJUST_DRAFT_HOURS_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_DELTA): vol.All(
            vol.Coerce(float), _finite, _half_hour_step
        ),
    }
)

COMMIT_DRAFT_SCHEMA = vol.Schema({})


def _get_coordinator(
    hass: HomeAssistant, service_label: str
) -> StudyTrackerCoordinator | None:
    """Return the coordinator of the first loaded entry, or None."""
    entry_id = sh.get_first_studytracker_entry(hass)
    if not entry_id:
        const.LOGGER.warning("WARNING: %s: %s", service_label, const.MSG_NO_ENTRY_FOUND)
        return None
    return hass.data[const.DOMAIN][entry_id][const.COORDINATOR]


def _pipeline_response(
    coordinator: StudyTrackerCoordinator, newly_earned: list[Any]
) -> ServiceResponse:
    """Build the optional response of a pipeline-running service."""
    return {
        const.RESPONSE_NEWLY_EARNED: [dict(badge) for badge in newly_earned],
        const.RESPONSE_TOTAL_HOURS: coordinator.total_hours,
    }


def async_setup_services(hass: HomeAssistant) -> None:
    """Register Study Tracker services."""

    async def handle_record_session(call: ServiceCall) -> ServiceResponse:
        """Handle logging a study session."""
        coordinator = _get_coordinator(hass, "Record Session")
        if coordinator is None:
            return None

        subject_id = call.data[const.FIELD_SUBJECT_ID]
        hours = call.data[const.FIELD_HOURS]

        sh.ensure_known_subject(subject_id)

        newly_earned = await coordinator.async_record_session(subject_id, hours)
        return _pipeline_response(coordinator, newly_earned)

    async def handle_delete_session(call: ServiceCall) -> ServiceResponse:
        """Handle deleting a study session by entry id."""
        coordinator = _get_coordinator(hass, "Delete Session")
        if coordinator is None:
            return None

        newly_earned = await coordinator.async_delete_session(
            call.data[const.FIELD_ENTRY_ID]
        )
        return _pipeline_response(coordinator, newly_earned)

    async def handle_select_subject(call: ServiceCall) -> None:
        """Handle choosing the draft subject."""
        coordinator = _get_coordinator(hass, "Select Subject")
        if coordinator is None:
            return

        coordinator.set_selected_subject(call.data[const.FIELD_SUBJECT_ID])

    async def handle_adjust_draft_hours(call: ServiceCall) -> None:
        """Handle nudging the draft hours up or down."""
        coordinator = _get_coordinator(hass, "Adjust Draft Hours")
        if coordinator is None:
            return

        new_hours = coordinator.adjust_draft_hours(call.data[const.FIELD_DELTA])
        const.LOGGER.debug("DEBUG: Draft hours now %s", new_hours)

    async def handle_commit_draft(call: ServiceCall) -> ServiceResponse:
        """Handle committing the draft as a new session."""
        coordinator = _get_coordinator(hass, "Commit Draft")
        if coordinator is None:
            return None

        newly_earned = await coordinator.async_commit_draft()
        return _pipeline_response(coordinator, newly_earned)

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_RECORD_SESSION,
        handle_record_session,
        schema=RECORD_SESSION_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_DELETE_SESSION,
        handle_delete_session,
        schema=DELETE_SESSION_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_SELECT_SUBJECT,
        handle_select_subject,
        schema=SELECT_SUBJECT_SCHEMA,
    )

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_ADJUST_DRAFT_HOURS,
        handle_adjust_draft_hours,
        schema=ADJUST_DRAFT_HOURS_SCHEMA,
    )

    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_COMMIT_DRAFT,
        handle_commit_draft,
        schema=COMMIT_DRAFT_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )

    const.LOGGER.info("INFO: Study Tracker services have been registered successfully")


async def async_unload_services(hass: HomeAssistant) -> None:
    """Unregister Study Tracker services when unloading the integration."""
    services = [
        const.SERVICE_RECORD_SESSION,
        const.SERVICE_DELETE_SESSION,
        const.SERVICE_SELECT_SUBJECT,
        const.SERVICE_ADJUST_DRAFT_HOURS,
        const.SERVICE_COMMIT_DRAFT,
    ]

    for service in services:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Study Tracker services have been unregistered")
