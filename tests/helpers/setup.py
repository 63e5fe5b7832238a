"""Setup helpers for Study Tracker test configuration.

This module seeds ``hass_storage`` and walks the config flow, so tests can
focus on behavior rather than setup boilerplate.

Example:
    result = await setup_integration(
        hass,
        hass_storage,
        study_log=make_log((10.0, "precalc"), (4.5, "chemistry")),
    )
    # Access: result.config_entry, result.coordinator, result.store

YAML-based setup:
    result = await setup_from_yaml(
        hass,
        hass_storage,
        "tests/scenarios/scenario_study_log.yaml",
    )
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from homeassistant import config_entries
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResultType
import yaml

from custom_components.studytracker import const
from custom_components.studytracker.coordinator import StudyTrackerCoordinator
from custom_components.studytracker.store import StudyTrackerStore
from tests.helpers.builders import storage_record

# =============================================================================
# DATACLASSES
# =============================================================================


@dataclass
class SetupResult:
    """Result from setup_integration.

    Attributes:
        config_entry: The created ConfigEntry
        coordinator: The StudyTrackerCoordinator instance
        store: The loaded StudyTrackerStore
    """

    config_entry: ConfigEntry
    coordinator: StudyTrackerCoordinator
    store: StudyTrackerStore


# =============================================================================
# SETUP
# =============================================================================


def seed_storage(
    hass_storage: dict[str, Any],
    *,
    study_log: list[dict[str, Any]] | None = None,
    badges: list[dict[str, Any]] | None = None,
) -> None:
    """Write study log and badge records into the mocked storage."""
    if study_log is not None:
        hass_storage[const.STORAGE_KEY_STUDY_LOG] = storage_record(
            const.STORAGE_KEY_STUDY_LOG, {const.DATA_STUDY_LOG: study_log}
        )
    if badges is not None:
        hass_storage[const.STORAGE_KEY_BADGES] = storage_record(
            const.STORAGE_KEY_BADGES, {const.DATA_BADGES: badges}
        )


async def setup_integration(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    *,
    study_log: list[dict[str, Any]] | None = None,
    badges: list[dict[str, Any]] | None = None,
) -> SetupResult:
    """Seed storage, create the entry through the config flow, wait for setup."""
    seed_storage(hass_storage, study_log=study_log, badges=badges)

    result = await hass.config_entries.flow.async_init(
        const.DOMAIN, context={"source": config_entries.SOURCE_USER}
    )
    assert result["type"] == FlowResultType.FORM

    result = await hass.config_entries.flow.async_configure(
        result["flow_id"], user_input={}
    )
    assert result["type"] == FlowResultType.CREATE_ENTRY
    await hass.async_block_till_done()

    config_entry = result["result"]
    entry_data = hass.data[const.DOMAIN][config_entry.entry_id]
    return SetupResult(
        config_entry=config_entry,
        coordinator=entry_data[const.COORDINATOR],
        store=entry_data[const.STORE],
    )


async def setup_from_yaml(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    yaml_path: str | Path,
) -> SetupResult:
    """Set up Study Tracker with storage seeded from a YAML scenario file.

    YAML File Format:
        study_log:
          - id: "s1"
            date: "2026-01-05T16:00:00+00:00"
            hours: 2.5
            subjectId: "precalc"
        badges:            # optional, omitted means no stored badge record
          - id: "badge1"
            emoji: "🌟"
            name: "Study Star"
            hoursRequired: 15
            dateEarned: ""
    """
    path = Path(yaml_path)
    if not path.is_absolute():
        # Relative paths are resolved from the repository root
        workspace_root = Path(__file__).parent.parent.parent
        path = workspace_root / path

    if not path.exists():
        raise FileNotFoundError(f"Scenario YAML not found: {path}")

    with open(path, encoding="utf-8") as f:
        yaml_data = yaml.safe_load(f) or {}

    return await setup_integration(
        hass,
        hass_storage,
        study_log=yaml_data.get("study_log"),
        badges=yaml_data.get("badges"),
    )
