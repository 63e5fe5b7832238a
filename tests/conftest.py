"""Shared fixtures for Study Tracker tests."""

from typing import Any

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.studytracker.const import DOMAIN, STUDYTRACKER_TITLE

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title=STUDYTRACKER_TITLE,
        data={},
        entry_id="test_entry_id",
        unique_id="test_unique_id",
    )


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Study Tracker integration with empty mocked storage."""
    mock_config_entry.add_to_hass(hass)

    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()

    return mock_config_entry
