# File: config_flow.py
"""Config flow for the Study Tracker integration.

There is nothing to configure: the subject and badge catalogs are fixed, so
the flow only confirms creation and allows a single instance.
"""

from typing import Any, Optional

import voluptuous as vol
from homeassistant import config_entries

from . import const


class StudyTrackerConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Study Tracker."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[dict[str, Any]] = None):
        """Confirm setup of the single Study Tracker instance."""
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        if user_input is not None:
            const.LOGGER.info("INFO: Creating Study Tracker config entry")
            return self.async_create_entry(title=const.STUDYTRACKER_TITLE, data={})

        return self.async_show_form(step_id="user", data_schema=vol.Schema({}))
