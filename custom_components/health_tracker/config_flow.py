"""Config flow for Health Tracker."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.helpers import selector

from .const import (
    CONF_NAME,
    CONF_NOTIFICATIONS,
    CONF_STEPS_ENTITY,
    DEFAULT_NAME,
    DEFAULT_NOTIFICATIONS,
    DOMAIN,
)


def _schema(*, name: str, steps_entity: str | None, notifications: bool) -> vol.Schema:
    fields: dict[Any, Any] = {vol.Required(CONF_NAME, default=name): str}
    steps_key = (
        vol.Optional(CONF_STEPS_ENTITY, description={"suggested_value": steps_entity})
        if steps_entity
        else vol.Optional(CONF_STEPS_ENTITY)
    )
    fields[steps_key] = selector.EntitySelector(selector.EntitySelectorConfig(domain="sensor"))
    fields[vol.Required(CONF_NOTIFICATIONS, default=notifications)] = bool
    return vol.Schema(fields)


def _clean(user_input: dict[str, Any]) -> dict[str, Any]:
    return {
        CONF_NAME: str(user_input.get(CONF_NAME, DEFAULT_NAME)).strip() or DEFAULT_NAME,
        CONF_STEPS_ENTITY: str(user_input.get(CONF_STEPS_ENTITY) or "").strip(),
        CONF_NOTIFICATIONS: bool(user_input.get(CONF_NOTIFICATIONS, DEFAULT_NOTIFICATIONS)),
    }


class HealthTrackerConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Health Tracker."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            data = _clean(user_input)
            await self.async_set_unique_id(data[CONF_NAME].lower())
            self._abort_if_unique_id_configured()
            return self.async_create_entry(title=data[CONF_NAME], data=data)

        schema = _schema(name=DEFAULT_NAME, steps_entity=None, notifications=DEFAULT_NOTIFICATIONS)
        return self.async_show_form(step_id="user", data_schema=schema)

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return HealthTrackerOptionsFlow()


class HealthTrackerOptionsFlow(config_entries.OptionsFlow):
    """Handle options for Health Tracker."""

    async def async_step_init(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            return self.async_create_entry(title="", data=_clean(user_input))

        current = {**self.config_entry.data, **self.config_entry.options}
        schema = _schema(
            name=str(current.get(CONF_NAME, DEFAULT_NAME)),
            steps_entity=current.get(CONF_STEPS_ENTITY) or None,
            notifications=bool(current.get(CONF_NOTIFICATIONS, DEFAULT_NOTIFICATIONS)),
        )
        return self.async_show_form(step_id="init", data_schema=schema)
