"""Button platform for Health Tracker."""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.util import dt as dt_util

from .const import DOMAIN
from .coordinator import HealthTrackerCoordinator
from .entity import device_info_from_entry


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: HealthTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([ToggleTodayButton(entry, coordinator), ResetDailyStatsButton(entry, coordinator)])


class ToggleTodayButton(ButtonEntity):
    """Flip today's completion flag."""

    _attr_has_entity_name = True
    _attr_icon = "mdi:check-circle-outline"
    _attr_translation_key = "toggle_today"

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        self._coordinator = coordinator
        self._attr_unique_id = f"{entry.entry_id}_toggle_today"
        self._attr_device_info = device_info_from_entry(entry)

    async def async_press(self) -> None:
        today = dt_util.now().date()
        # Make sure today is inside the window before toggling.
        await self._coordinator.store.async_ensure_completions(today)
        await self._coordinator.store.async_set_completion(today)
        await self._coordinator.async_refresh()


class ResetDailyStatsButton(ButtonEntity):
    _attr_has_entity_name = True
    _attr_icon = "mdi:restore"
    _attr_translation_key = "reset_daily"

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        self._coordinator = coordinator
        self._attr_unique_id = f"{entry.entry_id}_reset_daily"
        self._attr_device_info = device_info_from_entry(entry)

    async def async_press(self) -> None:
        await self._coordinator.async_reset_daily()
