"""Select platform for Health Tracker."""

from __future__ import annotations

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import CATEGORY_ALL, DOMAIN, MOOD_CHOICES
from .coordinator import HealthTrackerCoordinator
from .entity import device_info_from_entry
from .models import PlanCategory


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: HealthTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([MoodSelect(entry, coordinator), PlanCategorySelect(entry, coordinator)])


class MoodSelect(CoordinatorEntity[HealthTrackerCoordinator], SelectEntity):
    """Today's mood; feeds the recommendation."""

    _attr_has_entity_name = True
    _attr_icon = "mdi:emoticon-outline"
    _attr_translation_key = "mood"
    _attr_options = list(MOOD_CHOICES)

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}_mood"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def current_option(self) -> str | None:
        return self.coordinator.mood

    async def async_select_option(self, option: str) -> None:
        await self.coordinator.async_set_mood(option)


class PlanCategorySelect(CoordinatorEntity[HealthTrackerCoordinator], SelectEntity):
    """Filter for the shared plans sensor."""

    _attr_has_entity_name = True
    _attr_icon = "mdi:filter-variant"
    _attr_translation_key = "plan_category"
    _attr_options = [CATEGORY_ALL, *[c.value for c in PlanCategory]]

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}_plan_category"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def current_option(self) -> str | None:
        category = self.coordinator.category_filter
        return category.value if category is not None else CATEGORY_ALL

    async def async_select_option(self, option: str) -> None:
        category = None if option == CATEGORY_ALL else PlanCategory.parse(option)
        await self.coordinator.async_set_category_filter(category)
