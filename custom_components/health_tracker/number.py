"""Number platform for Health Tracker."""

from __future__ import annotations

from homeassistant.components.number import NumberEntity, NumberMode
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import UnitOfVolume
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN, WATER_MAX_ML, WATER_STEP_ML
from .coordinator import HealthTrackerCoordinator
from .entity import device_info_from_entry


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: HealthTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([WaterIntakeNumber(entry, coordinator)])


class WaterIntakeNumber(CoordinatorEntity[HealthTrackerCoordinator], NumberEntity):
    """Water drunk today. Kept in memory only."""

    _attr_has_entity_name = True
    _attr_icon = "mdi:cup-water"
    _attr_translation_key = "water_intake"
    _attr_native_min_value = 0
    _attr_native_max_value = WATER_MAX_ML
    _attr_native_step = WATER_STEP_ML
    _attr_native_unit_of_measurement = UnitOfVolume.MILLILITERS
    _attr_mode = NumberMode.BOX

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}_water_intake"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def native_value(self) -> float:
        return float(self.coordinator.water_ml)

    async def async_set_native_value(self, value: float) -> None:
        await self.coordinator.async_set_water(value)
