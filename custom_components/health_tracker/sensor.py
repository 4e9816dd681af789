"""Sensor platform for Health Tracker."""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, UnitOfTime
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import HealthTrackerCoordinator
from .entity import device_info_from_entry


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: HealthTrackerCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            StepsSensor(entry, coordinator),
            CompletionStreakSensor(entry, coordinator),
            CompletionRateSensor(entry, coordinator),
            SharedPlansSensor(entry, coordinator),
        ]
    )


class _HealthTrackerSensor(CoordinatorEntity[HealthTrackerCoordinator], SensorEntity):
    _attr_has_entity_name = True

    def __init__(self, entry: ConfigEntry, coordinator: HealthTrackerCoordinator) -> None:
        super().__init__(coordinator)
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_{self._attr_translation_key}"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def _data(self) -> dict[str, Any]:
        return self.coordinator.data or {}


class StepsSensor(_HealthTrackerSensor):
    """Today's steps with the current recommendation and achievements."""

    _attr_translation_key = "steps_today"
    _attr_icon = "mdi:walk"
    _attr_native_unit_of_measurement = "steps"
    _attr_state_class = SensorStateClass.TOTAL_INCREASING

    @property
    def native_value(self) -> int:
        return int(self._data.get("steps") or 0)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        return {
            "water_ml": self._data.get("water_ml", 0),
            "mood": self._data.get("mood"),
            "recommendation": self._data.get("recommendation", ""),
            "achievements": self._data.get("achievements", []),
        }


class CompletionStreakSensor(_HealthTrackerSensor):
    _attr_translation_key = "completion_streak"
    _attr_icon = "mdi:fire"
    _attr_native_unit_of_measurement = UnitOfTime.DAYS

    @property
    def native_value(self) -> int:
        return int(self._data.get("streak") or 0)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        return {"today": self._data.get("today"), "today_completed": bool(self._data.get("today_completed"))}


class CompletionRateSensor(_HealthTrackerSensor):
    """Share of completed days in the stored window, with the per-day flags."""

    _attr_translation_key = "completion_rate"
    _attr_icon = "mdi:calendar-check"
    _attr_native_unit_of_measurement = PERCENTAGE

    @property
    def native_value(self) -> float:
        return round(float(self._data.get("completion_rate") or 0.0) * 100, 1)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        completions = self._data.get("completions") or []
        return {"days": [{"date": c.date.isoformat(), "completed": c.completed} for c in completions]}


class SharedPlansSensor(_HealthTrackerSensor):
    _attr_translation_key = "shared_plans"
    _attr_icon = "mdi:clipboard-list"

    @property
    def native_value(self) -> int:
        return len(self._data.get("plans") or [])

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        visible = self._data.get("visible_plans") or []
        return {
            "category_filter": self._data.get("category_filter"),
            "plans": [
                {
                    "id": p.id,
                    "title": p.title,
                    "category": p.category.value,
                    "duration": p.duration,
                    "difficulty": p.difficulty,
                    "creator": p.creator,
                    "likes": p.likes,
                    "comments": len(p.comments),
                }
                for p in visible
            ],
        }
