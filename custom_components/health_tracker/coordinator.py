"""Coordinator for Health Tracker."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator
from homeassistant.util import dt as dt_util

from .completions import completion_rate, current_streak
from .const import (
    CONF_NOTIFICATIONS,
    CONF_STEPS_ENTITY,
    DEFAULT_MOOD,
    DEFAULT_NOTIFICATIONS,
    DOMAIN,
)
from .health import EntityHealthSource, HealthSource, NotificationSource, PersistentNotificationSource
from .insights import achievement_states, filter_plans, newly_unlocked, recommendation
from .models import PlanCategory
from .storage import PlanStore

_LOGGER = logging.getLogger(__name__)


class HealthTrackerCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Loads plans and completions and combines them with today's readings."""

    def __init__(
        self,
        hass: HomeAssistant,
        entry: ConfigEntry,
        *,
        health: HealthSource | None = None,
        notifications: NotificationSource | None = None,
    ) -> None:
        self.entry = entry
        self.store = PlanStore(hass, entry.entry_id)
        opts = {**(entry.data or {}), **(entry.options or {})}
        self.health: HealthSource = health or EntityHealthSource(hass, opts.get(CONF_STEPS_ENTITY))
        self.notifications: NotificationSource = notifications or PersistentNotificationSource(
            hass,
            enabled=bool(opts.get(CONF_NOTIFICATIONS, DEFAULT_NOTIFICATIONS)),
            entry_id=entry.entry_id,
        )

        # Display state; not persisted.
        self.water_ml: float = 0.0
        self.mood: str = DEFAULT_MOOD
        self.category_filter: PlanCategory | None = None
        self.unlocked: set[str] = set()
        self._health_authorized = False

        super().__init__(
            hass,
            logger=_LOGGER,
            name=f"{DOMAIN}_{entry.entry_id}",
            config_entry=entry,
            update_interval=timedelta(minutes=15),
        )

    async def _async_steps(self) -> float:
        # Ask again until granted; the source entity may load after us.
        if not self._health_authorized:
            self._health_authorized = await self.health.async_request_authorization()
        if not self._health_authorized:
            return 0.0
        return await self.health.async_fetch_today_steps()

    async def _async_update_data(self) -> dict[str, Any]:
        today = dt_util.now().date()
        plans = await self.store.async_load_plans()
        completions = await self.store.async_ensure_completions(today)
        steps = await self._async_steps()

        for achievement in newly_unlocked(steps=steps, water_ml=self.water_ml, unlocked=self.unlocked):
            self.unlocked.add(achievement.key)
            _LOGGER.info("Achievement unlocked: %s", achievement.title)
            if await self.notifications.async_request_permission():
                await self.notifications.async_notify(achievement.title, achievement.description)

        today_entry = next((c for c in completions if c.date == today), None)
        return {
            "today": today.isoformat(),
            "plans": plans,
            "visible_plans": filter_plans(plans, self.category_filter),
            "completions": completions,
            "today_completed": bool(today_entry and today_entry.completed),
            "streak": current_streak(completions, today),
            "completion_rate": completion_rate(completions),
            "steps": steps,
            "water_ml": self.water_ml,
            "mood": self.mood,
            "category_filter": self.category_filter.value if self.category_filter else None,
            "achievements": achievement_states(self.unlocked),
            "recommendation": recommendation(steps=steps, water_ml=self.water_ml, mood=self.mood),
        }

    async def async_set_water(self, water_ml: float) -> None:
        self.water_ml = max(0.0, float(water_ml))
        await self.async_refresh()

    async def async_set_mood(self, mood: str) -> None:
        self.mood = mood
        await self.async_refresh()

    async def async_set_category_filter(self, category: PlanCategory | None) -> None:
        self.category_filter = category
        await self.async_refresh()

    async def async_reset_daily(self) -> None:
        """Reset water and mood, like the settings reset in the mobile app."""
        self.water_ml = 0.0
        self.mood = DEFAULT_MOOD
        await self.async_refresh()


def coordinator_for_entry(hass: HomeAssistant, entry_id: str) -> HealthTrackerCoordinator | None:
    """Return the coordinator for a loaded entry, ignoring domain bookkeeping keys."""
    coordinator = hass.data.get(DOMAIN, {}).get(entry_id)
    return coordinator if isinstance(coordinator, HealthTrackerCoordinator) else None
