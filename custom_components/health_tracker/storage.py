"""Storage for Health Tracker (.storage).

Two independent slots per config entry:
- sharedPlans: JSON array of exercise plans, each with its comment thread
- dailyCompletions: JSON array of per-day completion flags

Every mutation rewrites the whole slot before returning. Unreadable slots
degrade to defaults and failed writes are logged and dropped; nothing here
raises to the caller.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import date
from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store
from homeassistant.util import dt as dt_util

from .completions import find_completion, generate_completions, roll_forward
from .const import COMPLETION_WINDOW_DAYS, DOMAIN, SLOT_DAILY_COMPLETIONS, SLOT_SHARED_PLANS
from .models import Comment, DailyCompletion, ExercisePlan, decode_completions, decode_plans

_LOGGER = logging.getLogger(__name__)

_STORAGE_VERSION = 1
_DECODE_ERRORS = (HomeAssistantError, AttributeError, KeyError, TypeError, ValueError)
_ENCODE_ERRORS = (HomeAssistantError, AttributeError, TypeError, ValueError)


def storage_key(entry_id: str, slot: str) -> str:
    return f"{DOMAIN}.{entry_id}.{slot}"


class PlanStore:
    """Per-config-entry plan and completion storage."""

    def __init__(self, hass: HomeAssistant, entry_id: str, *, rng: random.Random | None = None) -> None:
        self._plans_store: Store[list[dict[str, Any]]] = Store(
            hass, _STORAGE_VERSION, storage_key(entry_id, SLOT_SHARED_PLANS)
        )
        self._completions_store: Store[list[dict[str, Any]]] = Store(
            hass, _STORAGE_VERSION, storage_key(entry_id, SLOT_DAILY_COMPLETIONS)
        )
        self._rng = rng or random.Random()
        self._lock = asyncio.Lock()

    @staticmethod
    def _today() -> date:
        return dt_util.now().date()

    async def _async_read(self, store: Store[list[dict[str, Any]]], decode) -> list[Any] | None:
        """Decode a slot. None means missing or malformed."""
        try:
            raw = await store.async_load()
        except HomeAssistantError as err:
            _LOGGER.warning("Unreadable storage slot %s, using defaults: %s", store.key, err)
            return None
        if raw is None:
            return None
        try:
            return decode(raw)
        except _DECODE_ERRORS as err:
            _LOGGER.warning("Malformed storage slot %s, using defaults: %s", store.key, err)
            return None

    async def _async_write(self, store: Store[list[dict[str, Any]]], items: list[Any]) -> None:
        try:
            await store.async_save([item.as_dict() for item in items])
        except _ENCODE_ERRORS as err:
            _LOGGER.warning("Dropped write to storage slot %s: %s", store.key, err)

    # Plans

    async def async_load_plans(self) -> list[ExercisePlan]:
        plans = await self._async_read(self._plans_store, decode_plans)
        return plans if plans is not None else []

    async def async_save_plans(self, plans: list[ExercisePlan]) -> None:
        await self._async_write(self._plans_store, plans)

    async def async_add_plan(self, plan: ExercisePlan) -> list[ExercisePlan]:
        async with self._lock:
            plans = await self.async_load_plans()
            if any(p.id == plan.id for p in plans):
                _LOGGER.debug("add_plan: id=%s already stored", plan.id)
                return plans
            plans.append(plan)
            await self.async_save_plans(plans)
        _LOGGER.debug("Added plan id=%s title=%s", plan.id, plan.title)
        return plans

    async def async_add_comment(self, plan_id: str, comment: Comment) -> ExercisePlan | None:
        """Append a comment to the first plan with this id. No-op if none matches."""
        async with self._lock:
            plans = await self.async_load_plans()
            plan = next((p for p in plans if p.id == plan_id), None)
            if plan is None:
                _LOGGER.debug("add_comment: no plan with id=%s", plan_id)
                return None
            plan.comments.append(comment)
            await self.async_save_plans(plans)
            return plan

    async def async_like_plan(self, plan_id: str) -> ExercisePlan | None:
        async with self._lock:
            plans = await self.async_load_plans()
            plan = next((p for p in plans if p.id == plan_id), None)
            if plan is None:
                return None
            plan.likes += 1
            await self.async_save_plans(plans)
            return plan

    # Completions

    async def async_load_completions(self) -> list[DailyCompletion]:
        completions = await self._async_read(self._completions_store, decode_completions)
        if completions is None:
            return generate_completions(self._today(), self._rng, days=COMPLETION_WINDOW_DAYS)
        return completions

    async def async_save_completions(self, completions: list[DailyCompletion]) -> None:
        await self._async_write(self._completions_store, completions)

    async def async_ensure_completions(self, today: date | None = None) -> list[DailyCompletion]:
        """Persist the window, seeding it on first run and rolling it forward to today."""
        today = today or self._today()
        async with self._lock:
            stored = await self._async_read(self._completions_store, decode_completions)
            if stored is None:
                completions = generate_completions(today, self._rng, days=COMPLETION_WINDOW_DAYS)
                changed = True
            else:
                completions, changed = roll_forward(stored, today, days=COMPLETION_WINDOW_DAYS)
            if changed:
                await self.async_save_completions(completions)
            return completions

    async def async_set_completion(self, day: date, completed: bool | None = None) -> DailyCompletion | None:
        """Set, or toggle when completed is None, the entry for a day in the window."""
        async with self._lock:
            completions = await self.async_load_completions()
            entry = find_completion(completions, day)
            if entry is None:
                return None
            entry.completed = (not entry.completed) if completed is None else bool(completed)
            await self.async_save_completions(completions)
            return entry
