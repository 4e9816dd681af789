"""Services for Health Tracker."""

from __future__ import annotations

from datetime import date
from typing import Any

import voluptuous as vol

from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse
from homeassistant.util import dt as dt_util

from .const import (
    DEFAULT_DURATION_MINUTES,
    DIFFICULTY_LEVELS,
    DOMAIN,
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
)
from .coordinator import coordinator_for_entry
from .insights import filter_plans
from .models import Comment, ExercisePlan, PlanCategory

SERVICE_ADD_PLAN = "add_plan"
SERVICE_ADD_COMMENT = "add_comment"
SERVICE_LIKE_PLAN = "like_plan"
SERVICE_LIST_PLANS = "list_plans"
SERVICE_SET_COMPLETION = "set_completion"
SERVICE_GET_COMPLETIONS = "get_completions"

_CATEGORY = vol.All(str, PlanCategory.parse)
_NON_EMPTY = vol.All(str, vol.Strip, vol.Length(min=1))

_ENTRY_SCHEMA = vol.Schema({vol.Required("entry_id"): str})
_ADD_PLAN_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Required("title"): _NON_EMPTY,
        vol.Required("description"): _NON_EMPTY,
        vol.Optional("category", default=PlanCategory.FITNESS.value): _CATEGORY,
        vol.Optional("duration", default=DEFAULT_DURATION_MINUTES): vol.All(
            vol.Coerce(int), vol.Range(min=MIN_DURATION_MINUTES, max=MAX_DURATION_MINUTES)
        ),
        vol.Optional("difficulty", default=DIFFICULTY_LEVELS[0]): str,
        vol.Optional("creator", default="User"): str,
    }
)
_ADD_COMMENT_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Required("plan_id"): str,
        vol.Required("content"): _NON_EMPTY,
        vol.Optional("author", default="User"): str,
    }
)
_PLAN_ID_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Required("plan_id"): str})
_LIST_PLANS_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Optional("category"): _CATEGORY})
_SET_COMPLETION_SCHEMA = vol.Schema(
    {
        vol.Required("entry_id"): str,
        vol.Optional("date"): vol.Coerce(date.fromisoformat),
        vol.Optional("completed"): bool,
    }
)


async def async_register(hass: HomeAssistant) -> None:
    async def _coordinator_for_entry(entry_id: str):
        return coordinator_for_entry(hass, entry_id)

    async def _async_add_plan(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        plan = ExercisePlan(
            title=call.data["title"],
            description=call.data["description"],
            category=call.data["category"],
            duration=int(call.data["duration"]),
            difficulty=str(call.data["difficulty"]),
            creator=str(call.data["creator"]),
        )
        await coordinator.store.async_add_plan(plan)
        await coordinator.async_refresh()
        return {"ok": True, "entry_id": entry_id, "plan": plan.as_dict()}

    async def _async_add_comment(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        comment = Comment(author=str(call.data["author"]), content=call.data["content"])
        plan = await coordinator.store.async_add_comment(str(call.data["plan_id"]), comment)
        if plan is None:
            return {"ok": False, "error": "plan_not_found"}
        await coordinator.async_refresh()
        return {"ok": True, "entry_id": entry_id, "plan": plan.as_dict()}

    async def _async_like_plan(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        plan = await coordinator.store.async_like_plan(str(call.data["plan_id"]))
        if plan is None:
            return {"ok": False, "error": "plan_not_found"}
        await coordinator.async_refresh()
        return {"ok": True, "entry_id": entry_id, "plan": plan.as_dict()}

    async def _async_list_plans(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        category: PlanCategory | None = call.data.get("category")
        plans = await coordinator.store.async_load_plans()
        plans = filter_plans(plans, category)
        return {"ok": True, "entry_id": entry_id, "plans": [p.as_dict() for p in plans]}

    async def _async_set_completion(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        today = dt_util.now().date()
        day: date = call.data.get("date") or today
        await coordinator.store.async_ensure_completions(today)
        entry = await coordinator.store.async_set_completion(day, call.data.get("completed"))
        if entry is None:
            return {"ok": False, "error": "day_not_in_window"}
        await coordinator.async_refresh()
        return {"ok": True, "entry_id": entry_id, "completion": entry.as_dict()}

    async def _async_get_completions(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        completions = await coordinator.store.async_load_completions()
        payload: list[dict[str, Any]] = [c.as_dict() for c in completions]
        return {"ok": True, "entry_id": entry_id, "completions": payload}

    for name, handler, schema in (
        (SERVICE_ADD_PLAN, _async_add_plan, _ADD_PLAN_SCHEMA),
        (SERVICE_ADD_COMMENT, _async_add_comment, _ADD_COMMENT_SCHEMA),
        (SERVICE_LIKE_PLAN, _async_like_plan, _PLAN_ID_SCHEMA),
        (SERVICE_LIST_PLANS, _async_list_plans, _LIST_PLANS_SCHEMA),
        (SERVICE_SET_COMPLETION, _async_set_completion, _SET_COMPLETION_SCHEMA),
        (SERVICE_GET_COMPLETIONS, _async_get_completions, _ENTRY_SCHEMA),
    ):
        if not hass.services.has_service(DOMAIN, name):
            hass.services.async_register(
                DOMAIN,
                name,
                handler,
                schema=schema,
                supports_response=SupportsResponse.ONLY,
            )
