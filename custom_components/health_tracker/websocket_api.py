"""Websocket API for Health Tracker."""

from __future__ import annotations

from datetime import date
from typing import Any

import voluptuous as vol

from homeassistant.components import websocket_api
from homeassistant.core import HomeAssistant
from homeassistant.util import dt as dt_util

from .const import DOMAIN
from .coordinator import coordinator_for_entry
from .models import Comment
from .ws_state import public_state


@websocket_api.websocket_command({vol.Required("type"): "health_tracker/list_entries"})
@websocket_api.async_response
async def ws_list_entries(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entries = hass.config_entries.async_entries(DOMAIN)
    payload = [{"entry_id": entry.entry_id, "title": entry.title} for entry in entries]
    connection.send_result(msg["id"], {"entries": payload})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "health_tracker/get_state",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_get_state(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entry_id = msg["entry_id"]
    coordinator = coordinator_for_entry(hass, entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
        return
    connection.send_result(msg["id"], {"entry_id": entry_id, "state": public_state(coordinator.data)})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "health_tracker/add_comment",
        vol.Required("entry_id"): str,
        vol.Required("plan_id"): str,
        vol.Required("content"): vol.All(str, vol.Strip, vol.Length(min=1)),
        vol.Optional("author", default="User"): str,
    }
)
@websocket_api.async_response
async def ws_add_comment(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entry_id = msg["entry_id"]
    coordinator = coordinator_for_entry(hass, entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
        return
    comment = Comment(author=str(msg["author"]), content=str(msg["content"]))
    plan = await coordinator.store.async_add_comment(str(msg["plan_id"]), comment)
    if plan is None:
        connection.send_error(msg["id"], "plan_not_found", f"No plan found for plan_id={msg['plan_id']}")
        return
    await coordinator.async_refresh()
    connection.send_result(msg["id"], {"entry_id": entry_id, "plan": plan.as_dict()})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "health_tracker/set_completion",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Optional("completed"): bool,
    }
)
@websocket_api.async_response
async def ws_set_completion(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entry_id = msg["entry_id"]
    coordinator = coordinator_for_entry(hass, entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
        return
    today = dt_util.now().date()
    try:
        day = date.fromisoformat(msg["date"]) if msg.get("date") else today
    except ValueError:
        connection.send_error(msg["id"], "invalid_format", f"Invalid date: {msg['date']}")
        return
    await coordinator.store.async_ensure_completions(today)
    entry = await coordinator.store.async_set_completion(day, msg.get("completed"))
    if entry is None:
        connection.send_error(msg["id"], "day_not_in_window", f"No completion entry for {day.isoformat()}")
        return
    await coordinator.async_refresh()
    connection.send_result(msg["id"], {"entry_id": entry_id, "state": public_state(coordinator.data)})


def async_register(hass: HomeAssistant) -> None:
    websocket_api.async_register_command(hass, ws_list_entries)
    websocket_api.async_register_command(hass, ws_get_state)
    websocket_api.async_register_command(hass, ws_add_comment)
    websocket_api.async_register_command(hass, ws_set_completion)
