"""Diagnostics support for Health Tracker.

This file is picked up by Home Assistant automatically when present.
Entry data holds only a display name, an entity id and a notification
toggle, so it is reported as-is.
"""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .coordinator import coordinator_for_entry


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: ConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator = coordinator_for_entry(hass, entry.entry_id)

    payload: dict[str, Any] = {
        "entry": {
            "entry_id": entry.entry_id,
            "title": entry.title,
            "version": entry.version,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
    }

    if coordinator is not None:
        state = coordinator.data or {}
        payload["coordinator"] = {
            "last_update_success": bool(getattr(coordinator, "last_update_success", False)),
            "last_exception": repr(getattr(coordinator, "last_exception", None)),
            "plans": len(state.get("plans") or []),
            "completions": len(state.get("completions") or []),
            "streak": state.get("streak"),
            "unlocked": sorted(coordinator.unlocked),
        }

    return payload
