"""Health readings and notification delivery.

The plan store never talks to these; the coordinator does and keeps the
results as display state.
"""

from __future__ import annotations

import logging
from typing import Protocol

from homeassistant.components import persistent_notification
from homeassistant.const import STATE_UNAVAILABLE, STATE_UNKNOWN
from homeassistant.core import HomeAssistant

from .const import DOMAIN

_LOGGER = logging.getLogger(__name__)


class HealthSource(Protocol):
    async def async_request_authorization(self) -> bool: ...

    async def async_fetch_today_steps(self) -> float: ...


class NotificationSource(Protocol):
    async def async_request_permission(self) -> bool: ...

    async def async_notify(self, title: str, message: str) -> None: ...


class EntityHealthSource:
    """Reads today's step count from an existing entity (e.g. a phone companion sensor)."""

    def __init__(self, hass: HomeAssistant, entity_id: str | None) -> None:
        self._hass = hass
        self._entity_id = str(entity_id or "").strip() or None

    async def async_request_authorization(self) -> bool:
        if self._entity_id is None:
            return False
        return self._hass.states.get(self._entity_id) is not None

    async def async_fetch_today_steps(self) -> float:
        if self._entity_id is None:
            return 0.0
        state = self._hass.states.get(self._entity_id)
        if state is None or state.state in (STATE_UNKNOWN, STATE_UNAVAILABLE):
            return 0.0
        try:
            return max(0.0, float(state.state))
        except ValueError:
            _LOGGER.debug("Non-numeric step state %r on %s", state.state, self._entity_id)
            return 0.0


class PersistentNotificationSource:
    """Delivers notifications as Home Assistant persistent notifications."""

    def __init__(self, hass: HomeAssistant, *, enabled: bool, entry_id: str) -> None:
        self._hass = hass
        self._enabled = enabled
        self._entry_id = entry_id

    async def async_request_permission(self) -> bool:
        _LOGGER.debug("Notification permission %s", "granted" if self._enabled else "denied")
        return self._enabled

    async def async_notify(self, title: str, message: str) -> None:
        if not self._enabled:
            return
        persistent_notification.async_create(
            self._hass,
            message,
            title=title,
            notification_id=f"{DOMAIN}_{self._entry_id}_{title.lower().replace(' ', '_')}",
        )
