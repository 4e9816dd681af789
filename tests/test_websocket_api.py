from __future__ import annotations

from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.util import dt as dt_util
from pytest_homeassistant_custom_component.common import MockConfigEntry
from pytest_homeassistant_custom_component.typing import WebSocketGenerator

from custom_components.health_tracker import websocket_api
from custom_components.health_tracker.const import CONF_NAME, DOMAIN
from custom_components.health_tracker.coordinator import HealthTrackerCoordinator

from .test_coordinator import FakeHealth, FakeNotifications


async def _setup(hass: HomeAssistant) -> HealthTrackerCoordinator:
    entry = MockConfigEntry(domain=DOMAIN, data={CONF_NAME: "Test"}, entry_id="entry1")
    entry.add_to_hass(hass)
    coordinator = HealthTrackerCoordinator(hass, entry, health=FakeHealth(0), notifications=FakeNotifications())
    await coordinator.async_refresh()
    hass.data.setdefault(DOMAIN, {})["entry1"] = coordinator
    websocket_api.async_register(hass)
    return coordinator


async def test_ws_set_completion_rejects_bad_date(
    hass: HomeAssistant, hass_storage: dict[str, Any], hass_ws_client: WebSocketGenerator
) -> None:
    await _setup(hass)
    client = await hass_ws_client(hass)

    await client.send_json(
        {"id": 1, "type": "health_tracker/set_completion", "entry_id": "entry1", "date": "not-a-date"}
    )
    msg = await client.receive_json()

    assert not msg["success"]
    assert msg["error"]["code"] == "invalid_format"


async def test_ws_set_completion_marks_today(
    hass: HomeAssistant, hass_storage: dict[str, Any], hass_ws_client: WebSocketGenerator
) -> None:
    coordinator = await _setup(hass)
    client = await hass_ws_client(hass)
    today = dt_util.now().date().isoformat()

    await client.send_json(
        {"id": 1, "type": "health_tracker/set_completion", "entry_id": "entry1", "date": today, "completed": True}
    )
    msg = await client.receive_json()

    assert msg["success"]
    assert coordinator.data["today_completed"] is True


async def test_ws_unknown_entry(hass: HomeAssistant, hass_storage: dict[str, Any], hass_ws_client: WebSocketGenerator) -> None:
    await _setup(hass)
    hass.data[DOMAIN]["ws_registered"] = True
    client = await hass_ws_client(hass)

    await client.send_json({"id": 1, "type": "health_tracker/get_state", "entry_id": "ws_registered"})
    msg = await client.receive_json()

    assert not msg["success"]
    assert msg["error"]["code"] == "entry_not_found"
