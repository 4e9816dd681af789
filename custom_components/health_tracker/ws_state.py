"""Websocket state helpers."""

from __future__ import annotations

from typing import Any


def public_state(data: dict[str, Any] | None) -> dict[str, Any]:
    """Return a stable JSON payload for the UI from coordinator data."""
    if not isinstance(data, dict):
        return {}
    return {
        "today": str(data.get("today") or ""),
        "plans": [p.as_dict() for p in data.get("plans") or []],
        "category_filter": data.get("category_filter"),
        "completions": [c.as_dict() for c in data.get("completions") or []],
        "today_completed": bool(data.get("today_completed")),
        "streak": int(data.get("streak") or 0),
        "completion_rate": float(data.get("completion_rate") or 0.0),
        "steps": data.get("steps", 0),
        "water_ml": data.get("water_ml", 0),
        "mood": data.get("mood"),
        "achievements": data.get("achievements", []),
        "recommendation": str(data.get("recommendation") or ""),
    }
