"""Data models for Health Tracker.

Plans and completions are stored as JSON arrays of flat objects. Key names
follow the mobile app that first wrote this data (``dateCreated`` etc.), so
existing exports stay readable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any
from uuid import uuid4

from homeassistant.util import dt as dt_util


class PlanCategory(StrEnum):
    """Category of a shared exercise plan."""

    FITNESS = "Fitness"
    HEALTH = "Health"
    FAT_LOSS = "Lose Fat"

    @classmethod
    def parse(cls, value: Any) -> PlanCategory:
        raw = str(value or "").strip()
        for member in cls:
            if raw == member.value:
                return member
        aliases = {"fitness": cls.FITNESS, "health": cls.HEALTH, "fatloss": cls.FAT_LOSS, "fat_loss": cls.FAT_LOSS}
        found = aliases.get(raw.lower())
        if found is None:
            raise ValueError(f"Unknown plan category: {value!r}")
        return found


def _new_id() -> str:
    return str(uuid4())


def _parse_datetime(value: Any) -> datetime:
    parsed = dt_util.parse_datetime(str(value or ""))
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return parsed


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Comment:
    """A comment left on a plan."""

    author: str
    content: str
    date: datetime = field(default_factory=dt_util.utcnow)
    id: str = field(default_factory=_new_id)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "content": self.content,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comment:
        return cls(
            id=_require_str(data, "id"),
            author=_require_str(data, "author"),
            content=_require_str(data, "content"),
            date=_parse_datetime(data["date"]),
        )


@dataclass
class ExercisePlan:
    """A shared exercise plan."""

    title: str
    description: str
    category: PlanCategory
    duration: int
    difficulty: str
    creator: str
    date_created: datetime = field(default_factory=dt_util.utcnow)
    likes: int = 0
    comments: list[Comment] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "duration": int(self.duration),
            "difficulty": self.difficulty,
            "creator": self.creator,
            "dateCreated": self.date_created.isoformat(),
            "likes": int(self.likes),
            "comments": [c.as_dict() for c in self.comments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExercisePlan:
        comments = data.get("comments") or []
        if not isinstance(comments, list):
            raise TypeError("comments must be a list")
        likes = int(data.get("likes") or 0)
        if likes < 0:
            raise ValueError(f"likes must be non-negative, got {likes}")
        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            description=_require_str(data, "description"),
            category=PlanCategory.parse(data["category"]),
            duration=int(data["duration"]),
            difficulty=str(data.get("difficulty") or ""),
            creator=str(data.get("creator") or ""),
            date_created=_parse_datetime(data["dateCreated"]),
            likes=likes,
            comments=[Comment.from_dict(c) for c in comments],
        )


@dataclass
class DailyCompletion:
    """Whether the daily plan was completed on a given day."""

    date: date
    completed: bool = False
    id: str = field(default_factory=_new_id)

    def as_dict(self) -> dict[str, Any]:
        return {"id": self.id, "date": self.date.isoformat(), "completed": bool(self.completed)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DailyCompletion:
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise TypeError("completed must be a boolean")
        # Older payloads stored a full timestamp at day start.
        return cls(
            id=_require_str(data, "id"),
            date=date.fromisoformat(str(data["date"])[:10]),
            completed=completed,
        )


def decode_plans(raw: Any) -> list[ExercisePlan]:
    """Decode a stored plan array. Raises on any malformed record."""
    if not isinstance(raw, list):
        raise TypeError(f"Expected a list of plans, got {type(raw).__name__}")
    return [ExercisePlan.from_dict(item) for item in raw]


def decode_completions(raw: Any) -> list[DailyCompletion]:
    """Decode a stored completion array. Raises on any malformed record."""
    if not isinstance(raw, list):
        raise TypeError(f"Expected a list of completions, got {type(raw).__name__}")
    return [DailyCompletion.from_dict(item) for item in raw]
