"""Achievements, recommendations and plan filtering."""

from __future__ import annotations

from dataclasses import dataclass

from .const import DEFAULT_MOOD, STEPS_GOAL, STEPS_MINIMUM, WATER_GOAL_ML
from .models import ExercisePlan, PlanCategory


@dataclass(frozen=True)
class Achievement:
    key: str
    title: str
    description: str
    icon: str
    unlocked: bool = False


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("steps_10k", "10K Steps", f"Walked {STEPS_GOAL:,} steps in a day", "mdi:walk"),
    Achievement("hydration_master", "Hydration Master", "Drank 2L of water in a day", "mdi:water"),
)

_LOW_MOODS = {"😞", "😢"}


def newly_unlocked(*, steps: float, water_ml: float, unlocked: set[str]) -> list[Achievement]:
    """Return achievements reached by today's readings that were not yet unlocked."""
    reached: list[Achievement] = []
    if steps >= STEPS_GOAL and "steps_10k" not in unlocked:
        reached.append(ACHIEVEMENTS[0])
    if water_ml >= WATER_GOAL_ML and "hydration_master" not in unlocked:
        reached.append(ACHIEVEMENTS[1])
    return reached


def achievement_states(unlocked: set[str]) -> list[dict[str, str | bool]]:
    return [
        {
            "key": a.key,
            "title": a.title,
            "description": a.description,
            "icon": a.icon,
            "unlocked": a.key in unlocked,
        }
        for a in ACHIEVEMENTS
    ]


def recommendation(*, steps: float, water_ml: float, mood: str = DEFAULT_MOOD) -> str:
    if steps < STEPS_MINIMUM:
        return f"Try to walk more today! Aim for at least {STEPS_MINIMUM:,} steps."
    if water_ml < WATER_GOAL_ML:
        return "Don't forget to stay hydrated! Drink more water."
    if mood in _LOW_MOODS:
        return "How about some light exercise to boost your mood?"
    return "You're doing great! Keep it up!"


def filter_plans(plans: list[ExercisePlan], category: PlanCategory | None) -> list[ExercisePlan]:
    if category is None:
        return list(plans)
    return [p for p in plans if p.category == category]
