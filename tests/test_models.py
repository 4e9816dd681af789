from __future__ import annotations

from datetime import date

import pytest

from custom_components.health_tracker.models import (
    Comment,
    DailyCompletion,
    ExercisePlan,
    PlanCategory,
    decode_completions,
    decode_plans,
)


def test_plan_wire_format_uses_camel_case_keys() -> None:
    plan = ExercisePlan(
        title="Morning Run",
        description="Easy 5k",
        category=PlanCategory.FAT_LOSS,
        duration=30,
        difficulty="Beginner",
        creator="Alice",
    )
    plan.comments.append(Comment(author="Bob", content="Nice"))

    raw = plan.as_dict()
    assert set(raw) == {
        "id",
        "title",
        "description",
        "category",
        "duration",
        "difficulty",
        "creator",
        "dateCreated",
        "likes",
        "comments",
    }
    assert raw["category"] == "Lose Fat"
    assert raw["likes"] == 0
    assert ExercisePlan.from_dict(raw) == plan


def test_category_accepts_member_names() -> None:
    assert PlanCategory.parse("fatLoss") is PlanCategory.FAT_LOSS
    assert PlanCategory.parse("Health") is PlanCategory.HEALTH
    with pytest.raises(ValueError):
        PlanCategory.parse("Yoga")


def test_completion_accepts_day_start_timestamp() -> None:
    c = DailyCompletion.from_dict({"id": "x", "date": "2026-03-10T00:00:00+01:00", "completed": True})
    assert c.date == date(2026, 3, 10)


@pytest.mark.parametrize(
    "raw",
    [
        {"not": "a list"},
        [{"id": "p1"}],
        [{"id": "p1", "title": "t", "description": "d", "category": "Yoga", "duration": 5, "dateCreated": "2026-01-01T00:00:00+00:00"}],
        ["just a string"],
    ],
)
def test_decode_plans_rejects_malformed(raw) -> None:
    with pytest.raises((AttributeError, KeyError, TypeError, ValueError)):
        decode_plans(raw)


def test_decode_completions_rejects_non_bool() -> None:
    with pytest.raises(TypeError):
        decode_completions([{"id": "c1", "date": "2026-03-10", "completed": "yes"}])
