from __future__ import annotations

import random
from datetime import timedelta
from typing import Any
from unittest.mock import patch

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store
from homeassistant.util import dt as dt_util

from custom_components.health_tracker.completions import generate_completions
from custom_components.health_tracker.models import Comment, DailyCompletion, ExercisePlan, PlanCategory
from custom_components.health_tracker.storage import PlanStore, storage_key

ENTRY_ID = "entry1"
PLANS_KEY = storage_key(ENTRY_ID, "sharedPlans")
COMPLETIONS_KEY = storage_key(ENTRY_ID, "dailyCompletions")


def _plan(title: str = "Morning Run", category: PlanCategory = PlanCategory.FITNESS) -> ExercisePlan:
    return ExercisePlan(
        title=title,
        description="Easy pace around the park",
        category=category,
        duration=30,
        difficulty="Beginner",
        creator="Alice",
    )


def _seed(hass_storage: dict[str, Any], key: str, data: Any) -> None:
    hass_storage[key] = {"version": 1, "minor_version": 1, "key": key, "data": data}


async def test_save_then_load_round_trips(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    plans = [_plan("Morning Run"), _plan("Stretch", PlanCategory.HEALTH)]
    plans[0].comments.append(Comment(author="Bob", content="Great plan"))
    plans[1].likes = 3

    assert await store.async_load_plans() == []
    await store.async_save_plans(plans)

    assert await PlanStore(hass, ENTRY_ID).async_load_plans() == plans
    assert hass_storage[PLANS_KEY]["data"][0]["title"] == "Morning Run"


async def test_save_twice_does_not_duplicate(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    plans = [_plan()]
    await store.async_save_plans(plans)
    await store.async_save_plans(plans)
    assert await store.async_load_plans() == plans


async def test_add_plan_to_empty_store(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    await store.async_add_plan(_plan("Morning Run"))

    loaded = await PlanStore(hass, ENTRY_ID).async_load_plans()
    assert len(loaded) == 1
    assert loaded[0].title == "Morning Run"
    assert loaded[0].category is PlanCategory.FITNESS
    assert loaded[0].duration == 30
    assert loaded[0].difficulty == "Beginner"
    assert loaded[0].creator == "Alice"
    assert loaded[0].likes == 0
    assert loaded[0].comments == []


async def test_add_comment_appends_to_matching_plan_only(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    first, second = _plan("Morning Run"), _plan("Evening Walk")
    first.comments.append(Comment(author="Bob", content="first"))
    await store.async_save_plans([first, second])

    comment = Comment(author="Carol", content="second")
    updated = await store.async_add_comment(first.id, comment)

    assert updated is not None
    loaded = await store.async_load_plans()
    assert [c.content for c in loaded[0].comments] == ["first", "second"]
    assert loaded[0].comments[-1] == comment
    assert loaded[1] == second
    assert loaded[0].title == first.title and loaded[0].likes == first.likes


async def test_add_comment_unknown_plan_is_noop(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    plans = [_plan()]
    await store.async_save_plans(plans)
    before = hass_storage[PLANS_KEY]["data"]

    assert await store.async_add_comment("missing", Comment(author="x", content="y")) is None
    assert hass_storage[PLANS_KEY]["data"] == before
    assert await store.async_load_plans() == plans


async def test_like_plan_increments(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    plan = _plan()
    await store.async_add_plan(plan)
    await store.async_like_plan(plan.id)
    liked = await store.async_like_plan(plan.id)
    assert liked is not None and liked.likes == 2
    assert (await store.async_load_plans())[0].likes == 2
    assert await store.async_like_plan("missing") is None


async def test_corrupt_plans_slot_loads_empty(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    _seed(hass_storage, PLANS_KEY, "not-a-list")
    assert await PlanStore(hass, ENTRY_ID).async_load_plans() == []

    _seed(hass_storage, PLANS_KEY, [{"id": "p1", "title": "missing fields"}])
    assert await PlanStore(hass, ENTRY_ID).async_load_plans() == []


async def test_empty_store_synthesizes_completion_window(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    today = dt_util.now().date()
    completions = await PlanStore(hass, ENTRY_ID, rng=random.Random(3)).async_load_completions()

    assert len(completions) == 49
    assert completions[0].date == today - timedelta(days=48)
    assert completions[-1].date == today
    assert all(isinstance(c.completed, bool) for c in completions)
    expected = generate_completions(today, random.Random(3))
    assert [c.completed for c in completions] == [c.completed for c in expected]
    # Loading alone does not write.
    assert COMPLETIONS_KEY not in hass_storage


async def test_corrupt_completions_slot_falls_back(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    _seed(hass_storage, COMPLETIONS_KEY, [{"id": "c1", "date": "yesterday", "completed": True}])
    completions = await PlanStore(hass, ENTRY_ID).async_load_completions()
    assert len(completions) == 49


async def test_completions_round_trip(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    today = dt_util.now().date()
    completions = [
        DailyCompletion(date=today - timedelta(days=1), completed=True),
        DailyCompletion(date=today, completed=False),
    ]
    await PlanStore(hass, ENTRY_ID).async_save_completions(completions)
    assert await PlanStore(hass, ENTRY_ID).async_load_completions() == completions
    assert hass_storage[COMPLETIONS_KEY]["data"][0]["date"] == (today - timedelta(days=1)).isoformat()


async def test_ensure_completions_seeds_then_rolls_forward(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID, rng=random.Random(5))
    today = dt_util.now().date()

    seeded = await store.async_ensure_completions(today - timedelta(days=2))
    assert len(hass_storage[COMPLETIONS_KEY]["data"]) == 49

    rolled = await store.async_ensure_completions(today)
    assert len(rolled) == 49
    assert rolled[-1].date == today
    assert rolled[-1].completed is False
    assert rolled[0] == seeded[2]
    assert await store.async_load_completions() == rolled


async def test_set_completion_sets_and_toggles(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    today = dt_util.now().date()
    await store.async_save_completions([DailyCompletion(date=today, completed=False)])

    entry = await store.async_set_completion(today, True)
    assert entry is not None and entry.completed is True
    entry = await store.async_set_completion(today)
    assert entry is not None and entry.completed is False
    assert hass_storage[COMPLETIONS_KEY]["data"][0]["completed"] is False

    assert await store.async_set_completion(today - timedelta(days=400), True) is None


async def test_add_plan_with_existing_id_is_ignored(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    plan = _plan()
    await store.async_add_plan(plan)
    before = hass_storage[PLANS_KEY]["data"]

    returned = await store.async_add_plan(plan)

    assert len(returned) == 1
    assert len(await store.async_load_plans()) == 1
    assert hass_storage[PLANS_KEY]["data"] == before


async def test_unreadable_slots_fall_back_to_defaults(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    store = PlanStore(hass, ENTRY_ID)
    with patch.object(Store, "async_load", side_effect=HomeAssistantError("boom")):
        assert await store.async_load_plans() == []
        assert len(await store.async_load_completions()) == 49


async def test_failed_write_is_dropped(hass: HomeAssistant, hass_storage: dict[str, Any]) -> None:
    existing = _plan("Morning Run")
    _seed(hass_storage, PLANS_KEY, [existing.as_dict()])
    before = hass_storage[PLANS_KEY]["data"]
    store = PlanStore(hass, ENTRY_ID)

    with patch.object(Store, "async_save", side_effect=HomeAssistantError("disk full")):
        plans = await store.async_add_plan(_plan("Evening Walk"))
        assert await store.async_like_plan(existing.id) is not None

    assert [p.title for p in plans] == ["Morning Run", "Evening Walk"]
    assert hass_storage[PLANS_KEY]["data"] == before
    assert await store.async_load_plans() == [existing]
