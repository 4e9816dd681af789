"""Daily completion window helpers."""

from __future__ import annotations

import random
from datetime import date, timedelta

from .const import COMPLETION_WINDOW_DAYS
from .models import DailyCompletion


def generate_completions(
    today: date,
    rng: random.Random,
    *,
    days: int = COMPLETION_WINDOW_DAYS,
) -> list[DailyCompletion]:
    """Build a placeholder window ending today, oldest first."""
    start = today - timedelta(days=days - 1)
    return [
        DailyCompletion(date=start + timedelta(days=i), completed=rng.random() < 0.5)
        for i in range(days)
    ]


def roll_forward(
    completions: list[DailyCompletion],
    today: date,
    *,
    days: int = COMPLETION_WINDOW_DAYS,
) -> tuple[list[DailyCompletion], bool]:
    """Append missing days up to today and drop entries outside the window.

    Entries dated after today (clock or time zone change) are dropped too.

    Returns the new list and whether anything changed.
    """
    out = sorted((c for c in completions if c.date <= today), key=lambda c: c.date)
    changed = [c.date for c in out] != [c.date for c in completions]

    last = out[-1].date if out else today - timedelta(days=1)
    day = last + timedelta(days=1)
    while day <= today:
        out.append(DailyCompletion(date=day, completed=False))
        changed = True
        day += timedelta(days=1)

    oldest = today - timedelta(days=days - 1)
    kept = [c for c in out if c.date >= oldest]
    if len(kept) != len(out):
        changed = True
    return kept, changed


def find_completion(completions: list[DailyCompletion], day: date) -> DailyCompletion | None:
    return next((c for c in completions if c.date == day), None)


def current_streak(completions: list[DailyCompletion], today: date) -> int:
    """Count consecutive completed days ending today.

    An unfinished today does not break the streak; counting starts from
    yesterday in that case.
    """
    by_day = {c.date: c.completed for c in completions}
    day = today
    if not by_day.get(day, False):
        day = today - timedelta(days=1)
    streak = 0
    while by_day.get(day, False):
        streak += 1
        day -= timedelta(days=1)
    return streak


def completion_rate(completions: list[DailyCompletion]) -> float:
    if not completions:
        return 0.0
    done = sum(1 for c in completions if c.completed)
    return round(done / len(completions), 3)
