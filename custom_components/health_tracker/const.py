"""Constants for Health Tracker integration."""

from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "health_tracker"

PLATFORMS: list[Platform] = [
    Platform.BUTTON,
    Platform.SENSOR,
    Platform.SELECT,
    Platform.NUMBER,
]

CONF_NAME = "name"
CONF_STEPS_ENTITY = "steps_entity"
CONF_NOTIFICATIONS = "notifications_enabled"

DEFAULT_NAME = "Health Tracker"
DEFAULT_NOTIFICATIONS = True

# Durable slot names.
SLOT_SHARED_PLANS = "sharedPlans"
SLOT_DAILY_COMPLETIONS = "dailyCompletions"

COMPLETION_WINDOW_DAYS = 49

DIFFICULTY_LEVELS = ["Beginner", "Intermediate", "Advanced"]
MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 180
DEFAULT_DURATION_MINUTES = 30

MOOD_CHOICES = ["😊", "😐", "😞", "😢"]
DEFAULT_MOOD = "😊"

STEPS_GOAL = 10000
STEPS_MINIMUM = 5000
WATER_GOAL_ML = 2000
WATER_MAX_ML = 5000
WATER_STEP_ML = 250

CATEGORY_ALL = "All"

