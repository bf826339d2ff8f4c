"""Dietary preference lookups for the menu and workout providers."""
from typing import Any

from nutriplan.domain.Plan_Request import DietaryPreference
from nutriplan.utilities.constants import DEFAULT_PREFERENCE, MENU_DIET_TAGS, WORKOUT_GOALS


def map_to_menu_tag(preference: Any) -> str:
    """Diet tag understood by the menu provider; "" means no restriction."""
    key = DietaryPreference.coerce(preference).value
    return MENU_DIET_TAGS.get(key, MENU_DIET_TAGS[DEFAULT_PREFERENCE])


def map_to_workout_goal(preference: Any) -> str:
    key = DietaryPreference.coerce(preference).value
    return WORKOUT_GOALS.get(key, WORKOUT_GOALS[DEFAULT_PREFERENCE])


__all__ = ["map_to_menu_tag", "map_to_workout_goal"]
