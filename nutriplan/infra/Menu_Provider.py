"""Spoonacular adapter: one-day menus and per-recipe ingredient lists."""
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from nutriplan.domain.Meal_Plan import clean_number
from nutriplan.domain.Menu import Menu, MenuSlotSource
from nutriplan.domain.errors import ProviderUnavailable
from nutriplan.infra.http_client import request_json
from nutriplan.logic.dietary.mapping import map_to_menu_tag
from nutriplan.utilities.config import SPOONACULAR_API_KEY, SPOONACULAR_BASE_URL
from nutriplan.utilities.constants import (
    BREAKFAST, LUNCH, DINNER, SNACK,
    CANNED_MEAL_TITLES, FALLBACK_MEAL_TITLES, MENU_PROVIDER_SLOTS, SNACK_OPTIONS,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Spoonacular"


def fallback_menu() -> Menu:
    """Static menu used when the provider cannot be reached: no ids, no nutrients."""
    return Menu(
        slots=(
            MenuSlotSource(BREAKFAST, title=FALLBACK_MEAL_TITLES[BREAKFAST]),
            MenuSlotSource(LUNCH, title=FALLBACK_MEAL_TITLES[LUNCH]),
            MenuSlotSource(DINNER, title=FALLBACK_MEAL_TITLES[DINNER]),
            MenuSlotSource(SNACK, options=SNACK_OPTIONS),
        ),
        nutrients=None,
    )


def _meal_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _slot_source(name: str, entry: Optional[Mapping[str, Any]]) -> MenuSlotSource:
    title = entry.get("title") if isinstance(entry, Mapping) else None
    if not isinstance(title, str) or not title.strip():
        return MenuSlotSource(name, title=CANNED_MEAL_TITLES[name])
    return MenuSlotSource(name, meal_id=_meal_id(entry.get("id")), title=title.strip())


def normalize_menu(data: Any) -> Menu:
    """Turn a mealplanner/generate body into exactly four ordered slots.

    Meals carrying a known `slot` number are placed there; the rest fill the
    remaining main slots in the order received. Empty slots get a canned title.
    """
    if not isinstance(data, Mapping):
        raise ProviderUnavailable(PROVIDER_NAME, "menu body is not an object")
    meals = data.get("meals")
    if not isinstance(meals, list):
        meals = []
    by_slot: Dict[str, Mapping[str, Any]] = {}
    unslotted: List[Mapping[str, Any]] = []
    for meal in meals:
        if not isinstance(meal, Mapping):
            continue
        slot_name = MENU_PROVIDER_SLOTS.get(meal.get("slot"))
        if slot_name and slot_name not in by_slot:
            by_slot[slot_name] = meal
        elif meal.get("slot") is None:
            unslotted.append(meal)
    for name in (BREAKFAST, LUNCH, DINNER):
        if name not in by_slot and unslotted:
            by_slot[name] = unslotted.pop(0)

    nutrients = data.get("nutrients")
    return Menu(
        slots=(
            _slot_source(BREAKFAST, by_slot.get(BREAKFAST)),
            _slot_source(LUNCH, by_slot.get(LUNCH)),
            _slot_source(DINNER, by_slot.get(DINNER)),
            # The provider does not plan snacks
            MenuSlotSource(SNACK, options=SNACK_OPTIONS),
        ),
        nutrients=dict(nutrients) if isinstance(nutrients, Mapping) else None,
    )


class SpoonacularClient:
    def __init__(self, http: httpx.AsyncClient, api_key: str = SPOONACULAR_API_KEY,
                 base_url: str = SPOONACULAR_BASE_URL):
        self.http = http
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def fetch_menu(self, dietary_preference: Any, target_calories: float) -> Menu:
        """Return a four-slot menu for the day. Never raises; failures give the fallback menu."""
        params: Dict[str, Any] = {
            "apiKey": self.api_key,
            "timeFrame": "day",
            "targetCalories": clean_number(target_calories),
        }
        diet = map_to_menu_tag(dietary_preference)
        if diet:
            params["diet"] = diet
        try:
            data = await request_json(self.http, PROVIDER_NAME, "GET",
                                      f"{self.base_url}/mealplanner/generate", params=params)
            return normalize_menu(data)
        except ProviderUnavailable as e:
            logger.warning("Menu provider failed, using fallback menu: %s", e)
            return fallback_menu()

    async def fetch_ingredients(self, meal_id: int) -> List[Mapping[str, Any]]:
        """Return the raw ingredient entries of a recipe. Raises ProviderUnavailable."""
        data = await request_json(self.http, PROVIDER_NAME, "GET",
                                  f"{self.base_url}/recipes/{meal_id}/information",
                                  params={"apiKey": self.api_key, "includeNutrition": "false"})
        entries = data.get("extendedIngredients") if isinstance(data, Mapping) else None
        if not isinstance(entries, list):
            raise ProviderUnavailable(PROVIDER_NAME, f"no ingredient list for recipe {meal_id}")
        return [e for e in entries if isinstance(e, Mapping)]
