"""Ingredient resolution for a single meal slot.

Identified meals are looked up at the menu provider; everything else is
resolved locally. No path raises: failures turn into a placeholder list.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Tuple

from nutriplan.domain.Meal_Plan import clean_number
from nutriplan.domain.Plan_Request import DietaryPreference
from nutriplan.domain.errors import ProviderUnavailable
from nutriplan.utilities.constants import (
    BREAKFAST, SNACK, HEURISTIC_INGREDIENTS, INGREDIENTS_UNAVAILABLE,
)

logger = logging.getLogger(__name__)


class IngredientProvider(Protocol):
    async def fetch_ingredients(self, meal_id: int) -> List[Mapping[str, Any]]: ...


def _format_amount(amount: Any) -> str:
    if isinstance(amount, bool) or amount is None:
        return ""
    if isinstance(amount, (int, float)):
        return f"{amount:g}"
    return str(amount).strip()


def format_ingredient(entry: Mapping[str, Any]) -> str:
    """Format as "<amount> <unit> <name>", leaving out empty parts."""
    parts = (
        _format_amount(entry.get("amount")),
        str(entry.get("unit") or "").strip(),
        str(entry.get("name") or "").strip(),
    )
    return " ".join(p for p in parts if p)


def format_ingredients(entries: Iterable[Mapping[str, Any]]) -> Tuple[str, ...]:
    lines = (format_ingredient(e) for e in entries)
    return tuple(line for line in lines if line)


def heuristic_ingredients(meal_type: str, preference: Any) -> Tuple[str, ...]:
    """Deterministic guess for a meal the provider did not identify."""
    group = HEURISTIC_INGREDIENTS["breakfast" if meal_type == BREAKFAST else "main"]
    key = DietaryPreference.coerce(preference).value
    return group.get(key, group["default"])


def snack_placeholder(selected_title: str, calories: Any) -> Tuple[str, ...]:
    return (f"{selected_title} (one portion, about {clean_number(calories)} kcal)",)


async def resolve_ingredients(provider: Optional[IngredientProvider], meal_id: Optional[int],
                              meal_type: str, preference: Any, selected_title: str,
                              calories: Any = None) -> Tuple[str, ...]:
    if meal_id is None or provider is None:
        if meal_type == SNACK:
            return snack_placeholder(selected_title, calories)
        return heuristic_ingredients(meal_type, preference)

    try:
        entries = await provider.fetch_ingredients(meal_id)
    except ProviderUnavailable as e:
        logger.warning("Ingredient lookup for %s (%s) failed: %s", meal_type, meal_id, e)
        return (INGREDIENTS_UNAVAILABLE,)
    ingredients = format_ingredients(entries)
    if not ingredients:
        logger.warning(f"Ingredient lookup for {meal_type} ({meal_id}) returned no usable entries")
        return (INGREDIENTS_UNAVAILABLE,)
    return ingredients


__all__ = [
    "IngredientProvider", "format_ingredient", "format_ingredients",
    "heuristic_ingredients", "snack_placeholder", "resolve_ingredients",
]
