"""Calorie budget arithmetic.

The three main meals get a rounded 30% each and the snack absorbs whatever is
left, so the four slots always add up to the budget exactly.
"""
import math
from typing import Iterable, Tuple, Union

from nutriplan.utilities.constants import MAIN_MEAL_SHARE, WORKOUT_CALORIES_FACTOR

Number = Union[int, float]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (round() would give 2 for 2.5)."""
    return int(math.floor(value + 0.5))


def workout_calories(burns: Iterable[Number]) -> Number:
    return sum(burns, 0)


def adjusted_calories(calories: Number, adjustment: Number, burned: Number) -> Number:
    return calories + adjustment + burned * WORKOUT_CALORIES_FACTOR


def allocate_calories(total: Number) -> Tuple[Number, Number, Number, Number]:
    """Split total into (breakfast, lunch, dinner, snack)."""
    main = round_half_up(total * MAIN_MEAL_SHARE)
    breakfast = lunch = dinner = main
    snack = total - (breakfast + lunch + dinner)
    return breakfast, lunch, dinner, snack


__all__ = ["round_half_up", "workout_calories", "adjusted_calories", "allocate_calories"]
