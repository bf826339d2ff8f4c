"""Meal plan entities: meal slots, workout recommendations and the composed plan."""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

Number = Union[int, float]


def clean_number(value: Number) -> Number:
    """Report integral floats as int (2900.0 -> 2900)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _as_number(value: Any) -> Number:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class MealSlot:
    meal: str
    calories: Number
    ingredients: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meal": self.meal,
            "calories": clean_number(self.calories),
            "ingredients": list(self.ingredients),
        }


@dataclass(frozen=True)
class WorkoutRecommendation:
    workout_type: str = ""
    duration_minutes: Number = 0
    intensity: str = ""
    estimated_calories_burned: Number = 0
    description: str = ""

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "WorkoutRecommendation":
        '''Creates a recommendation from provider keys. Missing fields get neutral defaults.'''
        d = dict(data) if isinstance(data, Mapping) else {}
        return WorkoutRecommendation(
            workout_type=str(d.get("workoutType") or ""),
            duration_minutes=_as_number(d.get("durationMinutes", 0)),
            intensity=str(d.get("intensity") or ""),
            estimated_calories_burned=_as_number(d.get("estimatedCaloriesBurned", 0)),
            description=str(d.get("description") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workoutType": self.workout_type,
            "durationMinutes": clean_number(self.duration_minutes),
            "intensity": self.intensity,
            "estimatedCaloriesBurned": clean_number(self.estimated_calories_burned),
            "description": self.description,
        }


@dataclass(frozen=True)
class MealPlan:
    meals: Tuple[MealSlot, ...]
    total_calories: Number
    workout_calories_burned: Number = 0
    workout_recommendations: Tuple[WorkoutRecommendation, ...] = field(default_factory=tuple)
    nutrients: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        '''Wire form; workoutRecommendations and nutrients only appear when present.'''
        out: Dict[str, Any] = {
            "meals": [m.to_dict() for m in self.meals],
            "totalCalories": clean_number(self.total_calories),
            "workoutCaloriesBurned": clean_number(self.workout_calories_burned),
        }
        if self.workout_recommendations:
            out["workoutRecommendations"] = [w.to_dict() for w in self.workout_recommendations]
        if self.nutrients is not None:
            out["nutrients"] = dict(self.nutrients)
        return out
