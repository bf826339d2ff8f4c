"""Plan request entity: calorie target, dietary preference, adjustment, workout flag."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from nutriplan.domain.errors import InvalidRequest


class DietaryPreference(str, Enum):
    BALANCED = "balanced"
    HIGH_PROTEIN = "high_protein"
    KETO = "keto"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PALEO = "paleo"

    @classmethod
    def coerce(cls, value: Any) -> "DietaryPreference":
        '''Returns the matching preference; unknown identifiers become BALANCED.'''
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.BALANCED


@dataclass(frozen=True)
class PlanRequest:
    calories: float
    dietary_preference: str
    adjustment: int = 0
    include_workout: bool = False

    @property
    def preference(self) -> DietaryPreference:
        return DietaryPreference.coerce(self.dietary_preference)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PlanRequest":
        '''Builds a request from wire keys. Only calories and dietaryPreference are required.'''
        d = dict(data) if isinstance(data, Mapping) else {}
        calories = d.get("calories")
        preference = d.get("dietaryPreference")
        if not calories or not preference:
            raise InvalidRequest()
        return PlanRequest(
            calories=calories,
            dietary_preference=preference,
            adjustment=d.get("adjustment") or 0,
            include_workout=bool(d.get("includeWorkout", False)),
        )
