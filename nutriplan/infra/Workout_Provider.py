"""Fitness tracker adapter: workout recommendations for a calorie/goal pair."""
import logging
from typing import Any, Mapping, Tuple

import httpx

from nutriplan.domain.Meal_Plan import WorkoutRecommendation, clean_number
from nutriplan.domain.errors import ProviderUnavailable
from nutriplan.infra.http_client import request_json
from nutriplan.logic.dietary.mapping import map_to_workout_goal
from nutriplan.utilities.config import FITNESS_TRACKER_API_URL
from nutriplan.utilities.constants import FALLBACK_WORKOUTS

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Fitness tracker"


def fallback_workouts() -> Tuple[WorkoutRecommendation, ...]:
    """One cardio and one strength session, 500 kcal together."""
    return tuple(WorkoutRecommendation.from_dict(w) for w in FALLBACK_WORKOUTS)


class FitnessTrackerClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str = FITNESS_TRACKER_API_URL):
        self.http = http
        self.base_url = (base_url or "").rstrip("/")

    async def fetch_workouts(self, calories: float, dietary_preference: Any) -> Tuple[WorkoutRecommendation, ...]:
        """Return recommendations from the provider, or the fallback pair on any failure."""
        try:
            if not self.base_url:
                raise ProviderUnavailable(PROVIDER_NAME, "FITNESS_TRACKER_API_URL is not set")
            data = await request_json(
                self.http, PROVIDER_NAME, "POST", f"{self.base_url}/workout-recommendations",
                json={"caloriesConsumed": clean_number(calories), "dietaryGoal": map_to_workout_goal(dietary_preference)},
            )
            entries = data.get("recommendations") if isinstance(data, Mapping) else None
            if not isinstance(entries, list):
                raise ProviderUnavailable(PROVIDER_NAME, "recommendations missing from response")
        except ProviderUnavailable as e:
            logger.warning("Workout provider failed, using fallback workouts: %s", e)
            return fallback_workouts()
        return tuple(WorkoutRecommendation.from_dict(entry) for entry in entries if isinstance(entry, Mapping))
