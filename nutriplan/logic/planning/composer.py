"""Plan composition: the orchestration of providers, allocation and ingredients.

Flow for one request:
  1. menu fetch and (when requested) workout fetch, concurrently
  2. workout burn -> adjusted daily budget -> per-slot calories
  3. four ingredient resolutions, concurrently, joined in slot order
  4. MealPlan assembly

Every provider call carries its own fallback, so composing a plan can only
fail on a request that is missing required fields.
"""
import asyncio
import logging
import random
from typing import Any, Mapping, Optional, Protocol, Tuple, Union

from nutriplan.domain.Meal_Plan import MealPlan, MealSlot, WorkoutRecommendation
from nutriplan.domain.Menu import Menu
from nutriplan.domain.Plan_Request import PlanRequest
from nutriplan.infra.Menu_Provider import SpoonacularClient
from nutriplan.infra.Workout_Provider import FitnessTrackerClient
from nutriplan.infra.http_client import create_http_client
from nutriplan.logic.planning.allocation import adjusted_calories, allocate_calories, workout_calories
from nutriplan.logic.planning.ingredients import IngredientProvider, resolve_ingredients

logger = logging.getLogger(__name__)


class MenuProvider(IngredientProvider, Protocol):
    async def fetch_menu(self, dietary_preference: Any, target_calories: float) -> Menu: ...


class WorkoutProvider(Protocol):
    async def fetch_workouts(self, calories: float, dietary_preference: Any) -> Tuple[WorkoutRecommendation, ...]: ...


class PlanComposer:
    def __init__(self, menu_provider: MenuProvider, workout_provider: Optional[WorkoutProvider] = None,
                 rng: Optional[random.Random] = None):
        self.menu_provider = menu_provider
        self.workout_provider = workout_provider
        self.rng = rng or random.Random()

    async def _workouts(self, request: PlanRequest) -> Tuple[WorkoutRecommendation, ...]:
        # Not asking for workouts is not a failure: no fallback sessions here
        if not request.include_workout or self.workout_provider is None:
            return ()
        return tuple(await self.workout_provider.fetch_workouts(request.calories, request.dietary_preference))

    async def compose_plan(self, request: Union[PlanRequest, Mapping[str, Any]]) -> MealPlan:
        if not isinstance(request, PlanRequest):
            request = PlanRequest.from_dict(request)

        menu, workouts = await asyncio.gather(
            self.menu_provider.fetch_menu(request.dietary_preference, request.calories),
            self._workouts(request),
        )

        burned = workout_calories(w.estimated_calories_burned for w in workouts)
        total = adjusted_calories(request.calories, request.adjustment, burned)
        budgets = allocate_calories(total)
        logger.debug("Budget %s kcal (%s burned) split as %s", total, burned, budgets)

        titles = [source.choose(self.rng) for source in menu.slots]
        ingredients = await asyncio.gather(*(
            resolve_ingredients(self.menu_provider, source.meal_id, source.name,
                                request.preference, title, calories)
            for source, title, calories in zip(menu.slots, titles, budgets)
        ))

        meals = tuple(
            MealSlot(meal=title, calories=calories, ingredients=tuple(items))
            for title, calories, items in zip(titles, budgets, ingredients)
        )
        return MealPlan(
            meals=meals,
            total_calories=total,
            workout_calories_burned=burned,
            workout_recommendations=workouts,
            nutrients=menu.nutrients,
        )


async def compose_plan(request: Union[PlanRequest, Mapping[str, Any]],
                       rng: Optional[random.Random] = None) -> MealPlan:
    """Compose a plan against the configured live providers."""
    if not isinstance(request, PlanRequest):
        request = PlanRequest.from_dict(request)
    async with create_http_client() as http:
        composer = PlanComposer(SpoonacularClient(http), FitnessTrackerClient(http), rng=rng)
        return await composer.compose_plan(request)


__all__ = ["MenuProvider", "WorkoutProvider", "PlanComposer", "compose_plan"]
