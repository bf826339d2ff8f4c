from typing import AsyncIterator

from fastapi import APIRouter, Depends

from nutriplan.domain.Plan_Request import DietaryPreference, PlanRequest
from nutriplan.infra.Menu_Provider import SpoonacularClient
from nutriplan.infra.Workout_Provider import FitnessTrackerClient
from nutriplan.infra.http_client import create_http_client
from nutriplan.logic.planning.composer import PlanComposer
from nutriplan.utilities.validators import PlanRequestInput

router = APIRouter(prefix="/nutrition")


async def get_plan_composer() -> AsyncIterator[PlanComposer]:
    """One HTTP client per request, shared by both providers and closed afterwards."""
    async with create_http_client() as http:
        yield PlanComposer(SpoonacularClient(http), FitnessTrackerClient(http))


@router.post("/meal-plans", status_code=201)
async def create_meal_plan(body: PlanRequestInput, composer: PlanComposer = Depends(get_plan_composer)):
    request = PlanRequest.from_dict(body.to_request_dict())
    plan = await composer.compose_plan(request)
    return plan.to_dict()


@router.get("/dietary-preferences")
def list_dietary_preferences():
    """Identifiers accepted as dietaryPreference."""
    return {"preferences": [p.value for p in DietaryPreference]}
