"""
Input schema for the meal plan endpoint, using Pydantic.

Required fields are deliberately optional here: a missing calorie target or
dietary preference must reach the planning core, which answers with
InvalidRequest (HTTP 400) rather than a schema error.
"""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Dict, Optional


class PlanRequestInput(BaseModel):
    """Schema for POST /nutrition/meal-plans."""
    model_config = ConfigDict(extra="ignore")

    calories: Optional[float] = None
    dietaryPreference: Optional[str] = None
    adjustment: Optional[int] = 0
    includeWorkout: Optional[bool] = False

    @field_validator('dietaryPreference')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_request_dict(self) -> Dict[str, Any]:
        return {
            "calories": self.calories,
            "dietaryPreference": self.dietaryPreference,
            "adjustment": self.adjustment or 0,
            "includeWorkout": bool(self.includeWorkout),
        }
