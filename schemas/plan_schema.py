"""Schemas for workout and nutrition plan submissions."""

from datetime import datetime
from pydantic import Field
from typing import Any, Optional

from .base import CamelModel


class PlanUpdateRequest(CamelModel):
    """Submitted plan document. The document itself is stored uninterpreted."""

    plan: Optional[Any] = Field(None, examples=[{"planName": "PPL Split", "weeklySchedule": []}])
    plan_name: Optional[str] = Field(None, examples=["PPL Split"])


class PlanRecord(CamelModel):
    """A stored plan row with its bookkeeping fields."""

    id: int
    user_id: int
    plan_name: Optional[str] = None
    plan: Optional[Any] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WorkoutPlanUpdateResponse(CamelModel):
    workout_plan: PlanRecord


class NutritionPlanUpdateResponse(CamelModel):
    nutrition_plan: PlanRecord
