"""Schemas for onboarding status, dashboard and reset responses."""

from datetime import datetime
from pydantic import BaseModel
from typing import Any, Optional

from .base import CamelModel


class StatusResponse(CamelModel):
    """Onboarding flag plus presence of the latest plan documents."""

    has_completed_onboarding: bool
    has_workout_plan: bool
    has_nutrition_plan: bool
    workout_plan: Optional[Any] = None
    nutrition_plan: Optional[Any] = None


class WeightProgress(CamelModel):
    """Weights in pounds."""

    current: float
    start: float
    goal: float
    goal_type: Optional[str] = None
    target_date: Optional[datetime] = None


class DashboardUser(CamelModel):
    name: Optional[str] = None
    email: str
    goal_type: Optional[str] = None
    experience_level: Optional[str] = None
    target_weight: Optional[float] = None
    starting_weight: Optional[float] = None


class DashboardResponse(StatusResponse):
    daily_calories: float = 0
    workout_completion: float = 0
    weight_progress: Optional[WeightProgress] = None
    days_to_goal: int = 0
    user: DashboardUser


class ResetProgressResponse(BaseModel):
    success: bool = True


class ResetResponse(BaseModel):
    message: str
