"""Pydantic schema package for request and response models."""

from .user_schema import (
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    WeightUpdateRequest,
    WeightUpdateResponse,
    CompleteOnboardingResponse,
    OnboardingRequest,
    OnboardingResponse,
)
from .plan_schema import PlanRecord, PlanUpdateRequest, WorkoutPlanUpdateResponse, NutritionPlanUpdateResponse
from .status_schema import StatusResponse, DashboardResponse, ResetProgressResponse, ResetResponse
from .tips_schema import TipCategory, TipsIndexResponse, CategoryTipsResponse

__all__ = [
    "ProfileResponse",
    "ProfileUpdateRequest",
    "ProfileUpdateResponse",
    "WeightUpdateRequest",
    "WeightUpdateResponse",
    "CompleteOnboardingResponse",
    "OnboardingRequest",
    "OnboardingResponse",
    "PlanRecord",
    "PlanUpdateRequest",
    "WorkoutPlanUpdateResponse",
    "NutritionPlanUpdateResponse",
    "StatusResponse",
    "DashboardResponse",
    "ResetProgressResponse",
    "ResetResponse",
    "TipCategory",
    "TipsIndexResponse",
    "CategoryTipsResponse",
]
