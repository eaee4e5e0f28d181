"""Schemas for profile, weight and onboarding requests and responses."""

from datetime import datetime
from pydantic import Field
from typing import Any, List, Literal, Optional

from .base import CamelModel


class ProfileResponse(CamelModel):
    """Fixed projection of the user row returned to the frontend.

    `current_weight` repeats `weight` for frontend compatibility.
    """

    id: int
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    has_completed_onboarding: bool = False
    age: Optional[int] = None
    sex: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    target_weight: Optional[float] = None
    starting_weight: Optional[float] = None
    goal_type: Optional[str] = None
    experience_level: Optional[str] = None
    preferred_workout_days: List[str] = []
    weak_points: List[str] = []
    favorite_foods: List[str] = []
    allergies: List[str] = []
    target_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    current_weight: Optional[float] = None


class ProfileUpdateRequest(CamelModel):
    """Partial profile update; only keys present in the payload are written."""

    name: Optional[str] = Field(None, min_length=1, examples=["Alex"])
    height: Optional[float] = Field(None, gt=0, examples=[178.0], description="Height in centimeters")
    weight: Optional[float] = Field(None, gt=0, examples=[80.5], description="Current weight in kilograms")
    current_weight: Optional[float] = Field(None, gt=0, description="Alias of weight sent by older clients")
    goal_type: Optional[str] = Field(None, examples=["weight_loss"])
    experience_level: Optional[str] = Field(None, examples=["beginner"])
    target_weight: Optional[float] = Field(None, gt=0, examples=[75.0], description="Target weight in kilograms")
    target_date: Optional[datetime] = Field(None, examples=["2026-12-31T00:00:00"])


class ProfileUpdateResponse(CamelModel):
    """Columns a profile update can touch, as stored after the write."""

    id: int
    name: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    goal_type: Optional[str] = None
    experience_level: Optional[str] = None
    target_weight: Optional[float] = None
    target_date: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WeightUpdateRequest(CamelModel):
    # Left untyped so a non-numeric value reaches the handler's own check.
    weight: Optional[Any] = Field(None, examples=[81.2], description="New weight in kilograms")


class WeightUpdateResponse(CamelModel):
    message: str
    weight: Optional[float] = None


class CompleteOnboardingResponse(CamelModel):
    success: bool = True
    message: str
    user: ProfileResponse
    refresh_session: bool = True


class OnboardingRequest(CamelModel):
    """Onboarding form as submitted: weights in pounds, height in whole inches."""

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=13, le=100)
    sex: Literal["male", "female"]
    current_weight: float = Field(..., ge=20, le=350, description="Pounds")
    target_weight: float = Field(..., ge=20, le=350, description="Pounds")
    height: int = Field(..., ge=36, le=96, description="Total inches")
    goal_type: Literal["weight_loss", "muscle_gain", "general_fitness", "strength_gain"]
    experience_level: Literal["beginner", "intermediate", "advanced"]
    preferred_workout_days: List[str] = Field(..., min_length=1)
    weak_points: Optional[List[str]] = None
    favorite_foods: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    target_date: Optional[datetime] = None


class OnboardingResponse(CamelModel):
    message: str
    user: ProfileResponse
