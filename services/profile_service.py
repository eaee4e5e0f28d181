"""Profile service.

Reads and updates the profile attributes of the signed-in user: the profile
projection, partial profile updates, weight check-ins and the onboarding
completion flag.
"""

import math
from datetime import datetime
from typing import Any, Dict
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import UserRepository, workout_plans, nutrition_plans
from database.models import User
from schemas.user_schema import (
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    WeightUpdateResponse,
    CompleteOnboardingResponse,
    OnboardingRequest,
    OnboardingResponse,
)

logger = get_logger("services.profile_service")

PROFILE_FIELDS = (
    "id",
    "email",
    "name",
    "image",
    "has_completed_onboarding",
    "age",
    "sex",
    "height",
    "weight",
    "target_weight",
    "starting_weight",
    "goal_type",
    "experience_level",
    "preferred_workout_days",
    "weak_points",
    "favorite_foods",
    "allergies",
    "target_date",
    "created_at",
    "updated_at",
)

UPDATABLE_FIELDS = (
    "name",
    "height",
    "weight",
    "goal_type",
    "experience_level",
    "target_weight",
    "target_date",
)

USER_NOT_FOUND = "User not found in database"

LB_TO_KG = 0.453592
INCH_TO_CM = 2.54


def profile_projection(user: User) -> Dict[str, Any]:
    """Return the profile columns of `user` plus the `current_weight` alias."""
    data = {field: getattr(user, field) for field in PROFILE_FIELDS}
    for field in ("preferred_workout_days", "weak_points", "favorite_foods", "allergies"):
        data[field] = data[field] or []
    data["current_weight"] = user.weight
    return data


def is_valid_weight(value: Any) -> bool:
    """A weight must be a finite, non-zero JSON number; booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value != 0


class ProfileService:
    """Class-based profile operations used by the profile router."""

    def get_profile(self, db: Session, user_id: int) -> ProfileResponse:
        """Return the profile projection for the user with `user_id`.

        Raises:
            NotFoundError: If no user row exists for the id.
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            logger.info("Profile requested for unknown user id=%s", user_id)
            raise NotFoundError(USER_NOT_FOUND, resource="User")
        return ProfileResponse(**profile_projection(user))

    def update_profile(self, db: Session, email: str, payload: ProfileUpdateRequest) -> ProfileUpdateResponse:
        """Overwrite exactly the profile columns present in `payload`.

        `currentWeight` is accepted as a spelling of `weight`; when both are
        sent, `weight` wins.

        Raises:
            NotFoundError: If no user row matches the email.
            ValidationError: If the payload carries no updatable field.
        """
        users = UserRepository(db)
        user = users.get_by_email(email)
        if not user:
            raise NotFoundError(USER_NOT_FOUND, resource="User")

        changes = payload.model_dump(exclude_unset=True)
        if "current_weight" in changes:
            changes.setdefault("weight", changes.pop("current_weight"))
        if not changes:
            raise ValidationError("No valid fields provided for update")

        for field, value in changes.items():
            setattr(user, field, value)
        user = users.update(user)
        logger.info("Profile updated for user id=%s fields=%s", user.id, sorted(changes))

        return ProfileUpdateResponse(
            id=user.id,
            updated_at=user.updated_at,
            **{field: getattr(user, field) for field in UPDATABLE_FIELDS},
        )

    def update_weight(self, db: Session, email: str, weight: Any) -> WeightUpdateResponse:
        """Record a new current weight.

        Raises:
            ValidationError: If `weight` is missing, zero or not a number.
            NotFoundError: If no user row matches the email.
        """
        if not is_valid_weight(weight):
            raise ValidationError("Weight is required and must be a number", field="weight")

        users = UserRepository(db)
        user = users.get_by_email(email)
        if not user:
            raise NotFoundError("User not found", resource="User")

        user.weight = float(weight)
        user = users.update(user)
        logger.info("Weight updated for user id=%s", user.id)
        return WeightUpdateResponse(message="Weight updated successfully", weight=user.weight)

    def submit_onboarding(self, db: Session, user_id: int, payload: OnboardingRequest) -> OnboardingResponse:
        """Store the onboarding form and mark onboarding as completed.

        Weights arrive in pounds and are stored in kilograms; the submitted
        weight also becomes the starting weight. Height arrives in inches
        and is stored in whole centimeters. Optional lists and the target
        date are written only when sent.

        Raises:
            NotFoundError: If no user row exists for the id.
        """
        users = UserRepository(db)
        user = users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found", resource="User")

        weight_kg = payload.current_weight * LB_TO_KG
        user.name = payload.name
        user.age = payload.age
        user.sex = payload.sex
        user.height = float(round(payload.height * INCH_TO_CM))
        user.weight = weight_kg
        user.starting_weight = weight_kg
        user.target_weight = payload.target_weight * LB_TO_KG
        user.goal_type = payload.goal_type
        user.experience_level = payload.experience_level
        user.preferred_workout_days = list(payload.preferred_workout_days)
        for field in ("weak_points", "favorite_foods", "allergies", "target_date"):
            value = getattr(payload, field)
            if value is not None:
                setattr(user, field, value)
        user.has_completed_onboarding = True
        user = users.update(user)
        logger.info("Onboarding details stored for user id=%s goal=%s", user.id, user.goal_type)

        return OnboardingResponse(
            message="Onboarding details saved successfully",
            user=ProfileResponse(**profile_projection(user)),
        )

    def complete_onboarding(self, db: Session, email: str) -> CompleteOnboardingResponse:
        """Mark onboarding as completed and return the refreshed profile.

        Plans are produced by the plan generation flow, not here; missing
        plans are only reported in the log.

        Raises:
            NotFoundError: If no user row matches the email.
        """
        users = UserRepository(db)
        user = users.get_by_email(email)
        if not user:
            raise NotFoundError(USER_NOT_FOUND, resource="User")

        has_workout = workout_plans(db).latest_for_user(user.id) is not None
        has_nutrition = nutrition_plans(db).latest_for_user(user.id) is not None
        if has_workout and has_nutrition:
            logger.info("Plans already exist for user id=%s", user.id)
        else:
            logger.warning(
                "Completing onboarding for user id=%s with missing plans (workout=%s nutrition=%s)",
                user.id, has_workout, has_nutrition,
            )

        user.has_completed_onboarding = True
        user.updated_at = datetime.utcnow()
        user = users.update(user)
        logger.info("Onboarding completed for user id=%s", user.id)

        return CompleteOnboardingResponse(
            message="Onboarding completed successfully",
            user=ProfileResponse(**profile_projection(user)),
        )


# export singleton
profile_service = ProfileService()
__all__ = ["ProfileService", "profile_service", "profile_projection"]
