"""Status and dashboard aggregation.

Combines the onboarding flag with the user's latest workout and nutrition
plan documents. The dashboard adds a few figures derived from those
documents and the profile, reported in pounds.
"""

import math
from datetime import datetime
from typing import Any, Optional, Tuple
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import UserRepository, workout_plans, nutrition_plans
from database.models import User
from schemas.status_schema import DashboardResponse, DashboardUser, StatusResponse, WeightProgress

logger = get_logger("services.status_service")

KG_TO_LB = 2.20462


def kg_to_lb(kg: float) -> float:
    return kg * KG_TO_LB


class StatusService:

    def _find_user(self, db: Session, email: str) -> User:
        user = UserRepository(db).get_by_email(email)
        if not user:
            logger.info("User not found: %s", email)
            raise NotFoundError("User not found", resource="User")
        return user

    def latest_documents(self, db: Session, user: User) -> Tuple[Optional[Any], Optional[Any]]:
        """Return the latest workout and nutrition documents.

        A document counts only when its row exists and the document is
        truthy, so null or empty documents come back as None.
        """
        workout = workout_plans(db).latest_for_user(user.id)
        nutrition = nutrition_plans(db).latest_for_user(user.id)
        workout_doc = workout.plan if workout is not None and workout.plan else None
        nutrition_doc = nutrition.plan if nutrition is not None and nutrition.plan else None
        return workout_doc, nutrition_doc

    def get_status(self, db: Session, email: str) -> StatusResponse:
        """Return the onboarding flag and latest plan documents.

        Raises:
            NotFoundError: If no user row matches the email.
        """
        user = self._find_user(db, email)
        workout_doc, nutrition_doc = self.latest_documents(db, user)
        status = StatusResponse(
            has_completed_onboarding=user.has_completed_onboarding,
            has_workout_plan=workout_doc is not None,
            has_nutrition_plan=nutrition_doc is not None,
            workout_plan=workout_doc,
            nutrition_plan=nutrition_doc,
        )
        logger.info(
            "Status for user id=%s: onboarded=%s workout=%s nutrition=%s",
            user.id, status.has_completed_onboarding, status.has_workout_plan, status.has_nutrition_plan,
        )
        return status

    def get_dashboard(self, db: Session, email: str, now: datetime = None) -> DashboardResponse:
        """Return the status payload extended with dashboard figures.

        Raises:
            NotFoundError: If no user row matches the email.
        """
        now = now or datetime.utcnow()
        user = self._find_user(db, email)
        workout_doc, nutrition_doc = self.latest_documents(db, user)

        return DashboardResponse(
            has_completed_onboarding=user.has_completed_onboarding,
            has_workout_plan=workout_doc is not None,
            has_nutrition_plan=nutrition_doc is not None,
            workout_plan=workout_doc,
            nutrition_plan=nutrition_doc,
            daily_calories=daily_calories(nutrition_doc),
            workout_completion=workout_completion(workout_doc),
            weight_progress=weight_progress(user),
            days_to_goal=days_to_goal(user.target_date, now),
            user=DashboardUser(
                name=user.name,
                email=user.email,
                goal_type=user.goal_type,
                experience_level=user.experience_level,
                target_weight=kg_to_lb(user.target_weight) if user.target_weight else None,
                starting_weight=kg_to_lb(user.starting_weight) if user.starting_weight else None,
            ),
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def daily_calories(nutrition_doc: Any) -> float:
    """Calories from the nutrition document's `dailyTargets`, else 0."""
    if not isinstance(nutrition_doc, dict):
        return 0
    targets = nutrition_doc.get("dailyTargets")
    if not isinstance(targets, dict):
        return 0
    calories = targets.get("calories")
    return calories if _is_number(calories) else 0


def workout_completion(workout_doc: Any) -> float:
    """Percentage of completed workouts recorded in the workout document.

    Counts that are missing, zero or not numbers yield 0.
    """
    if not isinstance(workout_doc, dict):
        return 0
    completed = workout_doc.get("completedWorkouts")
    total = workout_doc.get("totalWorkouts")
    if not _is_number(completed) or not _is_number(total) or not completed or not total:
        return 0
    return completed / total * 100


def weight_progress(user: User) -> Optional[WeightProgress]:
    """Current, starting and goal weight in pounds; None without a weight.

    Without a target weight the goal defaults to 90% of the current weight
    for weight loss and 110% otherwise.
    """
    if not user.weight:
        return None
    if user.target_weight:
        goal = user.target_weight
    elif user.goal_type == "weight_loss":
        goal = user.weight * 0.9
    else:
        goal = user.weight * 1.1
    return WeightProgress(
        current=kg_to_lb(user.weight),
        start=kg_to_lb(user.starting_weight or user.weight),
        goal=kg_to_lb(goal),
        goal_type=user.goal_type,
        target_date=user.target_date,
    )


def days_to_goal(target_date: Optional[datetime], now: datetime) -> int:
    """Whole days until `target_date`, rounded up; 0 without a target date."""
    if target_date is None:
        return 0
    return math.ceil((target_date - now).total_seconds() / 86400)


# export singleton
status_service = StatusService()
__all__ = ["StatusService", "status_service"]
