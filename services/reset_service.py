"""Reset service: clears a user's progress.

Two modes exist. `reset_progress` is the shallow reset behind the dashboard
button; each statement commits on its own. `full_reset` returns the account
to its pre-onboarding state inside one transaction: either every plan is
deleted and every profile field cleared, or nothing changes.
"""

from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import DatabaseError
from core.logger import get_logger
from core.repository import UserRepository, workout_plans, nutrition_plans
from database.models import User
from schemas.status_schema import ResetProgressResponse, ResetResponse

logger = get_logger("services.reset_service")

PROGRESS_NULL_FIELDS = ("weight", "height", "goal_type", "experience_level", "target_date")
PROGRESS_LIST_FIELDS = ("weak_points", "favorite_foods", "allergies")

FULL_NULL_FIELDS = PROGRESS_NULL_FIELDS + ("age", "sex", "target_weight", "starting_weight")
FULL_LIST_FIELDS = PROGRESS_LIST_FIELDS + ("preferred_workout_days",)


def clear_profile(user: User, null_fields, list_fields) -> None:
    """Null scalar fields, empty list fields and drop the onboarding flag."""
    for field in null_fields:
        setattr(user, field, None)
    for field in list_fields:
        setattr(user, field, [])
    user.has_completed_onboarding = False


class ResetService:

    def reset_progress(self, db: Session, email: str) -> ResetProgressResponse:
        """Clear progress fields and delete every plan, statement by statement.

        Raises:
            DatabaseError: If the user is unknown or a statement fails.
        """
        user = UserRepository(db).get_by_email(email)
        if user is None:
            logger.error("Reset progress requested for unknown user %s", email)
            raise DatabaseError("Failed to reset progress", operation="reset_progress")

        try:
            clear_profile(user, PROGRESS_NULL_FIELDS, PROGRESS_LIST_FIELDS)
            db.commit()
            workout_plans(db).delete_for_user(user.id)
            nutrition_plans(db).delete_for_user(user.id)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Error resetting progress for user id=%s", user.id)
            raise DatabaseError("Failed to reset progress", operation="reset_progress") from exc

        logger.info("Progress reset for user id=%s", user.id)
        return ResetProgressResponse(success=True)

    def full_reset(self, db: Session, user_id: int) -> ResetResponse:
        """Delete all plans and clear the profile as one atomic unit.

        Plans are deleted first, then the user row is cleared; the commit
        happens only after both succeed.

        Raises:
            DatabaseError: If any statement fails, including a missing user
                row. The transaction is rolled back first.
        """
        try:
            deleted_workouts = workout_plans(db).delete_for_user(user_id, commit=False)
            deleted_nutrition = nutrition_plans(db).delete_for_user(user_id, commit=False)

            user = UserRepository(db).get_by_id(user_id)
            if user is None:
                raise NoResultFound(f"No user row with id {user_id}")
            clear_profile(user, FULL_NULL_FIELDS, FULL_LIST_FIELDS)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Full reset rolled back for user id=%s", user_id)
            raise DatabaseError("An internal server error occurred during reset.", operation="reset") from exc

        logger.info(
            "Full reset for user id=%s (workout plans=%s, nutrition plans=%s)",
            user_id, deleted_workouts, deleted_nutrition,
        )
        return ResetResponse(message="User progress and onboarding status reset successfully.")


# export singleton
reset_service = ResetService()
__all__ = ["ResetService", "reset_service"]
