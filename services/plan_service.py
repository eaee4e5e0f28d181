"""Plan service for workout and nutrition plans.

Both plan kinds share one shape: an opaque JSON document plus bookkeeping
columns. Submissions always insert a new row; the current plan is the most
recently created one.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Type
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import PlanRepository, UserRepository
from database.models import NutritionPlan, WorkoutPlan
from schemas.plan_schema import PlanRecord, PlanUpdateRequest

logger = get_logger("services.plan_service")

# Validity window of a submitted plan, not user-configurable.
PLAN_VALIDITY_DAYS = 30


def flatten_plan(row) -> Dict[str, Any]:
    """Merge a plan document's top-level keys with the row's bookkeeping fields.

    Bookkeeping fields win over same-named keys inside the document. A
    document that is not a JSON object contributes nothing.
    """
    document = row.plan if isinstance(row.plan, dict) else {}
    return {
        **document,
        "id": row.id,
        "planName": row.plan_name,
        "startDate": row.start_date,
        "endDate": row.end_date,
        "createdAt": row.created_at,
        "updatedAt": row.updated_at,
    }


def to_record(row) -> PlanRecord:
    return PlanRecord(
        id=row.id,
        user_id=row.user_id,
        plan_name=row.plan_name,
        plan=row.plan,
        start_date=row.start_date,
        end_date=row.end_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PlanService:
    """Create and fetch plans of one kind.

    Parameters
    ----------
    model: type
        ORM model backing this plan kind.
    kind: str
        Lower-case kind used in messages ("workout", "nutrition").
    """

    def __init__(self, model: Type, kind: str):
        self.model = model
        self.kind = kind
        self.default_name = f"{kind.capitalize()} Plan"

    def _plans(self, db: Session) -> PlanRepository:
        return PlanRepository(self.model, db)

    def get_latest_plan(self, db: Session, email: str) -> Dict[str, Any]:
        """Return the user's most recent plan, flattened for the frontend.

        Raises:
            NotFoundError: If the user or any plan row is missing.
        """
        user = UserRepository(db).get_by_email(email)
        if not user:
            raise NotFoundError("User not found in database", resource="User")

        row = self._plans(db).latest_for_user(user.id)
        if row is None:
            logger.info("No %s plan found for user id=%s", self.kind, user.id)
            raise NotFoundError(f"No {self.kind} plan found", resource=self.model.__name__)

        logger.info("%s plan found: id=%s name=%s created=%s", self.kind, row.id, row.plan_name, row.created_at)
        return flatten_plan(row)

    def create_plan(self, db: Session, email: str, payload: PlanUpdateRequest) -> PlanRecord:
        """Store a submitted plan document as the user's newest plan.

        The plan name comes from the payload's `planName`, else the
        document's own `planName`, else the kind's default name.

        Raises:
            ValidationError: If the payload has no (or an empty) plan.
            NotFoundError: If no user row matches the email.
        """
        if not payload.plan:
            raise ValidationError(f"{self.kind.capitalize()} plan is required", field="plan")

        user = UserRepository(db).get_by_email(email)
        if not user:
            raise NotFoundError("User not found", resource="User")

        plan_name = payload.plan_name
        if not plan_name and isinstance(payload.plan, dict):
            plan_name = payload.plan.get("planName")

        now = datetime.utcnow()
        row = self.model(
            user_id=user.id,
            plan_name=plan_name or self.default_name,
            plan=payload.plan,
            start_date=now,
            end_date=now + timedelta(days=PLAN_VALIDITY_DAYS),
        )
        row = self._plans(db).create(row)
        logger.info("Created %s plan id=%s for user id=%s", self.kind, row.id, user.id)
        return to_record(row)


# export singletons
workout_plan_service = PlanService(WorkoutPlan, "workout")
nutrition_plan_service = PlanService(NutritionPlan, "nutrition")
__all__ = ["PlanService", "workout_plan_service", "nutrition_plan_service", "PLAN_VALIDITY_DAYS"]
