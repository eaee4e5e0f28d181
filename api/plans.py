"""Plan API router.

Workout and nutrition plans share one shape, so each kind gets the same
pair of endpoints: fetch the latest plan and submit a new one.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import Principal, require_email_principal
from core.http import no_cache_response
from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import PlanUpdateRequest, WorkoutPlanUpdateResponse, NutritionPlanUpdateResponse
from services.plan_service import workout_plan_service, nutrition_plan_service

logger = get_logger("api.plans")
router = APIRouter(prefix="/api/user", tags=["plans"])


@router.get("/workout/plan")
def get_workout_plan(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_read),
):
    """Return the latest workout plan document merged with its bookkeeping fields.

    Raises:
        NotFoundError: If the user or any workout plan is missing.
    """
    return no_cache_response(workout_plan_service.get_latest_plan(db, principal.email))


@router.post("/workout/update", response_model=WorkoutPlanUpdateResponse)
def update_workout_plan(
    payload: PlanUpdateRequest,
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Store a new workout plan valid for the next 30 days.

    Raises:
        ValidationError: If no plan was submitted.
        NotFoundError: If the user row is missing.
    """
    record = workout_plan_service.create_plan(db, principal.email, payload)
    return WorkoutPlanUpdateResponse(workout_plan=record)


@router.get("/nutrition/plan")
def get_nutrition_plan(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_read),
):
    """Return the latest nutrition plan document merged with its bookkeeping fields."""
    return no_cache_response(nutrition_plan_service.get_latest_plan(db, principal.email))


@router.post("/nutrition/update", response_model=NutritionPlanUpdateResponse)
def update_nutrition_plan(
    payload: PlanUpdateRequest,
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Store a new nutrition plan valid for the next 30 days."""
    record = nutrition_plan_service.create_plan(db, principal.email, payload)
    return NutritionPlanUpdateResponse(nutrition_plan=record)
