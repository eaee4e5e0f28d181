"""Profile API router.

Endpoints to read and update the signed-in user's profile, record weight
check-ins, store the onboarding form and mark onboarding as completed.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import Principal, require_email_principal, require_id_principal
from core.http import no_cache_response
from core.logger import get_logger
from database.deps import get_db_read, get_db_write
from schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    WeightUpdateRequest,
    WeightUpdateResponse,
    CompleteOnboardingResponse,
    OnboardingRequest,
    OnboardingResponse,
)
from services.profile_service import profile_service

logger = get_logger("api.profile")
router = APIRouter(prefix="/api/user", tags=["profile"])


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    principal: Principal = Depends(require_id_principal),
    db: Session = Depends(get_db_read),
):
    """Return the profile projection, with `currentWeight` mirroring `weight`.

    Raises:
        UnauthorizedError: If the session carries no user id.
        NotFoundError: If the user row is missing.
    """
    return profile_service.get_profile(db, principal.id)


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Overwrite the profile columns present in the payload.

    Raises:
        NotFoundError: If the user row is missing.
        ValidationError: If the payload is empty.
    """
    return profile_service.update_profile(db, principal.email, payload)


@router.post("/weight/update", response_model=WeightUpdateResponse)
def update_weight(
    payload: WeightUpdateRequest,
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Record the user's current weight (kg)."""
    return profile_service.update_weight(db, principal.email, payload.weight)


@router.post("/onboarding", response_model=OnboardingResponse)
def submit_onboarding(
    payload: OnboardingRequest,
    principal: Principal = Depends(require_id_principal),
    db: Session = Depends(get_db_write),
):
    """Store the onboarding form (pounds and inches) and set the onboarding flag.

    Raises:
        NotFoundError: If the user row is missing.
    """
    return profile_service.submit_onboarding(db, principal.id, payload)


@router.post("/complete-onboarding", response_model=CompleteOnboardingResponse)
def complete_onboarding(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Set the onboarding flag and tell the client to refresh its session."""
    logger.info("Completing onboarding for %s", principal.email)
    result = profile_service.complete_onboarding(db, principal.email)
    return no_cache_response(result.model_dump(by_alias=True))
