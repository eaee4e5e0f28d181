"""Reset API router: shallow progress reset and full account reset."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import Principal, require_email_principal, require_id_principal
from core.logger import get_logger
from database.deps import get_db_write
from schemas import ResetProgressResponse, ResetResponse
from services.reset_service import reset_service

logger = get_logger("api.reset")
router = APIRouter(prefix="/api/user", tags=["reset"])


@router.post("/reset-progress", response_model=ResetProgressResponse)
def reset_progress(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_write),
):
    """Clear progress fields and delete all plans."""
    return reset_service.reset_progress(db, principal.email)


@router.post("/reset", response_model=ResetResponse)
def reset_user(
    principal: Principal = Depends(require_id_principal),
    db: Session = Depends(get_db_write),
):
    """Return the account to its pre-onboarding state in one transaction."""
    logger.info("Full reset requested for user id=%s", principal.id)
    return reset_service.full_reset(db, principal.id)
