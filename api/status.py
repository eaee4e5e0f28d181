"""Status API router: onboarding status and dashboard summary."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.auth import Principal, require_email_principal
from core.logger import get_logger
from database.deps import get_db_read
from schemas import StatusResponse, DashboardResponse
from services.status_service import status_service

logger = get_logger("api.status")
router = APIRouter(prefix="/api/user", tags=["status"])


@router.get("/status", response_model=StatusResponse)
def get_status(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_read),
):
    """Return the onboarding flag and whether usable plans exist.

    Raises:
        NotFoundError: If the user row is missing.
    """
    return status_service.get_status(db, principal.email)


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    principal: Principal = Depends(require_email_principal),
    db: Session = Depends(get_db_read),
):
    """Return the status payload plus weight progress and plan figures."""
    return status_service.get_dashboard(db, principal.email)
