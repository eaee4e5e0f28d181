"""Session guard: resolves the calling principal for protected endpoints.

Sessions are issued by the external identity provider, which persists them
through its database adapter. This module only reads them: it extracts the
session token from the request, looks the row up and yields a `Principal`.
Every protected route depends on one of the `require_*` dependencies, so an
unauthenticated request is rejected before any handler logic runs.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import get_settings
from core.exceptions import UnauthorizedError
from core.logger import get_logger
from database import models
from database.deps import get_db_read

logger = get_logger("core.auth")


@dataclass(frozen=True)
class Principal:
    """Authenticated identity resolved from a session token."""

    id: Optional[int]
    email: Optional[str]


def extract_session_token(request: Request, cookie_names: Sequence[str]) -> Optional[str]:
    """Return the bearer token, else the first configured session cookie."""
    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()
    for name in cookie_names:
        token = request.cookies.get(name)
        if token:
            return token
    return None


class DatabaseSessionProvider:
    """Looks up sessions written by the identity provider's database adapter."""

    def resolve(self, db: Session, token: str) -> Optional[Principal]:
        """Return the principal owning `token`, or None if unknown or expired."""
        row = (
            db.query(models.Session, models.User)
            .join(models.User, models.User.id == models.Session.user_id)
            .filter(models.Session.session_token == token)
            .first()
        )
        if row is None:
            return None
        session, user = row
        if session.expires <= datetime.utcnow():
            logger.info("Expired session for user id=%s", user.id)
            return None
        return Principal(id=user.id, email=user.email)


session_provider = DatabaseSessionProvider()


def get_current_principal(request: Request, db: Session = Depends(get_db_read)) -> Principal:
    """Resolve the calling principal or fail with 401.

    Raises:
        UnauthorizedError: If no token is present or it matches no live session.
    """
    token = extract_session_token(request, get_settings().session_cookie_names)
    if not token:
        logger.info("No session token on %s %s", request.method, request.url.path)
        raise UnauthorizedError()
    principal = session_provider.resolve(db, token)
    if principal is None:
        logger.info("Invalid session token on %s %s", request.method, request.url.path)
        raise UnauthorizedError()
    return principal


def require_email_principal(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Principal for operations keyed by email."""
    if not principal.email:
        raise UnauthorizedError()
    return principal


def require_id_principal(principal: Principal = Depends(get_current_principal)) -> Principal:
    """Principal for operations keyed by the stable user id."""
    if principal.id is None:
        raise UnauthorizedError()
    return principal
