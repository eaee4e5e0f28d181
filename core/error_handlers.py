"""Exception handlers for the coaching API.

Every failure body has the shape `{"error": message}`, with a `details`
object added only when there is context to report. Request validation
failures are reported as 400 "Invalid input" rather than FastAPI's 422.
"""

from typing import List

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(message: str, status_code: int = 500, details: dict = None) -> JSONResponse:
    """Build the JSON error body; empty `details` are left out."""
    body = {"error": message}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def _describe(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def _validation_errors(exc: RequestValidationError) -> List[dict]:
    """Flatten pydantic errors into JSON-safe {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Send an application error's message and status code to the client.

    401 and 404 are routine outcomes and logged at info level.
    """
    if exc.status_code >= 500:
        logger.error("%s failed: %s %s", _describe(request), exc.message, exc.details)
    elif exc.status_code in (401, 404):
        logger.info("%s -> %s %s", _describe(request), exc.status_code, exc.message)
    else:
        logger.warning("%s rejected: %s", _describe(request), exc.message)
    return create_error_response(exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _validation_errors(exc)
    logger.warning("Invalid input on %s: %s", _describe(request), errors)
    return create_error_response(
        "Invalid input",
        status.HTTP_400_BAD_REQUEST,
        {"validation_errors": errors},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log the driver error in full and return a generic 500."""
    logger.error("Database error on %s: %s", _describe(request), exc, exc_info=exc)
    return create_error_response(
        "A database error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "database_error"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", _describe(request), exc, exc_info=exc)
    return create_error_response(
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "internal_error"},
    )


def register_exception_handlers(app):
    """Attach the handlers above to `app`, most specific first."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.info("Exception handlers registered")
