"""Application exceptions.

Each carries the client-facing message and HTTP status; the handlers in
`core.error_handlers` turn them into `{"error": ..., "details": ...}` bodies.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base class for errors reported to the client.

    Attributes:
        message: Sent to the client verbatim.
        status_code: HTTP status code of the response.
        details: Extra context; omitted from the body when empty.
    """

    def __init__(self, message: str, status_code: int = 500, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedError(AppException):
    """Exception raised when the request carries no valid session."""

    def __init__(self, message: str = "Unauthorized - No valid session"):
        super().__init__(message, status_code=401)


class NotFoundError(AppException):
    """Exception raised when a user or plan row is not found.

    The message is sent to the client verbatim, so callers pass the exact
    text the frontend expects (e.g. "No workout plan found").
    """

    def __init__(self, message: str, resource: Optional[str] = None):
        """Initialize not found error.

        Args:
            message: Client-facing error message.
            resource: Optional resource type (e.g. 'User', 'WorkoutPlan'),
                kept for logging and not sent to the client.
        """
        self.resource = resource
        super().__init__(message, status_code=404)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'reset', 'update').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
