"""
Smart Fitness Planner API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Any, Optional


class FitnessPlannerException(Exception):
    """
    Base exception class for the planner application.

    All custom exceptions should inherit from this class. A single FastAPI
    exception handler renders them as ``{"message": ..., "detail": ...}``.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[Any] = None
    ):
        """
        Initialize FitnessPlannerException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (default 500).
            detail: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class NotFoundError(FitnessPlannerException):
    """
    Exception raised when a resource is not found.

    Used when:
    - Profile not found
    - No plan for a (user, day) or plan id
    - Weight entry does not exist
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class ValidationError(FitnessPlannerException):
    """
    Exception raised for input validation failures.

    Used when:
    - Age, height or weight out of range
    - Unrecognized goal, gender, day or meal type
    - Exercise index outside the plan's exercise list
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class ConflictError(FitnessPlannerException):
    """
    Exception raised for resource conflicts.

    Used when a completion update keeps losing the version race.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        detail: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            status_code=409,
            detail=detail
        )


class PersistenceError(FitnessPlannerException):
    """
    Exception raised when the underlying storage fails.

    Never retried. ``detail`` holds the driver error text, which is only
    exposed to clients outside production.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        detail: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
