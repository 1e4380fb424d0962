"""Domain exceptions for the user service.

A closed set of errors shared by every layer. Repositories raise them,
the use case passes them through (or raises ConflictException), and the
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class UserServiceException(Exception):
    """Base exception for all user service errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    default_message = "error"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description; defaults to the class default.
            error_code: Optional machine-readable code; defaults to the class
                code, then the class name.
            details: Optional dict of extra context.
        """
        self.message = message or self.default_message
        self.error_code = error_code or self.default_error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class InternalServerException(UserServiceException):
    """Raised when persistence fails for any reason other than a missing row."""

    default_message = "internal server error"
    default_error_code = "INTERNAL_SERVER_ERROR"


class NotFoundException(UserServiceException):
    """Raised when the requested item does not exist (or no row was affected)."""

    default_message = "your requested item is not found"
    default_error_code = "NOT_FOUND"


class ConflictException(UserServiceException):
    """Raised when creating or updating would duplicate a unique value (email)."""

    default_message = "your item already exists"
    default_error_code = "CONFLICT"


class BadRequestException(UserServiceException):
    """Raised when the request cannot be parsed or is missing required fields."""

    default_message = "bad request"
    default_error_code = "BAD_REQUEST"

    def __init__(self, message: str | None = None, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, details=details)


class InvalidCredentialsException(UserServiceException):
    """Raised when supplied credentials do not match."""

    default_message = "invalid credentials"
    default_error_code = "INVALID_CREDENTIALS"
