"""
Base exception classes for Warden.

Each module should define its own exceptions that inherit from these bases.
Transport layers can rely on to_dict() for a uniform error payload.
"""

from typing import Optional, Any


class WardenError(Exception):
    """
    Base exception for all Warden errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(WardenError):
    """Resource not found."""

    pass


class ValidationError(WardenError):
    """Input validation failed."""

    pass


class AuthenticationError(WardenError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(WardenError):
    """Authorization failed (account or tenant not entitled)."""

    pass


class ExternalServiceError(WardenError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StorageError(ExternalServiceError):
    """Raised when the persistence layer fails."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            f"Storage operation '{operation}' failed: {message}",
            service="storage",
            code="STORAGE_FAILURE",
            details={"operation": operation},
        )
        self.operation = operation
