"""Custom exception classes for the plan service.

Every error that may reach an HTTP caller derives from `AppException` and
carries its own status code. `GenerationError` is the one exception that is
never surfaced: the plan service turns it into the fallback plan.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Raised when request input is malformed or rejected."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class Unauthorized(AppException):
    """Raised when a bearer credential is missing or rejected by the provider."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, status_code=401)


class NotFoundError(AppException):
    """Raised when no record exists for the requested identity or key."""

    def __init__(self, resource: str, identifier: Any = None, message: Optional[str] = None):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g. 'Profile', 'Meals').
            identifier: Key that was looked up.
            message: Optional override for the default message.
        """
        if message is None:
            message = f"{resource} not found"
        details = {"resource": resource}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, status_code=404, details=details)


class PersistenceError(AppException):
    """Raised when the underlying store rejects a read or write."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppException):
    """Raised when application configuration is invalid or incomplete."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)


class GenerationError(AppException):
    """Raised by generative backends; absorbed into the fallback plan."""

    def __init__(self, message: str, cause: Optional[str] = None):
        details = {"cause": cause} if cause else {}
        super().__init__(message, status_code=502, details=details)
