"""
Domain exception hierarchy for the DevConnect backend.

Raised by use cases and repositories. Every exception inherits from
DevConnectError and carries a user-facing message; the API layer maps each
subclass to one HTTP status category.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DevConnectError(Exception):
    """Base exception for all DevConnect errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(DevConnectError):
    """Raised when required input is missing or malformed."""

    def __init__(self, errors: List[Dict[str, str]]):
        message = "; ".join(error["msg"] for error in errors) or "Invalid input"
        super().__init__(message, details={"errors": errors})
        self.errors = errors

    @classmethod
    def single(cls, param: str, msg: str) -> "ValidationError":
        return cls([{"param": param, "msg": msg}])


class AuthenticationError(DevConnectError):
    """Raised when a request carries no credential or an invalid one."""
    pass


class ForbiddenError(DevConnectError):
    """Raised when the acting user does not own the resource."""
    pass


class NotFoundError(DevConnectError):
    """Raised when an aggregate or a sub-entity does not exist."""
    pass


class ConflictError(DevConnectError):
    """Raised when a request contradicts the current state (duplicate like, ...)."""
    pass


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------


class RepositoryError(DevConnectError):
    """Raised when the persistence layer fails unexpectedly."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            user_message="Server Error",
            details={"operation": operation} if operation else None,
        )
        self.operation = operation
