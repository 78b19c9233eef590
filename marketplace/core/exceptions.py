"""
Exception hierarchy for the course marketplace.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MarketplaceException(Exception):
    """Base exception for all marketplace application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(MarketplaceException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ResourceNotFoundError(MarketplaceException):
    """Raised when a requested resource is absent or hidden from the caller."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource_type: "course", "assignment" or "submission"
            resource_id: ID that was requested
            details: Additional context
        """
        details = details or {}
        details["resource_type"] = resource_type
        details["resource_id"] = str(resource_id)
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type.capitalize()} not found", details)


class AccessForbiddenError(MarketplaceException):
    """Raised when the resource is visible but the caller is not entitled to it."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize forbidden error.

        Args:
            reason: Denial reason shown to the caller
            details: Additional context
        """
        self.reason = reason
        super().__init__(reason, details)


class AuthenticationError(MarketplaceException):
    """Raised when a bearer token is malformed, expired or has bad claims."""

    pass


class AlreadyEnrolledError(MarketplaceException):
    """Raised when a student enrolls twice in the same course."""

    def __init__(self, course_id: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["course_id"] = str(course_id)
        super().__init__("You are already enrolled in this course", details)


class InvalidOperationError(MarketplaceException):
    """Raised when an operation is not allowed in the resource's current state."""

    pass


class AlreadySubmittedError(MarketplaceException):
    """Raised when a student hands in the same assignment twice."""

    def __init__(self, assignment_id: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["assignment_id"] = str(assignment_id)
        super().__init__("You have already submitted this assignment", details)
