"""
Core business logic module.

Contains the exception hierarchy, the resource access policy and token
handling. Business rules live here; I/O stays in the boundary layer.
"""

from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadyEnrolledError,
    AlreadySubmittedError,
    AuthenticationError,
    InvalidOperationError,
    MarketplaceException,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "AccessForbiddenError",
    "AlreadyEnrolledError",
    "AlreadySubmittedError",
    "AuthenticationError",
    "InvalidOperationError",
    "MarketplaceException",
    "ResourceNotFoundError",
    "ValidationError",
]
