"""
Dependency injection container.

Factory functions for FastAPI dependencies: settings, caller identity,
role guards and per-request services.

Dependencies: fastapi, marketplace.configs, marketplace.application, marketplace.boundary
System role: DI container for service injection
"""

from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services import (
    AccessService,
    AssignmentService,
    BulkOperationsService,
    CourseService,
    EnrollmentService,
    SubmissionService,
)
from marketplace.boundary.db import get_async_db
from marketplace.boundary.db.models.user_model import UserRole
from marketplace.configs import Settings, get_settings
from marketplace.core.access import ANONYMOUS, Caller
from marketplace.core.exceptions import AuthenticationError
from marketplace.core.tokens import decode_access_token

# Missing or non-Bearer Authorization headers yield None instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings_dependency),
) -> Caller:
    """
    Resolve the requesting identity from the bearer token.

    Args:
        credentials: Parsed Authorization header, None when absent
        settings: Application settings (injected)

    Returns:
        Caller: Token identity, or ANONYMOUS without a token

    Raises:
        HTTPException(401): Token present but invalid or expired
    """
    if credentials is None:
        return ANONYMOUS

    try:
        return decode_access_token(credentials.credentials, settings.auth)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_roles(*roles: UserRole) -> Callable[..., Caller]:
    """
    Build a dependency that only admits authenticated callers with one of roles.

    Args:
        *roles: Accepted roles

    Returns:
        Dependency returning the Caller
    """
    allowed = {role.value for role in roles}

    def role_checker(caller: Caller = Depends(get_caller)) -> Caller:
        if not caller.is_authenticated:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if caller.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have permission to access this resource",
            )
        return caller

    return role_checker


require_instructor = require_roles(UserRole.INSTRUCTOR)
require_student = require_roles(UserRole.STUDENT)
require_admin = require_roles(UserRole.ADMIN)


def get_access_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AccessService:
    """
    Get access service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected)

    Returns:
        AccessService: Access service honoring the configured policy flags
    """
    return AccessService(
        db=db,
        owner_bypasses_publish_gate=settings.access.owner_bypasses_publish_gate,
    )


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    access: AccessService = Depends(get_access_service),
) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)
        access: Access service (injected)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, access=access)


def get_assignment_service(
    db: AsyncSession = Depends(get_async_db),
    access: AccessService = Depends(get_access_service),
) -> AssignmentService:
    """
    Get assignment service instance.

    Args:
        db: Async database session (injected via Depends)
        access: Access service (injected)

    Returns:
        AssignmentService: Assignment service instance
    """
    return AssignmentService(db=db, access=access)


def get_enrollment_service(db: AsyncSession = Depends(get_async_db)) -> EnrollmentService:
    """Get enrollment service instance."""
    return EnrollmentService(db=db)


def get_bulk_operations_service(
    db: AsyncSession = Depends(get_async_db),
) -> BulkOperationsService:
    """Get admin bulk operations service instance."""
    return BulkOperationsService(db=db)


def get_submission_service(
    db: AsyncSession = Depends(get_async_db),
    access: AccessService = Depends(get_access_service),
) -> SubmissionService:
    """Get submission service instance."""
    return SubmissionService(db=db, access=access)
