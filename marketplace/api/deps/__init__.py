"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_access_service,
    get_assignment_service,
    get_bulk_operations_service,
    get_caller,
    get_course_service,
    get_enrollment_service,
    get_settings_dependency,
    get_submission_service,
    require_admin,
    require_instructor,
    require_roles,
    require_student,
)

__all__ = [
    "get_access_service",
    "get_assignment_service",
    "get_bulk_operations_service",
    "get_caller",
    "get_course_service",
    "get_enrollment_service",
    "get_settings_dependency",
    "get_submission_service",
    "require_admin",
    "require_instructor",
    "require_roles",
    "require_student",
]
