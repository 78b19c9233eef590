"""Service orchestrators."""

from .access_service import AccessService
from .assignment_service import AssignmentService
from .bulk_operations_service import BulkOperationsService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .submission_service import SubmissionService

__all__ = [
    "AccessService",
    "AssignmentService",
    "BulkOperationsService",
    "CourseService",
    "EnrollmentService",
    "SubmissionService",
]
