"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, CourseModel, AssignmentModel, EnrollmentModel, PaymentModel,
    SubmissionModel: Domain entities
  - UserRole, SubmissionType, EnrollmentStatus, PaymentStatus, SubmissionStatus: Enum types
  - course_crud, assignment_crud, enrollment_crud, payment_crud, submission_crud: CRUD singletons

Dependencies: sqlalchemy, marketplace.configs
System role: Database adapter for the course catalogue and its entitlements.
"""

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin
from marketplace.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from marketplace.boundary.db.models import (
    AssignmentModel,
    CourseModel,
    EnrollmentModel,
    EnrollmentStatus,
    PaymentModel,
    PaymentStatus,
    SubmissionModel,
    SubmissionStatus,
    SubmissionType,
    UserModel,
    UserRole,
)
from marketplace.boundary.db.CRUD import (
    AssignmentCRUD,
    BaseCRUD,
    CourseCRUD,
    EnrollmentCRUD,
    PaymentCRUD,
    SubmissionCRUD,
    assignment_crud,
    course_crud,
    enrollment_crud,
    payment_crud,
    submission_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "UserRole",
    "CourseModel",
    "AssignmentModel",
    "SubmissionType",
    "EnrollmentModel",
    "EnrollmentStatus",
    "PaymentModel",
    "PaymentStatus",
    "SubmissionModel",
    "SubmissionStatus",
    # CRUD classes
    "BaseCRUD",
    "CourseCRUD",
    "AssignmentCRUD",
    "EnrollmentCRUD",
    "PaymentCRUD",
    "SubmissionCRUD",
    # CRUD singletons
    "course_crud",
    "assignment_crud",
    "enrollment_crud",
    "payment_crud",
    "submission_crud",
]
