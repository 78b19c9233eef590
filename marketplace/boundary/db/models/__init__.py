"""
Database models package.

Exports:
  - UserModel, UserRole: Accounts and their roles
  - CourseModel: Course root entity
  - AssignmentModel, SubmissionType: Course coursework
  - EnrollmentModel, EnrollmentStatus: Student enrollments
  - PaymentModel, PaymentStatus: Checkout transactions
  - SubmissionModel, SubmissionStatus: Student hand-ins for assignments

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Database model definitions for domain entities
"""

from marketplace.boundary.db.models.user_model import UserModel, UserRole
from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.boundary.db.models.assignment_model import AssignmentModel, SubmissionType
from marketplace.boundary.db.models.enrollment_model import EnrollmentModel, EnrollmentStatus
from marketplace.boundary.db.models.payment_model import PaymentModel, PaymentStatus
from marketplace.boundary.db.models.submission_model import SubmissionModel, SubmissionStatus

__all__ = [
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
]
