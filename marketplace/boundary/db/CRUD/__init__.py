"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from marketplace.boundary.db.CRUD import course_crud, enrollment_crud

    course = await course_crud.get_by_id(db, course_id)

    # Or instantiate classes directly for custom behavior
    from marketplace.boundary.db.CRUD import CourseCRUD
    custom_crud = CourseCRUD()
"""

from marketplace.boundary.db.CRUD.base_crud import BaseCRUD
from marketplace.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from marketplace.boundary.db.CRUD.assignment_crud import AssignmentCRUD, assignment_crud
from marketplace.boundary.db.CRUD.enrollment_crud import EnrollmentCRUD, enrollment_crud
from marketplace.boundary.db.CRUD.payment_crud import PaymentCRUD, payment_crud
from marketplace.boundary.db.CRUD.submission_crud import SubmissionCRUD, submission_crud

__all__ = [
    "BaseCRUD",
    "CourseCRUD",
    "course_crud",
    "AssignmentCRUD",
    "assignment_crud",
    "EnrollmentCRUD",
    "enrollment_crud",
    "PaymentCRUD",
    "payment_crud",
    "SubmissionCRUD",
    "submission_crud",
]
