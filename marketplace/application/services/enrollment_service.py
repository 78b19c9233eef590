"""
Enrollment service orchestrator.

Creates enrollments for free courses directly and for paid courses once a
completed payment exists. The access check itself never writes; this is
the only path that creates enrollment rows.

Dependencies: marketplace.boundary.db.CRUD, marketplace.core.access
System role: Enrollment use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.CRUD.course_crud import course_crud
from marketplace.boundary.db.CRUD.enrollment_crud import enrollment_crud
from marketplace.boundary.db.models.enrollment_model import EnrollmentModel, EnrollmentStatus
from marketplace.core.access import DenialReason, EntitlementLookup
from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadyEnrolledError,
    InvalidOperationError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def enrollment_to_dict(enrollment: EnrollmentModel) -> dict:
    """Flatten an enrollment row for response mapping."""
    return {
        "id": enrollment.id,
        "student_id": enrollment.student_id,
        "course_id": enrollment.course_id,
        "status": enrollment.status,
        "progress_percentage": enrollment.progress_percentage,
        "enrolled_at": enrollment.enrolled_at,
    }


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(self, db: AsyncSession, entitlements: EntitlementLookup | None = None) -> None:
        self.db = db
        self.entitlements = entitlements or EntitlementLookup(db)

    async def enroll_student(self, course_id: UUID, student_id: UUID) -> dict:
        """
        Enroll a student in a published course.

        Args:
            course_id: Course UUID
            student_id: Student UUID

        Returns:
            dict: Created enrollment data

        Raises:
            ResourceNotFoundError: Course does not exist
            InvalidOperationError: Course is not published
            AlreadyEnrolledError: Enrollment row already exists
            AccessForbiddenError: Paid course without a completed payment
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise ResourceNotFoundError("course", course_id)

        if not course.is_published:
            raise InvalidOperationError(
                "Course is not available for enrollment",
                {"course_id": str(course_id)},
            )

        if await self.entitlements.is_enrolled(student_id, course_id):
            raise AlreadyEnrolledError(course_id)

        if not course.is_free and not await self.entitlements.has_completed_payment(
            student_id, course_id
        ):
            raise AccessForbiddenError(
                DenialReason.PAYMENT_REQUIRED.value,
                {"course_id": str(course_id)},
            )

        try:
            enrollment = await enrollment_crud.create(
                self.db,
                student_id=student_id,
                course_id=course_id,
                status=EnrollmentStatus.ACTIVE,
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            # Concurrent enroll for the same pair lost the unique-constraint race
            if await self.entitlements.is_enrolled(student_id, course_id):
                raise AlreadyEnrolledError(course_id) from e
            raise

        logger.info(
            "Student enrolled",
            extra={
                "course_id": str(course_id),
                "student_id": str(student_id),
                "paid_course": not course.is_free,
            },
        )
        return enrollment_to_dict(enrollment)

    async def get_student_enrollments(self, student_id: UUID) -> list[dict]:
        """List a student's enrollments, most recent first."""
        enrollments = await enrollment_crud.get_by_student(self.db, student_id)
        return [enrollment_to_dict(e) for e in enrollments]
