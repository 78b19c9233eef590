"""
Enrollment CRUD operations.

Dependencies: sqlalchemy, marketplace.boundary.db.models
System role: Enrollment persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.models.enrollment_model import EnrollmentModel
from marketplace.boundary.db.CRUD.base_crud import BaseCRUD


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """CRUD operations for EnrollmentModel keyed by (student, course)."""

    def __init__(self) -> None:
        super().__init__(EnrollmentModel)

    async def get_by_student_and_course(
        self,
        session: AsyncSession,
        student_id: UUID,
        course_id: UUID,
    ) -> EnrollmentModel | None:
        """
        Retrieve the enrollment for a (student, course) pair.

        Args:
            session: Async database session
            student_id: Student UUID
            course_id: Course UUID

        Returns:
            EnrollmentModel if enrolled, None otherwise
        """
        stmt = select(EnrollmentModel).where(
            EnrollmentModel.student_id == student_id,
            EnrollmentModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_student(
        self,
        session: AsyncSession,
        student_id: UUID,
    ) -> Sequence[EnrollmentModel]:
        """Retrieve a student's enrollments, most recent first."""
        stmt = (
            select(EnrollmentModel)
            .where(EnrollmentModel.student_id == student_id)
            .order_by(EnrollmentModel.enrolled_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


enrollment_crud = EnrollmentCRUD()
