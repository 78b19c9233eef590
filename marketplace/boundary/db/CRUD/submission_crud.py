"""
Submission CRUD operations.

Dependencies: sqlalchemy, marketplace.boundary.db.models
System role: Submission persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from marketplace.boundary.db.models.assignment_model import AssignmentModel
from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.boundary.db.models.submission_model import SubmissionModel
from marketplace.boundary.db.CRUD.base_crud import BaseCRUD


class SubmissionCRUD(BaseCRUD[SubmissionModel]):
    """CRUD operations for SubmissionModel keyed by (assignment, student)."""

    def __init__(self) -> None:
        super().__init__(SubmissionModel)

    async def get_with_course(
        self,
        session: AsyncSession,
        submission_id: UUID,
    ) -> SubmissionModel | None:
        """
        Retrieve a submission with its assignment and that assignment's course.

        Args:
            session: Async database session
            submission_id: Submission UUID

        Returns:
            SubmissionModel with assignment.course loaded, None if not found
        """
        stmt = (
            select(SubmissionModel)
            .options(
                joinedload(SubmissionModel.assignment).joinedload(AssignmentModel.course)
            )
            .where(SubmissionModel.id == submission_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_student_and_assignment(
        self,
        session: AsyncSession,
        student_id: UUID,
        assignment_id: UUID,
    ) -> SubmissionModel | None:
        """Retrieve a student's submission for one assignment, if any."""
        stmt = select(SubmissionModel).where(
            SubmissionModel.student_id == student_id,
            SubmissionModel.assignment_id == assignment_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_assignment(
        self,
        session: AsyncSession,
        assignment_id: UUID,
    ) -> Sequence[SubmissionModel]:
        """Retrieve all submissions for an assignment, most recent first."""
        stmt = (
            select(SubmissionModel)
            .where(SubmissionModel.assignment_id == assignment_id)
            .order_by(SubmissionModel.submitted_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_student(
        self,
        session: AsyncSession,
        student_id: UUID,
    ) -> Sequence[SubmissionModel]:
        """
        Retrieve a student's submissions in published courses, most recent first.

        Submissions to assignments of courses that were unpublished since are
        left out, matching what the student can still read.
        """
        stmt = (
            select(SubmissionModel)
            .join(SubmissionModel.assignment)
            .join(AssignmentModel.course)
            .where(
                SubmissionModel.student_id == student_id,
                CourseModel.is_published.is_(True),
            )
            .order_by(SubmissionModel.submitted_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


submission_crud = SubmissionCRUD()
