"""
Assignment CRUD operations.

Provides Create, Read, Update, Delete operations for AssignmentModel
with eager loading of the parent course.

Dependencies: sqlalchemy, marketplace.boundary.db.models
System role: Assignment persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from marketplace.boundary.db.models.assignment_model import AssignmentModel
from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.boundary.db.CRUD.base_crud import BaseCRUD


class AssignmentCRUD(BaseCRUD[AssignmentModel]):
    """
    CRUD operations for AssignmentModel.

    Reads that feed the access policy join the parent course in the same
    statement so the course fields are never loaded lazily.
    """

    def __init__(self) -> None:
        """Initialize AssignmentCRUD with AssignmentModel."""
        super().__init__(AssignmentModel)

    async def get_with_course(
        self,
        session: AsyncSession,
        id: UUID,
    ) -> AssignmentModel | None:
        """
        Retrieve an assignment with its parent course eagerly loaded.

        Inner join: an assignment whose course row is missing is treated
        as absent.

        Args:
            session: Async database session
            id: Assignment UUID

        Returns:
            AssignmentModel with course loaded, None if not found
        """
        stmt = (
            select(AssignmentModel)
            .join(AssignmentModel.course)
            .where(AssignmentModel.id == id)
            .options(joinedload(AssignmentModel.course))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_course_id(
        self,
        session: AsyncSession,
        course_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[AssignmentModel]:
        """
        Retrieve assignments for a course ordered by deadline (earliest first).

        Args:
            session: Async database session
            course_id: Course UUID
            limit: Maximum number of assignments to return
            offset: Number of assignments to skip

        Returns:
            Sequence of AssignmentModels for the course
        """
        stmt = (
            select(AssignmentModel)
            .where(AssignmentModel.course_id == course_id)
            .order_by(AssignmentModel.deadline.asc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_instructor(
        self,
        session: AsyncSession,
        instructor_id: UUID,
    ) -> Sequence[AssignmentModel]:
        """
        Retrieve every assignment across an instructor's courses.

        Args:
            session: Async database session
            instructor_id: Owning instructor UUID

        Returns:
            Sequence of AssignmentModels ordered by deadline
        """
        stmt = (
            select(AssignmentModel)
            .join(AssignmentModel.course)
            .where(CourseModel.instructor_id == instructor_id)
            .order_by(AssignmentModel.deadline.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


assignment_crud = AssignmentCRUD()
