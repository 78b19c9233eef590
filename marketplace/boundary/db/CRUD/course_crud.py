"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific query methods.

Dependencies: sqlalchemy, marketplace.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with instructor-scoped listing and bulk updates used
    by admin operations.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_by_instructor(
        self,
        session: AsyncSession,
        instructor_id: UUID,
    ) -> Sequence[CourseModel]:
        """
        Retrieve all courses owned by an instructor, newest first.

        Args:
            session: Async database session
            instructor_id: Owning instructor UUID

        Returns:
            Sequence of CourseModels
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.instructor_id == instructor_id)
            .order_by(CourseModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_existing_ids(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
    ) -> set[UUID]:
        """
        Return the subset of ids that match a course row.

        Args:
            session: Async database session
            ids: Candidate course UUIDs

        Returns:
            set[UUID]: IDs that exist
        """
        if not ids:
            return set()
        stmt = select(CourseModel.id).where(CourseModel.id.in_(ids))
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def update_many(
        self,
        session: AsyncSession,
        ids: Sequence[UUID],
        **kwargs,
    ) -> int:
        """
        Apply the same field values to several courses.

        Returns:
            int: Number of rows updated
        """
        if not ids:
            return 0
        stmt = (
            update(CourseModel)
            .where(CourseModel.id.in_(ids))
            .values(**kwargs)
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_many(self, session: AsyncSession, ids: Sequence[UUID]) -> int:
        """
        Delete several courses with their assignments, enrollments and payments.

        Rows go through session.delete() so the relationship cascade removes
        children even when the database does not enforce foreign keys.

        Returns:
            int: Number of courses deleted
        """
        if not ids:
            return 0
        stmt = select(CourseModel).where(CourseModel.id.in_(ids))
        result = await session.execute(stmt)
        courses = result.scalars().all()
        for course in courses:
            await session.delete(course)
        await session.flush()
        return len(courses)

    async def get_published(self, session: AsyncSession) -> Sequence[CourseModel]:
        """Retrieve the public catalogue: published courses, newest first."""
        stmt = (
            select(CourseModel)
            .where(CourseModel.is_published.is_(True))
            .order_by(CourseModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


course_crud = CourseCRUD()
