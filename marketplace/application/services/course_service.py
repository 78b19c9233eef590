"""
Course service orchestrator.

Coordinates course lifecycle operations. Reads go through the access
service; writes are restricted to the owning instructor.

Dependencies: marketplace.boundary.db.CRUD, marketplace.application.services.access_service
System role: Course use case orchestration
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services.access_service import AccessService
from marketplace.application.services.assignment_service import assignment_to_dict
from marketplace.boundary.db.CRUD.assignment_crud import assignment_crud
from marketplace.boundary.db.CRUD.course_crud import course_crud
from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.core.access import Caller, DenialReason, ResourceType
from marketplace.core.exceptions import AccessForbiddenError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel) -> dict:
    """Flatten a course row for response mapping."""
    return {
        "id": course.id,
        "title": course.title,
        "description": course.description,
        "instructor_id": course.instructor_id,
        "is_published": course.is_published,
        "pricing": course.pricing,
        "currency": course.currency,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, access: AccessService | None = None) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
            access: Access service used for gated reads (defaults to one bound to db)
        """
        self.db = db
        self.access = access or AccessService(db)

    async def create_course(
        self,
        instructor_id: UUID,
        title: str,
        description: str = "",
        pricing: Decimal = Decimal("0"),
        currency: str = "USD",
    ) -> UUID:
        """
        Create an unpublished course owned by the instructor.

        Args:
            instructor_id: Owning instructor UUID
            title: Course title
            description: Course description
            pricing: Price, 0 for free
            currency: Currency code

        Returns:
            UUID: Created course ID

        Raises:
            Exception: If database operation fails
        """
        try:
            course = await course_crud.create(
                self.db,
                instructor_id=instructor_id,
                title=title,
                description=description,
                pricing=pricing,
                currency=currency.upper(),
                is_published=False,
            )
            await self.db.commit()
            logger.info(
                "Course created",
                extra={"course_id": str(course.id), "instructor_id": str(instructor_id)},
            )
            return course.id
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create course",
                extra={"error": str(e), "instructor_id": str(instructor_id)},
            )
            raise

    async def get_course(self, course_id: UUID, caller: Caller) -> dict:
        """
        Get course by ID if the caller may read it.

        Args:
            course_id: Course UUID
            caller: Requesting identity

        Returns:
            dict: Course data

        Raises:
            ResourceNotFoundError: Course absent or hidden
            AccessForbiddenError: Caller not entitled
        """
        target = await self.access.require_access(ResourceType.COURSE, course_id, caller)
        return course_to_dict(target.entity)

    async def get_course_assignments(
        self,
        course_id: UUID,
        caller: Caller,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict]:
        """
        List a course's assignments, earliest deadline first.

        Access is decided on the course; its assignments share that decision.

        Raises:
            ResourceNotFoundError: Course absent or hidden
            AccessForbiddenError: Caller not entitled
        """
        await self.access.require_access(ResourceType.COURSE, course_id, caller)

        assignments = await assignment_crud.get_by_course_id(
            self.db, course_id, limit=limit, offset=offset
        )
        return [assignment_to_dict(a) for a in assignments]

    async def get_owned_course(self, course_id: UUID, instructor_id: UUID) -> CourseModel:
        """
        Load a course for a management operation by its owner.

        Management bypasses the publish gate: owners edit drafts.

        Raises:
            ResourceNotFoundError: Course does not exist
            AccessForbiddenError: Instructor does not own it
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise ResourceNotFoundError("course", course_id)
        if course.instructor_id != instructor_id:
            raise AccessForbiddenError(
                DenialReason.NOT_YOUR_COURSE.value,
                {"course_id": str(course_id)},
            )
        return course

    async def set_published(
        self,
        course_id: UUID,
        instructor_id: UUID,
        is_published: bool,
    ) -> dict:
        """
        Toggle the publish flag of an owned course.

        Args:
            course_id: Course UUID
            instructor_id: Requesting instructor UUID
            is_published: New flag value

        Returns:
            dict: Updated course data
        """
        course = await self.get_owned_course(course_id, instructor_id)

        if course.is_published == is_published:
            return course_to_dict(course)

        try:
            course.is_published = is_published
            await self.db.commit()
            await self.db.refresh(course)
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update publish flag",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course publish flag changed",
            extra={"course_id": str(course_id), "is_published": is_published},
        )
        return course_to_dict(course)

    async def update_course(
        self,
        course_id: UUID,
        instructor_id: UUID,
        title: str | None = None,
        description: str | None = None,
        pricing: Decimal | None = None,
        currency: str | None = None,
    ) -> dict:
        """
        Update details of an owned course. Only provided fields change.

        Args:
            course_id: Course UUID
            instructor_id: Requesting instructor UUID
            title: New title
            description: New description
            pricing: New price
            currency: New currency code

        Returns:
            dict: Updated course data

        Raises:
            ResourceNotFoundError: Course does not exist
            AccessForbiddenError: Instructor does not own it
        """
        course = await self.get_owned_course(course_id, instructor_id)

        updates = {}
        if title is not None:
            updates["title"] = title
        if description is not None:
            updates["description"] = description
        if pricing is not None:
            updates["pricing"] = pricing
        if currency is not None:
            updates["currency"] = currency.upper()

        if not updates:
            return course_to_dict(course)

        try:
            course = await course_crud.update_by_id(self.db, course_id, **updates)
            await self.db.commit()
            await self.db.refresh(course)
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course updated",
            extra={"course_id": str(course_id), "fields": sorted(updates)},
        )
        return course_to_dict(course)

    async def delete_course(self, course_id: UUID, instructor_id: UUID) -> bool:
        """
        Delete an owned course with its assignments, enrollments and payments.

        Raises:
            ResourceNotFoundError: Course does not exist
            AccessForbiddenError: Instructor does not own it
        """
        await self.get_owned_course(course_id, instructor_id)

        try:
            await course_crud.delete_many(self.db, [course_id])
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Course deleted",
            extra={"course_id": str(course_id), "instructor_id": str(instructor_id)},
        )
        return True

    async def get_published_courses(self) -> list[dict]:
        """List the public catalogue: published courses, newest first."""
        courses = await course_crud.get_published(self.db)
        return [course_to_dict(c) for c in courses]

    async def get_instructor_courses(self, instructor_id: UUID) -> list[dict]:
        """List every course the instructor owns, drafts included."""
        courses = await course_crud.get_by_instructor(self.db, instructor_id)
        return [course_to_dict(c) for c in courses]
