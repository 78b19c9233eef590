"""
Assignment service orchestrator.

Assignment reads inherit the access decision of the parent course.
Create, update and delete are limited to the course's owning instructor.

Dependencies: marketplace.boundary.db.CRUD, marketplace.application.services.access_service
System role: Assignment use case orchestration
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services.access_service import AccessService
from marketplace.boundary.db.CRUD.assignment_crud import assignment_crud
from marketplace.boundary.db.CRUD.course_crud import course_crud
from marketplace.boundary.db.models.assignment_model import AssignmentModel, SubmissionType
from marketplace.core.access import Caller, DenialReason, ResourceType
from marketplace.core.exceptions import AccessForbiddenError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def assignment_to_dict(assignment: AssignmentModel) -> dict:
    """Flatten an assignment row for response mapping."""
    return {
        "id": assignment.id,
        "course_id": assignment.course_id,
        "title": assignment.title,
        "description": assignment.description,
        "submission_type": assignment.submission_type,
        "deadline": assignment.deadline,
        "created_at": assignment.created_at,
        "updated_at": assignment.updated_at,
    }


class AssignmentService:
    """Assignment service orchestrator."""

    def __init__(self, db: AsyncSession, access: AccessService | None = None) -> None:
        """
        Initialize assignment service with async database session.

        Args:
            db: Async SQLAlchemy session
            access: Access service used for gated reads (defaults to one bound to db)
        """
        self.db = db
        self.access = access or AccessService(db)

    async def _get_owned_assignment(
        self,
        assignment_id: UUID,
        instructor_id: UUID,
    ) -> AssignmentModel:
        assignment = await assignment_crud.get_with_course(self.db, assignment_id)
        if assignment is None:
            raise ResourceNotFoundError("assignment", assignment_id)
        if assignment.course.instructor_id != instructor_id:
            raise AccessForbiddenError(
                DenialReason.NOT_YOUR_COURSE.value,
                {"assignment_id": str(assignment_id)},
            )
        return assignment

    async def create_assignment(
        self,
        instructor_id: UUID,
        course_id: UUID,
        title: str,
        description: str,
        submission_type: SubmissionType,
        deadline: datetime,
    ) -> dict:
        """
        Create an assignment in a course the instructor owns.

        Args:
            instructor_id: Requesting instructor UUID
            course_id: Parent course UUID
            title: Assignment title
            description: Instructions
            submission_type: FILE or LINK
            deadline: Due date

        Returns:
            dict: Created assignment data

        Raises:
            ResourceNotFoundError: Course does not exist
            AccessForbiddenError: Instructor does not own the course
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise ResourceNotFoundError("course", course_id)
        if course.instructor_id != instructor_id:
            raise AccessForbiddenError(
                DenialReason.NOT_YOUR_COURSE.value,
                {"course_id": str(course_id)},
            )

        try:
            assignment = await assignment_crud.create(
                self.db,
                course_id=course_id,
                title=title,
                description=description,
                submission_type=submission_type,
                deadline=deadline,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create assignment",
                extra={"error": str(e), "course_id": str(course_id)},
            )
            raise

        logger.info(
            "Assignment created",
            extra={"assignment_id": str(assignment.id), "course_id": str(course_id)},
        )
        return assignment_to_dict(assignment)

    async def get_assignment(self, assignment_id: UUID, caller: Caller) -> dict:
        """
        Get an assignment if the caller may read its course.

        Raises:
            ResourceNotFoundError: Assignment absent or its course hidden
            AccessForbiddenError: Caller not entitled to the course
        """
        target = await self.access.require_access(
            ResourceType.ASSIGNMENT, assignment_id, caller
        )
        return assignment_to_dict(target.entity)

    async def update_assignment(
        self,
        assignment_id: UUID,
        instructor_id: UUID,
        title: str | None = None,
        description: str | None = None,
        submission_type: SubmissionType | None = None,
        deadline: datetime | None = None,
    ) -> dict:
        """
        Update fields of an owned assignment. None values are left unchanged.

        Returns:
            dict: Updated assignment data
        """
        assignment = await self._get_owned_assignment(assignment_id, instructor_id)

        updates = {
            key: value
            for key, value in {
                "title": title,
                "description": description,
                "submission_type": submission_type,
                "deadline": deadline,
            }.items()
            if value is not None
        }
        if not updates:
            return assignment_to_dict(assignment)

        try:
            for key, value in updates.items():
                setattr(assignment, key, value)
            await self.db.commit()
            await self.db.refresh(assignment)
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to update assignment",
                extra={"error": str(e), "assignment_id": str(assignment_id)},
            )
            raise

        logger.info(
            "Assignment updated",
            extra={"assignment_id": str(assignment_id), "updates": list(updates.keys())},
        )
        return assignment_to_dict(assignment)

    async def delete_assignment(self, assignment_id: UUID, instructor_id: UUID) -> bool:
        """
        Delete an owned assignment.

        Returns:
            bool: True if deleted
        """
        await self._get_owned_assignment(assignment_id, instructor_id)

        try:
            await assignment_crud.delete_by_id(self.db, assignment_id)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete assignment",
                extra={"error": str(e), "assignment_id": str(assignment_id)},
            )
            raise

        logger.info("Assignment deleted", extra={"assignment_id": str(assignment_id)})
        return True

    async def get_instructor_assignments(self, instructor_id: UUID) -> list[dict]:
        """List assignments across all courses the instructor owns."""
        assignments = await assignment_crud.get_by_instructor(self.db, instructor_id)
        return [assignment_to_dict(a) for a in assignments]
