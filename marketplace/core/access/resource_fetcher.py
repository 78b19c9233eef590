"""
Resource fetcher.

Loads a course or assignment together with the parent course fields the
access policy needs (owner, publish flag, price) and packs them into an
AccessTarget.

Dependencies: sqlalchemy, marketplace.boundary.db.CRUD
System role: Read side of the authorization flow
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.CRUD.assignment_crud import assignment_crud
from marketplace.boundary.db.CRUD.course_crud import course_crud
from marketplace.boundary.db.models.assignment_model import AssignmentModel
from marketplace.boundary.db.models.course_model import CourseModel
from marketplace.core.access.decisions import AccessTarget, ResourceType

logger = logging.getLogger(__name__)


def course_target(course: CourseModel) -> AccessTarget:
    """Build an AccessTarget for a course row."""
    return AccessTarget(
        resource_type=ResourceType.COURSE,
        resource_id=course.id,
        course_id=course.id,
        instructor_id=course.instructor_id,
        is_published=course.is_published,
        pricing=course.pricing,
        entity=course,
    )


def assignment_target(assignment: AssignmentModel, course: CourseModel) -> AccessTarget:
    """Build an AccessTarget for an assignment, inheriting its course's access state."""
    return AccessTarget(
        resource_type=ResourceType.ASSIGNMENT,
        resource_id=assignment.id,
        course_id=course.id,
        instructor_id=course.instructor_id,
        is_published=course.is_published,
        pricing=course.pricing,
        entity=assignment,
    )


class ResourceFetcher:
    """Loads access targets from the database. Read-only."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize fetcher with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def fetch(
        self,
        resource_type: ResourceType,
        resource_id: UUID,
    ) -> AccessTarget | None:
        """
        Load a resource as an AccessTarget.

        Args:
            resource_type: COURSE or ASSIGNMENT
            resource_id: Resource UUID

        Returns:
            AccessTarget, or None if the resource (or an assignment's
            parent course) does not exist
        """
        if resource_type == ResourceType.COURSE:
            course = await course_crud.get_by_id(self.db, resource_id)
            if course is None:
                return None
            return course_target(course)

        if resource_type == ResourceType.ASSIGNMENT:
            assignment = await assignment_crud.get_with_course(self.db, resource_id)
            if assignment is None or assignment.course is None:
                return None
            return assignment_target(assignment, assignment.course)

        raise ValueError(f"Unsupported resource type: {resource_type!r}")
