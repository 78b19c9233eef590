"""
Submission service orchestrator.

Students hand in work for assignments they are entitled to read. The
instructor who owns the course reviews the submissions of each assignment.

Dependencies: marketplace.boundary.db.CRUD, marketplace.application.services.access_service
System role: Submission use case orchestration
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services.access_service import AccessService
from marketplace.boundary.db.CRUD.assignment_crud import assignment_crud
from marketplace.boundary.db.CRUD.submission_crud import submission_crud
from marketplace.boundary.db.models.assignment_model import SubmissionType
from marketplace.boundary.db.models.submission_model import SubmissionModel, SubmissionStatus
from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.access import Caller, DenialReason, ResourceType
from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadySubmittedError,
    ResourceNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def submission_to_dict(submission: SubmissionModel) -> dict:
    """Flatten a submission row for response mapping."""
    return {
        "id": submission.id,
        "assignment_id": submission.assignment_id,
        "student_id": submission.student_id,
        "submission_type": submission.submission_type,
        "file_url": submission.file_url,
        "link_url": submission.link_url,
        "status": submission.status,
        "submitted_at": submission.submitted_at,
    }


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SubmissionService:
    """Submission service orchestrator."""

    def __init__(self, db: AsyncSession, access: AccessService | None = None) -> None:
        """
        Initialize submission service with async database session.

        Args:
            db: Async SQLAlchemy session
            access: Access service deciding whether a student may submit
        """
        self.db = db
        self.access = access or AccessService(db)

    async def create_submission(
        self,
        assignment_id: UUID,
        caller: Caller,
        submission_type: SubmissionType,
        file_url: str | None = None,
        link_url: str | None = None,
    ) -> dict:
        """
        Hand in a student's work for an assignment.

        The student must be granted read access to the assignment, which
        means the course is published, paid for when priced and the student
        is enrolled. Work received after the deadline is marked late.

        Args:
            assignment_id: Assignment UUID
            caller: Submitting student
            submission_type: file or link, must match the assignment
            file_url: Location of the uploaded file (file submissions)
            link_url: External link (link submissions)

        Returns:
            dict: Created submission data

        Raises:
            ResourceNotFoundError: Assignment absent or course unpublished
            AccessForbiddenError: Student not entitled (reason in message)
            ValidationError: Type mismatch or missing URL
            AlreadySubmittedError: Student already handed this assignment in
        """
        target = await self.access.require_access(
            ResourceType.ASSIGNMENT, assignment_id, caller
        )
        assignment = target.entity

        if submission_type != assignment.submission_type:
            raise ValidationError(
                f"This assignment expects a {assignment.submission_type.value} submission",
                field="submission_type",
            )
        if submission_type == SubmissionType.FILE and not file_url:
            raise ValidationError("File URL is required for file submissions", field="file_url")
        if submission_type == SubmissionType.LINK and not link_url:
            raise ValidationError("Link URL is required for link submissions", field="link_url")

        existing = await submission_crud.get_by_student_and_assignment(
            self.db, caller.user_id, assignment_id
        )
        if existing is not None:
            raise AlreadySubmittedError(assignment_id)

        submitted_at = datetime.now(timezone.utc)
        is_late = submitted_at > _as_utc(assignment.deadline)

        try:
            submission = await submission_crud.create(
                self.db,
                assignment_id=assignment_id,
                student_id=caller.user_id,
                submission_type=submission_type,
                file_url=file_url if submission_type == SubmissionType.FILE else None,
                link_url=link_url if submission_type == SubmissionType.LINK else None,
                status=SubmissionStatus.LATE if is_late else SubmissionStatus.SUBMITTED,
                submitted_at=submitted_at,
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            # Concurrent submit for the same pair lost the unique-constraint race
            if await submission_crud.get_by_student_and_assignment(
                self.db, caller.user_id, assignment_id
            ):
                raise AlreadySubmittedError(assignment_id) from e
            raise

        logger.info(
            "Assignment submitted",
            extra={
                "assignment_id": str(assignment_id),
                "student_id": str(caller.user_id),
                "late": is_late,
            },
        )
        return submission_to_dict(submission)

    async def get_submission(self, submission_id: UUID, caller: Caller) -> dict:
        """
        Get a single submission.

        Students only see their own, and only while they can still read the
        assignment. Instructors see submissions in courses they own. Admins
        see every submission.

        Raises:
            ResourceNotFoundError: Submission absent or not the student's own
            AccessForbiddenError: Instructor does not own the course
        """
        submission = await submission_crud.get_with_course(self.db, submission_id)
        if submission is None:
            raise ResourceNotFoundError("submission", submission_id)

        if caller.role == UserRole.STUDENT.value:
            if submission.student_id != caller.user_id:
                raise ResourceNotFoundError("submission", submission_id)
            await self.access.require_access(
                ResourceType.ASSIGNMENT, submission.assignment_id, caller
            )
        elif caller.role == UserRole.INSTRUCTOR.value:
            if submission.assignment.course.instructor_id != caller.user_id:
                raise AccessForbiddenError(
                    DenialReason.NOT_YOUR_COURSE.value,
                    {"submission_id": str(submission_id)},
                )
        elif caller.role != UserRole.ADMIN.value:
            raise AccessForbiddenError(DenialReason.AUTHENTICATION_REQUIRED.value)

        return submission_to_dict(submission)

    async def get_assignment_submissions(
        self,
        assignment_id: UUID,
        caller: Caller,
    ) -> list[dict]:
        """
        List every submission for an assignment, most recent first.

        Restricted to the instructor who owns the course, and to admins.
        Works on draft courses.

        Raises:
            ResourceNotFoundError: Assignment does not exist
            AccessForbiddenError: Caller does not own the course
        """
        assignment = await assignment_crud.get_with_course(self.db, assignment_id)
        if assignment is None:
            raise ResourceNotFoundError("assignment", assignment_id)

        if caller.role != UserRole.ADMIN.value and (
            assignment.course.instructor_id != caller.user_id
        ):
            raise AccessForbiddenError(
                DenialReason.NOT_YOUR_COURSE.value,
                {"assignment_id": str(assignment_id)},
            )

        submissions = await submission_crud.get_by_assignment(self.db, assignment_id)
        return [submission_to_dict(s) for s in submissions]

    async def get_student_submissions(self, student_id: UUID) -> list[dict]:
        """List a student's submissions in published courses, most recent first."""
        submissions = await submission_crud.get_by_student(self.db, student_id)
        return [submission_to_dict(s) for s in submissions]
