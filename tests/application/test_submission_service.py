"""
Test suite for SubmissionService.

System role: Verification of assignment hand-ins and their review
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from marketplace.application.services.submission_service import SubmissionService
from marketplace.boundary.db.models.assignment_model import SubmissionType
from marketplace.boundary.db.models.submission_model import SubmissionStatus
from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadySubmittedError,
    ResourceNotFoundError,
    ValidationError,
)

FILE_URL = "https://files.example.com/essay.pdf"


@pytest.fixture
async def instructor(make_user):
    return await make_user(UserRole.INSTRUCTOR)


@pytest.fixture
async def student(make_user):
    return await make_user(UserRole.STUDENT)


class TestCreateSubmission:
    """A student hands in work for an assignment they can read."""

    @pytest.mark.asyncio
    async def test_enrolled_student_submits_on_time(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        data = await SubmissionService(test_async_db).create_submission(
            assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
        )

        assert data["assignment_id"] == assignment.id
        assert data["student_id"] == student.id
        assert data["status"] == SubmissionStatus.SUBMITTED
        assert data["file_url"] == FILE_URL
        assert data["link_url"] is None

    @pytest.mark.asyncio
    async def test_after_deadline_is_late(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course, days_until_deadline=-1)
        await make_enrollment(student, course)

        data = await SubmissionService(test_async_db).create_submission(
            assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
        )

        assert data["status"] == SubmissionStatus.LATE

    @pytest.mark.asyncio
    async def test_not_enrolled_student_is_refused(
        self, test_async_db, instructor, student, make_course, make_assignment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)

        with pytest.raises(AccessForbiddenError, match="not enrolled"):
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
            )

    @pytest.mark.asyncio
    async def test_unpaid_student_of_paid_course_is_refused(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor, pricing="49.00")
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        with pytest.raises(AccessForbiddenError, match="payment required"):
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
            )

    @pytest.mark.asyncio
    async def test_unpublished_course_hides_assignment(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor, is_published=False)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        with pytest.raises(ResourceNotFoundError):
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
            )

    @pytest.mark.asyncio
    async def test_type_must_match_assignment(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        with pytest.raises(ValidationError, match="expects a file submission"):
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.LINK, link_url="https://x.dev"
            )

    @pytest.mark.asyncio
    async def test_file_submission_needs_file_url(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        with pytest.raises(ValidationError) as exc_info:
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.FILE
            )

        assert exc_info.value.details["field"] == "file_url"

    @pytest.mark.asyncio
    async def test_second_submission_is_rejected(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, make_submission, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)
        await make_submission(student, assignment)

        with pytest.raises(AlreadySubmittedError):
            await SubmissionService(test_async_db).create_submission(
                assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
            )

    @pytest.mark.asyncio
    async def test_lost_unique_race_maps_to_already_submitted(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)

        target = "marketplace.application.services.submission_service.submission_crud"
        with patch(target) as crud:
            crud.get_by_student_and_assignment = AsyncMock(side_effect=[None, object()])
            crud.create = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("unique")))

            with pytest.raises(AlreadySubmittedError):
                await SubmissionService(test_async_db).create_submission(
                    assignment.id, caller_for(student), SubmissionType.FILE, file_url=FILE_URL
                )


class TestReadSubmissions:
    """Who may see which submissions."""

    @pytest.mark.asyncio
    async def test_owner_lists_assignment_submissions_newest_first(
        self, test_async_db, instructor, make_user, make_course, make_assignment, make_submission, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        first = await make_submission(
            await make_user(UserRole.STUDENT),
            assignment,
            submitted_at=datetime.now(timezone.utc) - timedelta(hours=2),
        )
        second = await make_submission(await make_user(UserRole.STUDENT), assignment)

        data = await SubmissionService(test_async_db).get_assignment_submissions(
            assignment.id, caller_for(instructor)
        )

        assert [s["id"] for s in data] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_other_instructor_cannot_list(
        self, test_async_db, instructor, make_user, make_course, make_assignment, caller_for
    ) -> None:
        assignment = await make_assignment(await make_course(instructor))
        other = await make_user(UserRole.INSTRUCTOR)

        with pytest.raises(AccessForbiddenError, match="not your course"):
            await SubmissionService(test_async_db).get_assignment_submissions(
                assignment.id, caller_for(other)
            )

    @pytest.mark.asyncio
    async def test_listing_unknown_assignment(self, test_async_db, instructor, caller_for) -> None:
        with pytest.raises(ResourceNotFoundError):
            await SubmissionService(test_async_db).get_assignment_submissions(
                uuid.uuid4(), caller_for(instructor)
            )

    @pytest.mark.asyncio
    async def test_student_reads_own_submission(
        self, test_async_db, instructor, student, make_course, make_assignment, make_enrollment, make_submission, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)
        submission = await make_submission(student, assignment)

        data = await SubmissionService(test_async_db).get_submission(
            submission.id, caller_for(student)
        )

        assert data["id"] == submission.id

    @pytest.mark.asyncio
    async def test_student_cannot_see_classmate_submission(
        self, test_async_db, instructor, student, make_user, make_course, make_assignment, make_enrollment, make_submission, caller_for
    ) -> None:
        course = await make_course(instructor)
        assignment = await make_assignment(course)
        await make_enrollment(student, course)
        submission = await make_submission(await make_user(UserRole.STUDENT), assignment)

        with pytest.raises(ResourceNotFoundError, match="Submission not found"):
            await SubmissionService(test_async_db).get_submission(
                submission.id, caller_for(student)
            )

    @pytest.mark.asyncio
    async def test_other_instructor_cannot_read_submission(
        self, test_async_db, instructor, student, make_user, make_course, make_assignment, make_submission, caller_for
    ) -> None:
        assignment = await make_assignment(await make_course(instructor))
        submission = await make_submission(student, assignment)
        other = await make_user(UserRole.INSTRUCTOR)

        with pytest.raises(AccessForbiddenError, match="not your course"):
            await SubmissionService(test_async_db).get_submission(submission.id, caller_for(other))

    @pytest.mark.asyncio
    async def test_student_history_skips_unpublished_courses(
        self, test_async_db, instructor, student, make_course, make_assignment, make_submission
    ) -> None:
        live = await make_submission(student, await make_assignment(await make_course(instructor)))
        await make_submission(
            student, await make_assignment(await make_course(instructor, is_published=False))
        )

        data = await SubmissionService(test_async_db).get_student_submissions(student.id)

        assert [s["id"] for s in data] == [live.id]
