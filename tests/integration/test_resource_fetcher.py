"""
Test suite for ResourceFetcher against an in-memory SQLite database.

System role: Verification of access target loading
"""

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.access import ResourceFetcher, ResourceType


class TestFetchCourse:
    """Course targets."""

    @pytest.mark.asyncio
    async def test_course_target_snapshot(self, test_async_db, make_user, make_course) -> None:
        owner = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(owner, is_published=False, pricing="12.50")

        target = await ResourceFetcher(test_async_db).fetch(ResourceType.COURSE, course.id)

        assert target.resource_type == ResourceType.COURSE
        assert target.resource_id == course.id
        assert target.course_id == course.id
        assert target.instructor_id == owner.id
        assert target.is_published is False
        assert target.pricing == Decimal("12.50")
        assert target.entity is course

    @pytest.mark.asyncio
    async def test_unknown_course_returns_none(self, test_async_db) -> None:
        target = await ResourceFetcher(test_async_db).fetch(ResourceType.COURSE, uuid.uuid4())

        assert target is None


class TestFetchAssignment:
    """Assignment targets carry their parent course's access fields."""

    @pytest.mark.asyncio
    async def test_assignment_inherits_course_fields(
        self, test_async_db, make_user, make_course, make_assignment
    ) -> None:
        owner = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(owner, pricing="99")
        assignment = await make_assignment(course)

        target = await ResourceFetcher(test_async_db).fetch(ResourceType.ASSIGNMENT, assignment.id)

        assert target.resource_type == ResourceType.ASSIGNMENT
        assert target.resource_id == assignment.id
        assert target.course_id == course.id
        assert target.instructor_id == owner.id
        assert target.is_published is True
        assert target.pricing == Decimal("99")

    @pytest.mark.asyncio
    async def test_unknown_assignment_returns_none(self, test_async_db) -> None:
        target = await ResourceFetcher(test_async_db).fetch(ResourceType.ASSIGNMENT, uuid.uuid4())

        assert target is None

    @pytest.mark.asyncio
    async def test_assignment_without_course_returns_none(self) -> None:
        orphan = AsyncMock()
        orphan.course = None
        with patch(
            "marketplace.core.access.resource_fetcher.assignment_crud.get_with_course",
            AsyncMock(return_value=orphan),
        ):
            target = await ResourceFetcher(AsyncMock()).fetch(ResourceType.ASSIGNMENT, uuid.uuid4())

        assert target is None


@pytest.mark.asyncio
async def test_unsupported_resource_type_raises() -> None:
    fetcher = ResourceFetcher(AsyncMock())

    with pytest.raises(ValueError, match="Unsupported resource type"):
        await fetcher.fetch("video", uuid.uuid4())
