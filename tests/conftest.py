"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, row factories for users, courses,
assignments, payments, enrollments and submissions, and caller helpers.
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from marketplace.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory inserting a user row.

    Returns:
        Callable: async (role, email=None) -> UserModel
    """
    from marketplace.boundary.db.models.user_model import UserModel, UserRole

    async def _make(role: UserRole = UserRole.STUDENT, email: str | None = None) -> UserModel:
        user = UserModel(
            email=email or f"{uuid.uuid4().hex[:10]}@example.com",
            first_name="Test",
            last_name=role.value.capitalize(),
            role=role,
        )
        test_async_db.add(user)
        await test_async_db.flush()
        return user

    return _make


@pytest.fixture
def make_course(test_async_db):
    """
    Factory inserting a course row.

    Returns:
        Callable: async (instructor, is_published=True, pricing=0) -> CourseModel
    """
    from marketplace.boundary.db.models.course_model import CourseModel

    async def _make(instructor, is_published: bool = True, pricing: str | Decimal = "0") -> CourseModel:
        course = CourseModel(
            title="Intro to Testing",
            description="Fixtures all the way down",
            instructor_id=instructor.id,
            is_published=is_published,
            pricing=Decimal(pricing),
            currency="USD",
        )
        test_async_db.add(course)
        await test_async_db.flush()
        return course

    return _make


@pytest.fixture
def make_assignment(test_async_db):
    """
    Factory inserting an assignment row.

    Returns:
        Callable: async (course, days_until_deadline=7, title="Homework") -> AssignmentModel
    """
    from marketplace.boundary.db.models.assignment_model import AssignmentModel, SubmissionType

    async def _make(course, days_until_deadline: int = 7, title: str = "Homework") -> AssignmentModel:
        assignment = AssignmentModel(
            course_id=course.id,
            title=title,
            description="Submit your work",
            submission_type=SubmissionType.FILE,
            deadline=datetime.now(timezone.utc) + timedelta(days=days_until_deadline),
        )
        test_async_db.add(assignment)
        await test_async_db.flush()
        return assignment

    return _make


@pytest.fixture
def make_payment(test_async_db):
    """
    Factory inserting a payment row.

    Returns:
        Callable: async (student, course, status=COMPLETED) -> PaymentModel
    """
    from marketplace.boundary.db.models.payment_model import PaymentModel, PaymentStatus

    async def _make(student, course, status: PaymentStatus = PaymentStatus.COMPLETED) -> PaymentModel:
        payment = PaymentModel(
            student_id=student.id,
            course_id=course.id,
            amount=course.pricing,
            currency=course.currency,
            status=status,
            provider="stripe",
            transaction_id=f"txn_{uuid.uuid4().hex}",
        )
        test_async_db.add(payment)
        await test_async_db.flush()
        return payment

    return _make


@pytest.fixture
def make_enrollment(test_async_db):
    """
    Factory inserting an enrollment row.

    Returns:
        Callable: async (student, course) -> EnrollmentModel
    """
    from marketplace.boundary.db.models.enrollment_model import EnrollmentModel, EnrollmentStatus

    async def _make(student, course) -> EnrollmentModel:
        enrollment = EnrollmentModel(
            student_id=student.id,
            course_id=course.id,
            status=EnrollmentStatus.ACTIVE,
        )
        test_async_db.add(enrollment)
        await test_async_db.flush()
        return enrollment

    return _make


@pytest.fixture
def make_submission(test_async_db):
    """
    Factory inserting a submission row.

    Returns:
        Callable: async (student, assignment, submitted_at=None) -> SubmissionModel
    """
    from marketplace.boundary.db.models.submission_model import SubmissionModel, SubmissionStatus

    async def _make(student, assignment, submitted_at: datetime | None = None) -> SubmissionModel:
        submission = SubmissionModel(
            assignment_id=assignment.id,
            student_id=student.id,
            submission_type=assignment.submission_type,
            file_url="https://files.example.com/homework.pdf",
            status=SubmissionStatus.SUBMITTED,
            submitted_at=submitted_at or datetime.now(timezone.utc),
        )
        test_async_db.add(submission)
        await test_async_db.flush()
        return submission

    return _make


@pytest.fixture
def caller_for():
    """
    Build a Caller from a user row.

    Returns:
        Callable: (user) -> Caller
    """
    from marketplace.core.access import Caller

    def _caller(user) -> "Caller":
        return Caller(user_id=user.id, role=user.role.value)

    return _caller


@pytest.fixture
def mock_db() -> AsyncMock:
    """Mock async session with commit/rollback."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    return db
