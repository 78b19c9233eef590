"""
Enrollment ORM model.

Records that a student joined a course. At most one row per
(student, course) pair, enforced by a unique constraint.

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Enrollment persistence for entitlement checks
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class EnrollmentStatus(str, enum.Enum):
    """Enrollment lifecycle states."""

    ACTIVE = "active"
    COMPLETED = "completed"


class EnrollmentModel(Base, UUIDMixin, TimestampMixin):
    """
    Enrollment ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        student_id: Enrolled student (FK users)
        course_id: Course enrolled in (FK courses)
        status: EnrollmentStatus enum
        progress_percentage: Completion progress (0-100)
        enrolled_at: Enrollment timestamp (UTC)

    Constraints:
        (student_id, course_id): UNIQUE
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollments_student_course"),
    )

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[EnrollmentStatus] = mapped_column(
        Enum(EnrollmentStatus, native_enum=False),
        nullable=False,
        default=EnrollmentStatus.ACTIVE,
    )
    progress_percentage: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    enrolled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    course = relationship("CourseModel", back_populates="enrollments")
