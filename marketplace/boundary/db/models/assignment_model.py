"""
Assignment ORM model.

Coursework attached to a course. Has no access state of its own: reads are
authorized against the parent course.

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Assignment persistence
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SubmissionType(str, enum.Enum):
    """How students hand in an assignment."""

    FILE = "file"
    LINK = "link"


class AssignmentModel(Base, UUIDMixin, TimestampMixin):
    """
    Assignment ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        course_id: Parent course (FK courses, cascade delete)
        title: Assignment title
        description: Instructions for students
        submission_type: SubmissionType enum (file | link)
        deadline: Due date (UTC)
    """

    __tablename__ = "assignments"

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    submission_type: Mapped[SubmissionType] = mapped_column(
        Enum(SubmissionType, native_enum=False),
        nullable=False,
    )
    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    course = relationship("CourseModel", back_populates="assignments")
    submissions = relationship(
        "SubmissionModel",
        back_populates="assignment",
        cascade="all, delete-orphan",
    )
