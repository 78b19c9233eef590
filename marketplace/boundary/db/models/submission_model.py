"""
Submission ORM model.

A student's hand-in for an assignment. At most one row per
(assignment, student) pair.

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Submission persistence
"""

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now
from marketplace.boundary.db.models.assignment_model import SubmissionType


class SubmissionStatus(str, enum.Enum):
    """Whether a submission arrived before the assignment deadline."""

    SUBMITTED = "submitted"
    LATE = "late"


class SubmissionModel(Base, UUIDMixin, TimestampMixin):
    """
    Submission ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        assignment_id: Assignment answered (FK assignments, cascade delete)
        student_id: Submitting student (FK users, cascade delete)
        submission_type: SubmissionType enum (file | link)
        file_url: Uploaded file location, set for file submissions
        link_url: External link, set for link submissions
        status: SubmissionStatus enum (submitted | late)
        submitted_at: Hand-in timestamp (UTC)

    Constraints:
        (assignment_id, student_id): UNIQUE
    """

    __tablename__ = "submissions"
    __table_args__ = (
        UniqueConstraint(
            "assignment_id", "student_id", name="uq_submissions_assignment_student"
        ),
    )

    assignment_id: Mapped[UUID] = mapped_column(
        ForeignKey("assignments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    submission_type: Mapped[SubmissionType] = mapped_column(
        Enum(SubmissionType, native_enum=False),
        nullable=False,
    )
    file_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    link_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    status: Mapped[SubmissionStatus] = mapped_column(
        Enum(SubmissionStatus, native_enum=False),
        nullable=False,
        default=SubmissionStatus.SUBMITTED,
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    assignment = relationship("AssignmentModel", back_populates="submissions")
