"""
Course ORM model.

Root entity of the marketplace. Assignments, enrollments and payments all
reference a course and are removed with it.

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Course persistence and the state the access policy reads
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    A course has exactly one owning instructor. The publish flag and price
    drive every access decision for the course and its assignments.

    Attributes:
        id: UUID primary key (auto-generated)
        title: Course title (255 char limit)
        description: Course description
        instructor_id: Owning instructor (FK users)
        is_published: Visible to non-owners only when True
        pricing: Non-negative price, 0 means free
        currency: ISO 4217 currency code
        created_at: Course creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        instructor: Many-to-one with UserModel
        assignments, enrollments, payments: One-to-many (cascade delete)
    """

    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("pricing >= 0", name="ck_courses_pricing_non_negative"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False, doc="Course title")

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        doc="Course description",
    )

    instructor_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Owning instructor ID",
    )

    is_published: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        doc="Publish flag toggled by the owning instructor",
    )

    pricing: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        default=Decimal("0"),
        doc="Price; 0 for free courses",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="USD",
        doc="Currency code",
    )

    # Relationships
    instructor = relationship("UserModel", back_populates="courses")
    assignments = relationship(
        "AssignmentModel",
        back_populates="course",
        cascade="all, delete-orphan",
    )
    enrollments = relationship(
        "EnrollmentModel",
        back_populates="course",
        cascade="all, delete-orphan",
    )
    payments = relationship(
        "PaymentModel",
        back_populates="course",
        cascade="all, delete-orphan",
    )

    @property
    def is_free(self) -> bool:
        """True when the course costs nothing."""
        return self.pricing <= 0
