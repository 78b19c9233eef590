"""
Payment ORM model.

Mirror of a hosted-checkout transaction for a (student, course) pair.
Only rows with status COMPLETED grant access to paid courses.

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Payment persistence for entitlement checks
"""

import enum
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Enum, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin


class PaymentStatus(str, enum.Enum):
    """
    Checkout transaction states.

    PENDING: Checkout started, provider has not confirmed
    COMPLETED: Provider confirmed the charge
    FAILED: Charge declined or abandoned
    REFUNDED: Charge reversed after completion
    """

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentModel(Base, UUIDMixin, TimestampMixin):
    """
    Payment ORM model.

    Several rows may exist per (student, course) pair (retries, refunds).

    Attributes:
        id: UUID primary key (auto-generated)
        student_id: Paying student (FK users)
        course_id: Purchased course (FK courses)
        amount: Charged amount
        currency: Currency code
        status: PaymentStatus enum
        provider: Checkout provider name
        transaction_id: Provider-side transaction reference
    """

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_student_course_status", "student_id", "course_id", "status"),
    )

    student_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    status: Mapped[PaymentStatus] = mapped_column(
        Enum(PaymentStatus, native_enum=False),
        nullable=False,
        default=PaymentStatus.PENDING,
    )
    provider: Mapped[str] = mapped_column(String(50), nullable=False)
    transaction_id: Mapped[str] = mapped_column(String(255), nullable=False)

    course = relationship("CourseModel", back_populates="payments")
