"""
User ORM model.

Represents an account that can own courses (instructor), buy and enroll
in them (student), or administer the catalogue (admin).

Dependencies: sqlalchemy, marketplace.boundary.db.base
System role: Identity persistence for ownership and entitlements
"""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from marketplace.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """
    Account roles carried in access tokens.

    STUDENT: Browses, pays for and enrolls in courses
    INSTRUCTOR: Owns courses and their assignments
    ADMIN: Runs catalogue-wide operations
    """

    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        email: Login email (unique)
        first_name: Given name
        last_name: Family name
        role: UserRole enum
        courses: Courses owned by this user (instructors only)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False),
        nullable=False,
        default=UserRole.STUDENT,
    )

    courses = relationship(
        "CourseModel",
        back_populates="instructor",
        cascade="all, delete-orphan",
    )
