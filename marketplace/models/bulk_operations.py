"""
Admin bulk course operation schemas.

Each operation kind is its own model; the request body is a discriminated
union on `action`, so unknown actions and malformed payloads are rejected
at the API boundary.

Dependencies: pydantic
System role: Admin bulk operation API contracts
"""

import uuid
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class _CourseBatch(BaseModel):
    course_ids: list[uuid.UUID] = Field(..., min_length=1, max_length=100)


class PublishCoursesOperation(_CourseBatch):
    """Publish every listed course."""

    action: Literal["publish"]


class UnpublishCoursesOperation(_CourseBatch):
    """Hide every listed course."""

    action: Literal["unpublish"]


class DeleteCoursesOperation(_CourseBatch):
    """Delete every listed course with its assignments, enrollments and payments."""

    action: Literal["delete"]


class RepriceCoursesOperation(_CourseBatch):
    """Set the same price on every listed course."""

    action: Literal["reprice"]
    pricing: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


BulkCourseOperation = Annotated[
    Union[
        PublishCoursesOperation,
        UnpublishCoursesOperation,
        DeleteCoursesOperation,
        RepriceCoursesOperation,
    ],
    Field(discriminator="action"),
]


class BulkOperationFailure(BaseModel):
    """One course the operation could not be applied to."""

    course_id: uuid.UUID
    error: str


class BulkOperationResult(BaseModel):
    """Outcome of a bulk operation."""

    action: str
    successful: list[uuid.UUID]
    failed: list[BulkOperationFailure]
    total: int
