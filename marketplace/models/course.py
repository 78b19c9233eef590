"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    title: str = Field(..., min_length=1, max_length=255, description="Course title")
    description: str = Field("", max_length=10000, description="Course description")
    pricing: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="Price, 0 for free")
    currency: str = Field("USD", min_length=3, max_length=3, description="ISO 4217 currency code")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating course details. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255, description="Course title")
    description: str | None = Field(None, max_length=10000, description="Course description")
    pricing: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2, description="Price, 0 for free")
    currency: str | None = Field(None, min_length=3, max_length=3, description="ISO 4217 currency code")


class PublishCourseRequest(BaseModel):
    """Request schema for toggling the publish flag."""

    is_published: bool = Field(..., description="New publish flag value")


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: uuid.UUID
    title: str
    description: str
    instructor_id: uuid.UUID
    is_published: bool
    pricing: Decimal
    currency: str
    created_at: datetime
    updated_at: datetime
