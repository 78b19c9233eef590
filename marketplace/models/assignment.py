"""
Assignment domain models and schemas.

Request/response schemas for assignment operations.

Dependencies: pydantic
System role: Assignment API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from marketplace.boundary.db.models.assignment_model import SubmissionType


class CreateAssignmentRequest(BaseModel):
    """Request schema for creating an assignment."""

    course_id: uuid.UUID = Field(..., description="Parent course ID")
    title: str = Field(..., min_length=1, max_length=255, description="Assignment title")
    description: str = Field(..., min_length=1, description="Instructions for students")
    submission_type: SubmissionType = Field(..., description="file or link")
    deadline: datetime = Field(..., description="Due date; must be in the future")


class UpdateAssignmentRequest(BaseModel):
    """Request schema for updating an assignment. Omitted fields are unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    submission_type: SubmissionType | None = None
    deadline: datetime | None = None


class AssignmentResponse(BaseModel):
    """Response schema for assignment operations."""

    id: uuid.UUID
    course_id: uuid.UUID
    title: str
    description: str
    submission_type: SubmissionType
    deadline: datetime
    created_at: datetime
    updated_at: datetime
