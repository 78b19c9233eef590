"""
Submission domain models and schemas.

Request/response schemas for assignment hand-ins.

Dependencies: pydantic
System role: Submission API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from marketplace.boundary.db.models.assignment_model import SubmissionType
from marketplace.boundary.db.models.submission_model import SubmissionStatus


class CreateSubmissionRequest(BaseModel):
    """Request schema for handing in an assignment."""

    submission_type: SubmissionType = Field(..., description="file or link, must match the assignment")
    file_url: str | None = Field(None, min_length=1, max_length=2048, description="Uploaded file location")
    link_url: str | None = Field(None, min_length=1, max_length=2048, description="External link")


class SubmissionResponse(BaseModel):
    """Response schema for submission operations."""

    id: uuid.UUID
    assignment_id: uuid.UUID
    student_id: uuid.UUID
    submission_type: SubmissionType
    file_url: str | None
    link_url: str | None
    status: SubmissionStatus
    submitted_at: datetime
