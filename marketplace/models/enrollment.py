"""
Enrollment response schemas.

Dependencies: pydantic
System role: Enrollment API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel

from marketplace.boundary.db.models.enrollment_model import EnrollmentStatus


class EnrollmentResponse(BaseModel):
    """Response schema for a created enrollment."""

    id: uuid.UUID
    student_id: uuid.UUID
    course_id: uuid.UUID
    status: EnrollmentStatus
    progress_percentage: float
    enrolled_at: datetime
