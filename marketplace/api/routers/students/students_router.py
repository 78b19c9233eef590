"""
Student API endpoints.

Routes:
- GET /students/courses - The calling student's enrollments, most recent first
- GET /students/submissions - The calling student's submissions, most recent first

Dependencies: marketplace.application.services, marketplace.models
System role: Student self-service HTTP API
"""

from fastapi import APIRouter, Depends

from marketplace.api.deps.dependencies import (
    get_enrollment_service,
    get_submission_service,
    require_student,
)
from marketplace.application.services.enrollment_service import EnrollmentService
from marketplace.application.services.submission_service import SubmissionService
from marketplace.core.access import Caller
from marketplace.models.enrollment import EnrollmentResponse
from marketplace.models.submission import SubmissionResponse

from ..router_utils import handle_domain_errors
from ..submissions.submission_responses import map_submissions_to_response

router = APIRouter(prefix="/students", tags=["students"])


@router.get("/courses", response_model=list[EnrollmentResponse])
@handle_domain_errors
async def list_my_enrollments(
    caller: Caller = Depends(require_student),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> list[EnrollmentResponse]:
    """List the courses the calling student is enrolled in."""
    enrollments = await enrollment_service.get_student_enrollments(caller.user_id)
    return [EnrollmentResponse(**e) for e in enrollments]


@router.get("/submissions", response_model=list[SubmissionResponse])
@handle_domain_errors
async def list_my_submissions(
    caller: Caller = Depends(require_student),
    submission_service: SubmissionService = Depends(get_submission_service),
) -> list[SubmissionResponse]:
    """List the calling student's submissions in published courses."""
    submissions = await submission_service.get_student_submissions(caller.user_id)
    return map_submissions_to_response(submissions)
