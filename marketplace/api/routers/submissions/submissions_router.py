"""
Submission API endpoints.

Routes:
- POST /assignments/{id}/submissions - Hand in an assignment (entitled student)
- GET /assignments/{id}/submissions - List an assignment's submissions (owner, admin)
- GET /submissions/{id} - Get single submission (own student, owner, admin)

Dependencies: marketplace.application.services, marketplace.models
System role: Submission HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from marketplace.api.deps.dependencies import (
    get_submission_service,
    require_roles,
    require_student,
)
from marketplace.application.services.submission_service import SubmissionService
from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.access import Caller
from marketplace.models.common import ErrorResponse
from marketplace.models.submission import CreateSubmissionRequest, SubmissionResponse

from ..router_utils import handle_domain_errors
from .submission_responses import map_submission_to_response, map_submissions_to_response
from .submission_validators import validate_submission_creation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["submissions"])

require_reviewer = require_roles(UserRole.INSTRUCTOR, UserRole.ADMIN)
require_member = require_roles(UserRole.STUDENT, UserRole.INSTRUCTOR, UserRole.ADMIN)


@router.post(
    "/assignments/{assignment_id}/submissions",
    response_model=SubmissionResponse,
    status_code=201,
    responses={
        403: {"model": ErrorResponse, "description": "Student not entitled"},
        404: {"model": ErrorResponse, "description": "Assignment not found or course unpublished"},
        409: {"model": ErrorResponse, "description": "Already submitted"},
    },
)
@handle_domain_errors
async def submit_assignment(
    assignment_id: UUID,
    request: CreateSubmissionRequest,
    caller: Caller = Depends(require_student),
    submission_service: SubmissionService = Depends(get_submission_service),
) -> SubmissionResponse:
    """
    Hand in the calling student's work for an assignment.

    Raises:
        HTTPException(400): Type mismatch, missing or malformed URL
        HTTPException(403): Not paid for or not enrolled (reason in detail)
        HTTPException(404): Assignment not found or course unpublished
        HTTPException(409): Assignment already submitted
    """
    validate_submission_creation(request)

    submission = await submission_service.create_submission(
        assignment_id=assignment_id,
        caller=caller,
        submission_type=request.submission_type,
        file_url=request.file_url.strip() if request.file_url else None,
        link_url=request.link_url.strip() if request.link_url else None,
    )
    return map_submission_to_response(submission)


@router.get(
    "/assignments/{assignment_id}/submissions",
    response_model=list[SubmissionResponse],
)
@handle_domain_errors
async def list_assignment_submissions(
    assignment_id: UUID,
    caller: Caller = Depends(require_reviewer),
    submission_service: SubmissionService = Depends(get_submission_service),
) -> list[SubmissionResponse]:
    """
    List every submission for an assignment, most recent first.

    Raises:
        HTTPException(403): Caller does not own the course
        HTTPException(404): Assignment not found
    """
    submissions = await submission_service.get_assignment_submissions(assignment_id, caller)

    logger.info(
        "Assignment submissions retrieved",
        extra={"assignment_id": str(assignment_id), "count": len(submissions)},
    )
    return map_submissions_to_response(submissions)


@router.get("/submissions/{submission_id}", response_model=SubmissionResponse)
@handle_domain_errors
async def get_submission(
    submission_id: UUID,
    caller: Caller = Depends(require_member),
    submission_service: SubmissionService = Depends(get_submission_service),
) -> SubmissionResponse:
    """
    Get single submission.

    Raises:
        HTTPException(403): Instructor does not own the course, or student lost access
        HTTPException(404): Submission not found
    """
    submission = await submission_service.get_submission(submission_id, caller)
    return map_submission_to_response(submission)
