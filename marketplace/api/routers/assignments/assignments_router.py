"""
Assignment API endpoints.

Routes:
- POST /assignments - Create assignment in an owned course (instructor)
- GET /assignments/instructor/mine - List assignments across owned courses (instructor)
- GET /assignments/{id} - Get single assignment (access-gated via parent course)
- PUT /assignments/{id} - Update owned assignment (instructor)
- DELETE /assignments/{id} - Delete owned assignment (instructor)

Dependencies: marketplace.application.services, marketplace.models
System role: Assignment HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from marketplace.api.deps.dependencies import (
    get_assignment_service,
    get_caller,
    require_instructor,
)
from marketplace.application.services.assignment_service import AssignmentService
from marketplace.core.access import Caller
from marketplace.models.assignment import (
    AssignmentResponse,
    CreateAssignmentRequest,
    UpdateAssignmentRequest,
)
from marketplace.models.common import ErrorResponse

from ..router_utils import handle_domain_errors
from .assignment_responses import map_assignment_to_response, map_assignments_to_response
from .assignment_validators import (
    validate_assignment_creation,
    validate_assignment_update,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.post("", response_model=AssignmentResponse, status_code=201)
@handle_domain_errors
async def create_assignment(
    request: CreateAssignmentRequest,
    caller: Caller = Depends(require_instructor),
    assignment_service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """
    Create an assignment in a course the caller owns.

    Raises:
        HTTPException(400): Invalid request (past deadline, blank title)
        HTTPException(403): Course owned by another instructor
        HTTPException(404): Course not found
    """
    validate_assignment_creation(request)

    logger.info(
        "Creating assignment",
        extra={"course_id": str(request.course_id), "instructor_id": str(caller.user_id)},
    )

    assignment = await assignment_service.create_assignment(
        instructor_id=caller.user_id,
        course_id=request.course_id,
        title=request.title.strip(),
        description=request.description,
        submission_type=request.submission_type,
        deadline=request.deadline,
    )
    return map_assignment_to_response(assignment)


@router.get("/instructor/mine", response_model=list[AssignmentResponse])
@handle_domain_errors
async def list_my_assignments(
    caller: Caller = Depends(require_instructor),
    assignment_service: AssignmentService = Depends(get_assignment_service),
) -> list[AssignmentResponse]:
    """List assignments across every course the caller owns."""
    assignments = await assignment_service.get_instructor_assignments(caller.user_id)
    return map_assignments_to_response(assignments)


@router.get(
    "/{assignment_id}",
    response_model=AssignmentResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Caller not entitled"},
        404: {"model": ErrorResponse, "description": "Assignment not found or course unpublished"},
    },
)
@handle_domain_errors
async def get_assignment(
    assignment_id: UUID,
    caller: Caller = Depends(get_caller),
    assignment_service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """
    Get single assignment. Access follows the parent course.

    Raises:
        HTTPException(404): Assignment not found or course unpublished
        HTTPException(403): Caller not entitled (reason in detail)
    """
    assignment = await assignment_service.get_assignment(assignment_id, caller)
    return map_assignment_to_response(assignment)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
@handle_domain_errors
async def update_assignment(
    assignment_id: UUID,
    request: UpdateAssignmentRequest,
    caller: Caller = Depends(require_instructor),
    assignment_service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentResponse:
    """
    Update an owned assignment. Omitted fields are left unchanged.

    Raises:
        HTTPException(400): Empty update or invalid values
        HTTPException(403): Assignment belongs to another instructor
        HTTPException(404): Assignment not found
    """
    validate_assignment_update(request)

    assignment = await assignment_service.update_assignment(
        assignment_id=assignment_id,
        instructor_id=caller.user_id,
        title=request.title.strip() if request.title is not None else None,
        description=request.description,
        submission_type=request.submission_type,
        deadline=request.deadline,
    )
    return map_assignment_to_response(assignment)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_domain_errors
async def delete_assignment(
    assignment_id: UUID,
    caller: Caller = Depends(require_instructor),
    assignment_service: AssignmentService = Depends(get_assignment_service),
) -> Response:
    """
    Delete an owned assignment.

    Raises:
        HTTPException(403): Assignment belongs to another instructor
        HTTPException(404): Assignment not found
    """
    await assignment_service.delete_assignment(assignment_id, caller.user_id)

    logger.info(
        "Assignment deleted",
        extra={"assignment_id": str(assignment_id), "instructor_id": str(caller.user_id)},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
