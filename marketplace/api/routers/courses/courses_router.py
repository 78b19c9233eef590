"""
Course API endpoints.

Routes:
- GET /courses - Public catalogue of published courses, newest first
- POST /courses - Create new course (instructor)
- GET /courses/mine - List the caller's own courses (instructor)
- GET /courses/{id} - Get single course (access-gated)
- PUT /courses/{id} - Update course details (owner)
- DELETE /courses/{id} - Delete course with its assignments and enrollments (owner)
- PATCH /courses/{id}/publish - Toggle publish flag (owner)
- GET /courses/{id}/assignments - List course assignments (access-gated)
- POST /courses/{id}/enroll - Enroll in course (student)

Dependencies: marketplace.application.services, marketplace.models
System role: Course HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from marketplace.api.deps.dependencies import (
    get_caller,
    get_course_service,
    get_enrollment_service,
    require_instructor,
    require_student,
)
from marketplace.application.services.course_service import CourseService, course_to_dict
from marketplace.application.services.enrollment_service import EnrollmentService
from marketplace.core.access import Caller
from marketplace.models.assignment import AssignmentResponse
from marketplace.models.common import ErrorResponse
from marketplace.models.course import (
    CourseResponse,
    CreateCourseRequest,
    PublishCourseRequest,
    UpdateCourseRequest,
)
from marketplace.models.enrollment import EnrollmentResponse

from ..router_utils import handle_domain_errors
from .course_responses import (
    map_course_assignments_to_response,
    map_course_to_response,
    map_courses_to_response,
    map_enrollment_to_response,
)
from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])

GATED_RESPONSES = {
    403: {"model": ErrorResponse, "description": "Caller not entitled"},
    404: {"model": ErrorResponse, "description": "Course not found or unpublished"},
}


@router.get("", response_model=list[CourseResponse])
@handle_domain_errors
async def list_courses(
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List the public catalogue: published courses, newest first."""
    courses = await course_service.get_published_courses()
    return map_courses_to_response(courses)


@router.post("", response_model=CourseResponse, status_code=201)
@handle_domain_errors
async def create_course(
    request: CreateCourseRequest,
    caller: Caller = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new unpublished course owned by the caller.

    Raises:
        HTTPException(400): Invalid request
        HTTPException(401/403): Not an authenticated instructor
    """
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"instructor_id": str(caller.user_id), "pricing": str(request.pricing)},
    )

    course_id = await course_service.create_course(
        instructor_id=caller.user_id,
        title=request.title.strip(),
        description=request.description,
        pricing=request.pricing,
        currency=request.currency,
    )
    course = await course_service.get_owned_course(course_id, caller.user_id)

    return map_course_to_response(course_to_dict(course))


@router.get("/mine", response_model=list[CourseResponse])
@handle_domain_errors
async def list_my_courses(
    caller: Caller = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List every course the calling instructor owns, drafts included."""
    courses = await course_service.get_instructor_courses(caller.user_id)
    return map_courses_to_response(courses)


@router.get("/{course_id}", response_model=CourseResponse, responses=GATED_RESPONSES)
@handle_domain_errors
async def get_course(
    course_id: UUID,
    caller: Caller = Depends(get_caller),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Raises:
        HTTPException(404): Course not found or unpublished
        HTTPException(403): Caller not entitled (reason in detail)
    """
    course_data = await course_service.get_course(course_id, caller)
    return map_course_to_response(course_data)


@router.put("/{course_id}", response_model=CourseResponse)
@handle_domain_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    caller: Caller = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Update details of a course the caller owns. Omitted fields are left unchanged.

    Raises:
        HTTPException(400): Empty update or invalid values
        HTTPException(403): Caller does not own the course
        HTTPException(404): Course not found
    """
    validate_course_update(request)

    course_data = await course_service.update_course(
        course_id=course_id,
        instructor_id=caller.user_id,
        title=request.title.strip() if request.title is not None else None,
        description=request.description,
        pricing=request.pricing,
        currency=request.currency,
    )
    return map_course_to_response(course_data)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_domain_errors
async def delete_course(
    course_id: UUID,
    caller: Caller = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> Response:
    """
    Delete a course the caller owns, along with its assignments and enrollments.

    Raises:
        HTTPException(403): Caller does not own the course
        HTTPException(404): Course not found
    """
    await course_service.delete_course(course_id, caller.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{course_id}/publish", response_model=CourseResponse)
@handle_domain_errors
async def set_course_published(
    course_id: UUID,
    request: PublishCourseRequest,
    caller: Caller = Depends(require_instructor),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Publish or unpublish a course the caller owns.

    Raises:
        HTTPException(404): Course not found
        HTTPException(403): Caller does not own the course
    """
    course_data = await course_service.set_published(
        course_id=course_id,
        instructor_id=caller.user_id,
        is_published=request.is_published,
    )
    return map_course_to_response(course_data)


@router.get(
    "/{course_id}/assignments",
    response_model=list[AssignmentResponse],
    responses=GATED_RESPONSES,
)
@handle_domain_errors
async def list_course_assignments(
    course_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    caller: Caller = Depends(get_caller),
    course_service: CourseService = Depends(get_course_service),
) -> list[AssignmentResponse]:
    """
    List a course's assignments, earliest deadline first.

    Raises:
        HTTPException(404): Course not found or unpublished
        HTTPException(403): Caller not entitled (reason in detail)
    """
    assignments = await course_service.get_course_assignments(
        course_id, caller, limit=limit, offset=offset
    )

    logger.info(
        "Course assignments retrieved",
        extra={"course_id": str(course_id), "count": len(assignments)},
    )

    return map_course_assignments_to_response(assignments)


@router.post("/{course_id}/enroll", response_model=EnrollmentResponse, status_code=201)
@handle_domain_errors
async def enroll_in_course(
    course_id: UUID,
    caller: Caller = Depends(require_student),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """
    Enroll the calling student in a course.

    Raises:
        HTTPException(404): Course not found
        HTTPException(400): Course not published
        HTTPException(403): Paid course without completed payment
        HTTPException(409): Already enrolled
    """
    enrollment = await enrollment_service.enroll_student(course_id, caller.user_id)
    return map_enrollment_to_response(enrollment)
