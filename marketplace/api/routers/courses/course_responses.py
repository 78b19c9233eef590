"""
Course response mapping utilities.

Transforms service-layer dictionaries into Pydantic response models.

Dependencies: marketplace.models
System role: Course response transformation
"""

from typing import Any

from marketplace.models.assignment import AssignmentResponse
from marketplace.models.course import CourseResponse
from marketplace.models.enrollment import EnrollmentResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    """Transform list of course dictionaries into list of CourseResponse."""
    return [map_course_to_response(course) for course in courses_data]


def map_course_assignments_to_response(
    assignments_data: list[dict[str, Any]],
) -> list[AssignmentResponse]:
    """Transform a course's assignment dictionaries into AssignmentResponse models."""
    return [AssignmentResponse(**assignment) for assignment in assignments_data]


def map_enrollment_to_response(enrollment_data: dict[str, Any]) -> EnrollmentResponse:
    """Transform enrollment data dictionary into EnrollmentResponse."""
    return EnrollmentResponse(**enrollment_data)
