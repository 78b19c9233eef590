"""
Course validation utilities.

Business logic validation not covered by Pydantic models.

Dependencies: marketplace.models.course, marketplace.core.exceptions
System role: Course business logic validation
"""

from marketplace.core.exceptions import ValidationError
from marketplace.models.course import CreateCourseRequest, UpdateCourseRequest


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request with business rules.

    Args:
        request: CreateCourseRequest with title, description, pricing, currency

    Raises:
        ValidationError: If business validation fails
    """
    if not request.title.strip():
        raise ValidationError("Course title cannot be empty or whitespace-only", field="title")

    if len(request.title.strip()) < 2:
        raise ValidationError("Course title must be at least 2 characters", field="title")

    if not request.currency.isalpha():
        raise ValidationError("Currency must be a 3-letter code", field="currency")


def validate_course_update(request: UpdateCourseRequest) -> None:
    """
    Validate course update request.

    Raises:
        ValidationError: No field supplied, or invalid values
    """
    if not request.model_fields_set:
        raise ValidationError("At least one field must be provided for update")

    if request.title is not None and len(request.title.strip()) < 2:
        raise ValidationError("Course title must be at least 2 characters", field="title")

    if request.currency is not None and not request.currency.isalpha():
        raise ValidationError("Currency must be a 3-letter code", field="currency")
