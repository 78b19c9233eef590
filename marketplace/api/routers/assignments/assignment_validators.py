"""
Assignment validation utilities.

Dependencies: marketplace.models.assignment, marketplace.core.exceptions
System role: Assignment business logic validation
"""

from datetime import datetime, timezone

from marketplace.core.exceptions import ValidationError
from marketplace.models.assignment import CreateAssignmentRequest, UpdateAssignmentRequest


def _as_aware(value: datetime) -> datetime:
    # Naive datetimes from clients are read as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_deadline(deadline: datetime) -> datetime:
    """
    Ensure a deadline lies in the future.

    Returns:
        datetime: Timezone-aware deadline

    Raises:
        ValidationError: Deadline is not after now
    """
    deadline = _as_aware(deadline)
    if deadline <= datetime.now(timezone.utc):
        raise ValidationError("Deadline must be in the future", field="deadline")
    return deadline


def validate_assignment_creation(request: CreateAssignmentRequest) -> None:
    """
    Validate assignment creation request with business rules.

    Raises:
        ValidationError: If business validation fails
    """
    if not request.title.strip():
        raise ValidationError("Assignment title cannot be empty or whitespace-only", field="title")
    validate_deadline(request.deadline)


def validate_assignment_update(request: UpdateAssignmentRequest) -> None:
    """
    Validate assignment update request.

    Raises:
        ValidationError: No field supplied, or invalid values
    """
    if not request.model_fields_set:
        raise ValidationError("At least one field must be provided for update")

    if request.title is not None and not request.title.strip():
        raise ValidationError("Assignment title cannot be empty or whitespace-only", field="title")

    if request.deadline is not None:
        validate_deadline(request.deadline)
