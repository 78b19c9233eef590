"""
Test suite for the domain exception hierarchy.

System role: Verification of error messages surfaced to callers
"""

import uuid

from marketplace.core.exceptions import (
    AccessForbiddenError,
    AlreadyEnrolledError,
    MarketplaceException,
    ResourceNotFoundError,
    ValidationError,
)


def test_not_found_message_names_resource() -> None:
    resource_id = uuid.uuid4()

    error = ResourceNotFoundError("assignment", resource_id)

    assert error.message == "Assignment not found"
    assert error.details["resource_id"] == str(resource_id)
    assert isinstance(error, MarketplaceException)


def test_forbidden_carries_reason() -> None:
    error = AccessForbiddenError("payment required", {"course_id": "abc"})

    assert error.reason == "payment required"
    assert error.message == "payment required"
    assert str(error) == "payment required | Details: {'course_id': 'abc'}"


def test_validation_error_records_field() -> None:
    error = ValidationError("Deadline must be in the future", field="deadline")

    assert error.details == {"field": "deadline"}


def test_already_enrolled_message() -> None:
    error = AlreadyEnrolledError(uuid.uuid4())

    assert error.message == "You are already enrolled in this course"
