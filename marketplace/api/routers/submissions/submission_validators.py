"""
Submission validation utilities.

Business logic validation not covered by Pydantic models. Whether the URL
matches the assignment's submission type is checked by the service.

Dependencies: marketplace.models.submission, marketplace.core.exceptions
System role: Submission business logic validation
"""

from marketplace.boundary.db.models.assignment_model import SubmissionType
from marketplace.core.exceptions import ValidationError
from marketplace.models.submission import CreateSubmissionRequest

ALLOWED_LINK_SCHEMES = ("http://", "https://")


def validate_submission_creation(request: CreateSubmissionRequest) -> None:
    """
    Validate submission request with business rules.

    Raises:
        ValidationError: Whitespace-only URL or link without http(s) scheme
    """
    if request.file_url is not None and not request.file_url.strip():
        raise ValidationError("File URL cannot be empty or whitespace-only", field="file_url")

    if request.submission_type == SubmissionType.LINK and request.link_url is not None:
        if not request.link_url.strip().lower().startswith(ALLOWED_LINK_SCHEMES):
            raise ValidationError("Link URL must start with http:// or https://", field="link_url")
