"""
Submission response mapping utilities.

Dependencies: marketplace.models
System role: Submission response transformation
"""

from typing import Any

from marketplace.models.submission import SubmissionResponse


def map_submission_to_response(submission_data: dict[str, Any]) -> SubmissionResponse:
    """Transform submission data dictionary into SubmissionResponse."""
    return SubmissionResponse(**submission_data)


def map_submissions_to_response(
    submissions_data: list[dict[str, Any]],
) -> list[SubmissionResponse]:
    """Transform list of submission dictionaries into list of SubmissionResponse."""
    return [map_submission_to_response(s) for s in submissions_data]
