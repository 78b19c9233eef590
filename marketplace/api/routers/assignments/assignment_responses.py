"""
Assignment response mapping utilities.

Dependencies: marketplace.models.assignment
System role: Assignment response transformation
"""

from typing import Any

from marketplace.models.assignment import AssignmentResponse


def map_assignment_to_response(assignment_data: dict[str, Any]) -> AssignmentResponse:
    """Transform assignment data dictionary into AssignmentResponse."""
    return AssignmentResponse(**assignment_data)


def map_assignments_to_response(
    assignments_data: list[dict[str, Any]],
) -> list[AssignmentResponse]:
    """Transform list of assignment dictionaries into list of AssignmentResponse."""
    return [map_assignment_to_response(assignment) for assignment in assignments_data]
