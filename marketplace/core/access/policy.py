"""
Access policy evaluator.

Single decision point for "may this caller read this resource". Pure
function of the resource snapshot, the caller, and (for students) the
entitlement facts. Performs no I/O.

Rules are evaluated top to bottom and the first match wins:
  1. missing resource                        -> NotFound
  2. unpublished course                      -> NotFound
  3. instructor, not the owner               -> Forbidden(not your course)
  4. instructor, owner                       -> Granted
  5. student: paid course without payment    -> Forbidden(payment required)
              no enrollment row              -> Forbidden(not enrolled)
              otherwise                      -> Granted
  6. any other role, or anonymous            -> Forbidden(authentication required)

Dependencies: marketplace.core.access.decisions, marketplace.boundary.db.models
System role: Authorization core
"""

from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.access.decisions import (
    NO_ENTITLEMENT,
    AccessDecision,
    AccessTarget,
    Caller,
    DenialReason,
    Entitlement,
    Forbidden,
    Granted,
    NotFound,
)


def is_owner(target: AccessTarget, caller: Caller) -> bool:
    """True when an instructor-role caller owns the target's course."""
    return (
        caller.role == UserRole.INSTRUCTOR.value
        and caller.user_id is not None
        and caller.user_id == target.instructor_id
    )


def evaluate_access(
    target: AccessTarget | None,
    caller: Caller,
    entitlement: Entitlement | None = None,
    *,
    owner_bypasses_publish_gate: bool = False,
) -> AccessDecision:
    """
    Decide whether a caller may read a course or assignment.

    Args:
        target: Resource snapshot, None when the fetcher found nothing
        caller: Requesting identity
        entitlement: Payment/enrollment facts; only consulted for students,
            missing means no payment and no enrollment
        owner_bypasses_publish_gate: Let the owning instructor past rule 2

    Returns:
        AccessDecision: Granted, NotFound or Forbidden(reason)
    """
    if target is None:
        return NotFound()

    if not target.is_published:
        if not (owner_bypasses_publish_gate and is_owner(target, caller)):
            return NotFound()

    if caller.role == UserRole.INSTRUCTOR.value:
        if caller.user_id != target.instructor_id:
            return Forbidden(DenialReason.NOT_YOUR_COURSE)
        return Granted()

    if caller.role == UserRole.STUDENT.value and caller.user_id is not None:
        facts = entitlement or NO_ENTITLEMENT
        if target.pricing > 0 and not facts.has_completed_payment:
            return Forbidden(DenialReason.PAYMENT_REQUIRED)
        if not facts.is_enrolled:
            return Forbidden(DenialReason.NOT_ENROLLED)
        return Granted()

    return Forbidden(DenialReason.AUTHENTICATION_REQUIRED)
