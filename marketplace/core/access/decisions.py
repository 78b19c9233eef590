"""
Access decision data classes.

Pure data containers shared by the fetcher, entitlement lookup and policy
evaluator:
- Caller: identity and role of the requester
- AccessTarget: requested resource plus the parent course fields the policy reads
- Entitlement: payment/enrollment facts for a (student, course) pair
- Granted / NotFound / Forbidden: the three possible decisions
"""

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union
from uuid import UUID


class ResourceType(str, enum.Enum):
    """Kinds of resource the access policy can gate."""

    COURSE = "course"
    ASSIGNMENT = "assignment"


class DenialReason(str, enum.Enum):
    """Why a visible resource was refused. Values are shown to callers."""

    NOT_YOUR_COURSE = "not your course"
    PAYMENT_REQUIRED = "payment required"
    NOT_ENROLLED = "not enrolled"
    AUTHENTICATION_REQUIRED = "authentication required"


@dataclass(frozen=True)
class Caller:
    """Requesting identity. Both fields are None for anonymous callers."""

    user_id: UUID | None = None
    role: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and self.role is not None


ANONYMOUS = Caller()


@dataclass(frozen=True)
class AccessTarget:
    """
    Resource snapshot handed to the evaluator.

    Course fields always come from the parent course, also for assignments.
    """

    resource_type: ResourceType
    resource_id: UUID
    course_id: UUID
    instructor_id: UUID
    is_published: bool
    pricing: Decimal
    entity: Any = None


@dataclass(frozen=True)
class Entitlement:
    """Payment and enrollment facts, computed independently of each other."""

    has_completed_payment: bool = False
    is_enrolled: bool = False


NO_ENTITLEMENT = Entitlement()


@dataclass(frozen=True)
class Granted:
    """Caller may read the resource."""

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """Resource is absent, or hidden from this caller."""

    @property
    def allowed(self) -> bool:
        return False


@dataclass(frozen=True)
class Forbidden:
    """Resource is visible but the caller's role or entitlement is insufficient."""

    reason: DenialReason

    @property
    def allowed(self) -> bool:
        return False


AccessDecision = Union[Granted, NotFound, Forbidden]
