"""
Access service orchestrator.

Runs one authorization check: fetch the resource, look up entitlements for
student callers, then evaluate the policy.

Dependencies: marketplace.core.access
System role: Authorization use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.models.user_model import UserRole
from marketplace.core.access import (
    AccessDecision,
    AccessTarget,
    Caller,
    EntitlementLookup,
    Forbidden,
    Granted,
    NotFound,
    ResourceFetcher,
    ResourceType,
    evaluate_access,
)
from marketplace.core.exceptions import AccessForbiddenError, ResourceNotFoundError
from marketplace.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class AccessService:
    """Authorization orchestrator. Read-only and stateless between calls."""

    def __init__(
        self,
        db: AsyncSession,
        owner_bypasses_publish_gate: bool = False,
        fetcher: ResourceFetcher | None = None,
        entitlements: EntitlementLookup | None = None,
    ) -> None:
        """
        Initialize access service.

        Args:
            db: Async SQLAlchemy session
            owner_bypasses_publish_gate: Policy flag forwarded to the evaluator
            fetcher: Resource fetcher (defaults to one bound to db)
            entitlements: Entitlement lookup (defaults to one bound to db)
        """
        self.db = db
        self.owner_bypasses_publish_gate = owner_bypasses_publish_gate
        self.fetcher = fetcher or ResourceFetcher(db)
        self.entitlements = entitlements or EntitlementLookup(db)

    async def check_access(
        self,
        resource_type: ResourceType,
        resource_id: UUID,
        caller: Caller,
    ) -> tuple[AccessDecision, AccessTarget | None]:
        """
        Decide whether caller may read a resource.

        Entitlements are only queried for student callers of a visible
        resource; every other path is decided from the resource alone.

        Args:
            resource_type: COURSE or ASSIGNMENT
            resource_id: Resource UUID
            caller: Requesting identity

        Returns:
            tuple: (decision, target); target is None when nothing was found
        """
        target = await self.fetcher.fetch(resource_type, resource_id)

        entitlement = None
        if (
            target is not None
            and target.is_published
            and caller.role == UserRole.STUDENT.value
            and caller.user_id is not None
        ):
            entitlement = await self.entitlements.lookup(caller.user_id, target.course_id)

        decision = evaluate_access(
            target,
            caller,
            entitlement,
            owner_bypasses_publish_gate=self.owner_bypasses_publish_gate,
        )

        if not isinstance(decision, Granted):
            log_with_context(
                logger,
                logging.INFO,
                "Access denied",
                resource_type=resource_type,
                resource_id=resource_id,
                caller_id=caller.user_id,
                caller_role=caller.role,
                decision=type(decision).__name__,
                reason=decision.reason if isinstance(decision, Forbidden) else None,
            )

        return decision, target

    async def require_access(
        self,
        resource_type: ResourceType,
        resource_id: UUID,
        caller: Caller,
    ) -> AccessTarget:
        """
        Like check_access, but raise for anything other than Granted.

        Returns:
            AccessTarget: The granted resource

        Raises:
            ResourceNotFoundError: Decision was NotFound
            AccessForbiddenError: Decision was Forbidden (reason as message)
        """
        decision, target = await self.check_access(resource_type, resource_id, caller)

        if isinstance(decision, NotFound) or target is None:
            raise ResourceNotFoundError(resource_type.value, resource_id)
        if isinstance(decision, Forbidden):
            raise AccessForbiddenError(
                decision.reason.value,
                {"resource_type": resource_type.value, "resource_id": str(resource_id)},
            )
        return target
