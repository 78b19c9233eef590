"""
Resource access authorization.

Exports the decision types, the pure policy evaluator, and the two
read-only collaborators that feed it.
"""

from marketplace.core.access.decisions import (
    ANONYMOUS,
    NO_ENTITLEMENT,
    AccessDecision,
    AccessTarget,
    Caller,
    DenialReason,
    Entitlement,
    Forbidden,
    Granted,
    NotFound,
    ResourceType,
)
from marketplace.core.access.entitlements import EntitlementLookup
from marketplace.core.access.policy import evaluate_access, is_owner
from marketplace.core.access.resource_fetcher import ResourceFetcher

__all__ = [
    "ANONYMOUS",
    "NO_ENTITLEMENT",
    "AccessDecision",
    "AccessTarget",
    "Caller",
    "DenialReason",
    "Entitlement",
    "EntitlementLookup",
    "Forbidden",
    "Granted",
    "NotFound",
    "ResourceFetcher",
    "ResourceType",
    "evaluate_access",
    "is_owner",
]
