"""
Admin API endpoints.

Routes:
- POST /admin/courses/bulk - Apply a typed bulk operation to a batch of courses

Dependencies: marketplace.application.services, marketplace.models.bulk_operations
System role: Admin HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from marketplace.api.deps.dependencies import get_bulk_operations_service, require_admin
from marketplace.application.services.bulk_operations_service import BulkOperationsService
from marketplace.core.access import Caller
from marketplace.models.bulk_operations import BulkCourseOperation, BulkOperationResult

from ..router_utils import handle_domain_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


class BulkCourseOperationRequest(BaseModel):
    """Request body wrapping one bulk course operation."""

    operation: BulkCourseOperation


@router.post("/courses/bulk", response_model=BulkOperationResult)
@handle_domain_errors
async def bulk_course_operation(
    request: BulkCourseOperationRequest,
    caller: Caller = Depends(require_admin),
    bulk_service: BulkOperationsService = Depends(get_bulk_operations_service),
) -> BulkOperationResult:
    """
    Publish, unpublish, delete or reprice a batch of courses.

    Unknown course IDs are reported under `failed`; the rest are applied
    together.

    Raises:
        HTTPException(401): Anonymous caller
        HTTPException(403): Caller is not an admin
        HTTPException(422): Unknown action or malformed payload
    """
    operation = request.operation

    logger.info(
        "Admin bulk course operation requested",
        extra={
            "admin_id": str(caller.user_id),
            "action": operation.action,
            "count": len(operation.course_ids),
        },
    )

    result = await bulk_service.execute(operation)
    return BulkOperationResult(**result)
