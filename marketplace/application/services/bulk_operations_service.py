"""
Admin bulk course operations.

Applies one typed operation (publish, unpublish, delete, reprice) to a batch
of courses. IDs that do not match a course are reported as failures; the
rest are applied in a single transaction.

Dependencies: marketplace.boundary.db.CRUD, marketplace.models.bulk_operations
System role: Admin catalogue maintenance
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.CRUD.course_crud import course_crud
from marketplace.models.bulk_operations import (
    BulkCourseOperation,
    DeleteCoursesOperation,
    PublishCoursesOperation,
    RepriceCoursesOperation,
    UnpublishCoursesOperation,
)

logger = logging.getLogger(__name__)


class BulkOperationsService:
    """Bulk course operation executor."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def execute(self, operation: BulkCourseOperation) -> dict:
        """
        Apply an operation to its course batch.

        Args:
            operation: Validated operation model

        Returns:
            dict: action, successful ids, failed entries, total
        """
        requested = list(dict.fromkeys(operation.course_ids))
        existing = await course_crud.get_existing_ids(self.db, requested)
        targets = [course_id for course_id in requested if course_id in existing]
        failed = [
            {"course_id": course_id, "error": "Course not found"}
            for course_id in requested
            if course_id not in existing
        ]

        try:
            if isinstance(operation, PublishCoursesOperation):
                await course_crud.update_many(self.db, targets, is_published=True)
            elif isinstance(operation, UnpublishCoursesOperation):
                await course_crud.update_many(self.db, targets, is_published=False)
            elif isinstance(operation, RepriceCoursesOperation):
                await course_crud.update_many(self.db, targets, pricing=operation.pricing)
            elif isinstance(operation, DeleteCoursesOperation):
                await course_crud.delete_many(self.db, targets)
            else:
                raise TypeError(f"Unsupported bulk operation: {type(operation).__name__}")
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Bulk course operation failed",
                extra={"action": operation.action, "error": str(e), "count": len(targets)},
            )
            raise

        logger.info(
            "Bulk course operation applied",
            extra={
                "action": operation.action,
                "successful": len(targets),
                "failed": len(failed),
            },
        )
        return {
            "action": operation.action,
            "successful": targets,
            "failed": failed,
            "total": len(requested),
        }
