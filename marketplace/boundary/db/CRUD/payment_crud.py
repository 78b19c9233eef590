"""
Payment CRUD operations.

Dependencies: sqlalchemy, marketplace.boundary.db.models
System role: Payment persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.models.payment_model import PaymentModel, PaymentStatus
from marketplace.boundary.db.CRUD.base_crud import BaseCRUD


class PaymentCRUD(BaseCRUD[PaymentModel]):
    """CRUD operations for PaymentModel."""

    def __init__(self) -> None:
        super().__init__(PaymentModel)

    async def get_completed_for(
        self,
        session: AsyncSession,
        student_id: UUID,
        course_id: UUID,
    ) -> PaymentModel | None:
        """
        Retrieve one completed payment for a (student, course) pair.

        Pending, failed and refunded rows are ignored.

        Args:
            session: Async database session
            student_id: Student UUID
            course_id: Course UUID

        Returns:
            A completed PaymentModel, None if there is none
        """
        stmt = (
            select(PaymentModel)
            .where(
                PaymentModel.student_id == student_id,
                PaymentModel.course_id == course_id,
                PaymentModel.status == PaymentStatus.COMPLETED,
            )
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


payment_crud = PaymentCRUD()
