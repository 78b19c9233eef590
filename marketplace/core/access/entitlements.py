"""
Entitlement lookup.

Answers "has student S paid for / enrolled in course C". The two facts are
queried separately and never derived from one another.

Dependencies: sqlalchemy, marketplace.boundary.db.CRUD
System role: Read side of the authorization flow
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.CRUD.enrollment_crud import enrollment_crud
from marketplace.boundary.db.CRUD.payment_crud import payment_crud
from marketplace.core.access.decisions import Entitlement


class EntitlementLookup:
    """Payment and enrollment queries for a (student, course) pair."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def has_completed_payment(self, student_id: UUID, course_id: UUID) -> bool:
        """True iff a payment with status exactly COMPLETED exists."""
        payment = await payment_crud.get_completed_for(self.db, student_id, course_id)
        return payment is not None

    async def is_enrolled(self, student_id: UUID, course_id: UUID) -> bool:
        """True iff the enrollment row for the pair exists."""
        enrollment = await enrollment_crud.get_by_student_and_course(
            self.db, student_id, course_id
        )
        return enrollment is not None

    async def lookup(self, student_id: UUID, course_id: UUID) -> Entitlement:
        """
        Collect both entitlement facts.

        The queries run one after the other: an AsyncSession cannot
        execute statements concurrently.

        Args:
            student_id: Student UUID
            course_id: Course UUID

        Returns:
            Entitlement with has_completed_payment and is_enrolled
        """
        paid = await self.has_completed_payment(student_id, course_id)
        enrolled = await self.is_enrolled(student_id, course_id)
        return Entitlement(has_completed_payment=paid, is_enrolled=enrolled)
