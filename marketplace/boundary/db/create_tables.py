"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, marketplace.configs
System role: Database schema initialization

Usage:
    python -m marketplace.boundary.db.create_tables
"""

import asyncio
import logging

from marketplace.boundary.db.base import Base
from marketplace.boundary.db.connection import get_async_engine
from marketplace.configs import get_settings
from marketplace.observability import configure_logging

# Import all models to register them with Base.metadata
from marketplace.boundary.db.models.user_model import UserModel  # noqa: F401
from marketplace.boundary.db.models.course_model import CourseModel  # noqa: F401
from marketplace.boundary.db.models.assignment_model import AssignmentModel  # noqa: F401
from marketplace.boundary.db.models.enrollment_model import EnrollmentModel  # noqa: F401
from marketplace.boundary.db.models.payment_model import PaymentModel  # noqa: F401
from marketplace.boundary.db.models.submission_model import SubmissionModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails

    Usage:
        python -m marketplace.boundary.db.create_tables
        # Or in code:
        await create_all_tables()
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Database tables created",
        extra={"tables": sorted(Base.metadata.tables)},
    )


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All database tables dropped")


async def _main() -> None:
    configure_logging(get_settings().log_level)
    try:
        await create_all_tables()
    finally:
        await get_async_engine().dispose()


if __name__ == "__main__":
    asyncio.run(_main())
