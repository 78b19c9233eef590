"""API routers."""

from .admin import router as admin_router
from .assignments import router as assignments_router
from .courses import router as courses_router
from .health import router as health_router
from .students import router as students_router
from .submissions import router as submissions_router

__all__ = [
    "admin_router",
    "assignments_router",
    "courses_router",
    "health_router",
    "students_router",
    "submissions_router",
]
