"""Course API router package."""

from .courses_router import router

__all__ = ["router"]
