"""
Assignments router package.

Exports the router for assignment management endpoints.
"""

from .assignments_router import router

__all__ = ["router"]
