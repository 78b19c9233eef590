"""
Submissions router package.

Exports the router for assignment hand-ins.
"""

from .submissions_router import router

__all__ = ["router"]
