"""
Students router package.

Exports the router for a student's own enrollments and submissions.
"""

from .students_router import router

__all__ = ["router"]
