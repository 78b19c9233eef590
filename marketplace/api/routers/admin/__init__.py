"""
Admin router package.

Exports the router for admin-only endpoints.
"""

from .admin_router import router

__all__ = ["router"]
