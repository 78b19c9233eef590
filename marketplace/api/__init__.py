"""
API routes module.

FastAPI app factory, dependency container and routers for all HTTP endpoints.
"""
