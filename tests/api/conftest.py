"""
API test fixtures.

Provides: TestClient over a fresh app, and bearer headers for each role.
Dependencies: fastapi, marketplace.core.tokens
System role: Router test infrastructure
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from marketplace.api.main import create_app
from marketplace.core.tokens import create_access_token


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


def bearer(user_id: uuid.UUID, role: str) -> dict[str, str]:
    """Authorization header for a signed token."""
    return {"Authorization": f"Bearer {create_access_token(user_id, role)}"}


@pytest.fixture
def instructor_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def student_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def instructor_headers(instructor_id) -> dict[str, str]:
    return bearer(instructor_id, "instructor")


@pytest.fixture
def student_headers(student_id) -> dict[str, str]:
    return bearer(student_id, "student")


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(uuid.uuid4(), "admin")
