from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from marketplace.boundary.db import get_async_db


def override_db(session):
    async def _db():
        yield session

    return _db


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client):
    session = AsyncMock()
    client.app.dependency_overrides[get_async_db] = override_db(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    session.execute.assert_awaited_once()


def test_health_check_db_unreachable(client):
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    client.app.dependency_overrides[get_async_db] = override_db(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database connection failed"}


def test_correlation_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})

    assert response.headers["X-Correlation-ID"] == "req-123"
