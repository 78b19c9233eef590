"""
Test suite for BaseCRUD generic database operations.

Tests basic CRUD functionality: create, read (by ID and all), update, delete, exists.
Uses AsyncMock sessions to verify query behavior without a database.

System role: Verification of generic database layer foundation
"""

import uuid
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.boundary.db.CRUD.base_crud import BaseCRUD
from marketplace.boundary.db.models.user_model import UserModel, UserRole


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD bound to the user model."""
    return BaseCRUD(UserModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def sample_id() -> uuid.UUID:
    """Provide sample UUID for testing."""
    return uuid.uuid4()


def scalar_result(value: Any) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=value)
    return result


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    @pytest.mark.asyncio
    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh to ensure ID generation."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.add = MagicMock()
        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        user = await base_crud.create(
            mock_session,
            email="a@example.com",
            first_name="Ada",
            last_name="Lovelace",
            role=UserRole.INSTRUCTOR,
        )

        # Assert
        assert call_order == ["flush", "refresh"]
        assert user.email == "a@example.com"
        mock_session.add.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_create_should_not_commit(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test create leaves the transaction to the caller."""
        mock_session.add = MagicMock()

        await base_crud.create(mock_session, email="b@example.com")

        mock_session.commit.assert_not_called()


class TestBaseCRUDReads:
    """Test suite for get_by_id() and exists()."""

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_model_when_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        # Arrange
        instance = MagicMock(id=sample_id)
        mock_session.execute = AsyncMock(return_value=scalar_result(instance))

        # Act
        result = await base_crud.get_by_id(mock_session, sample_id)

        # Assert
        assert result is instance
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_when_not_found(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_session.execute = AsyncMock(return_value=scalar_result(None))

        assert await base_crud.get_by_id(mock_session, sample_id) is None

    @pytest.mark.asyncio
    async def test_exists_reflects_query_result(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_session.execute = AsyncMock(return_value=scalar_result(sample_id))
        assert await base_crud.exists(mock_session, sample_id) is True

        mock_session.execute = AsyncMock(return_value=scalar_result(None))
        assert await base_crud.exists(mock_session, sample_id) is False


class TestBaseCRUDWrites:
    """Test suite for update_by_id() and delete_by_id()."""

    @pytest.mark.asyncio
    async def test_update_by_id_should_return_updated_model(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        updated = MagicMock(id=sample_id)
        mock_session.execute = AsyncMock(return_value=scalar_result(updated))

        result = await base_crud.update_by_id(mock_session, sample_id, first_name="Grace")

        assert result is updated

    @pytest.mark.asyncio
    async def test_delete_by_id_uses_rowcount(
        self, base_crud: BaseCRUD, mock_session: AsyncSession, sample_id: uuid.UUID
    ) -> None:
        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=1))
        assert await base_crud.delete_by_id(mock_session, sample_id) is True

        mock_session.execute = AsyncMock(return_value=MagicMock(rowcount=0))
        assert await base_crud.delete_by_id(mock_session, sample_id) is False
