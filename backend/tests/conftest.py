"""Pytest configuration and shared fixtures."""

import os

# Keep tests away from a real database and noisy logs
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "warning")

from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from domain.entities import Todo, User  # noqa: E402
from domain.enums import TodoStatus  # noqa: E402
from domain.repositories import ITodoRepository, IUserRepository  # noqa: E402
from domain.value_objects import (  # noqa: E402
    Email,
    TodoBody,
    TodoId,
    TodoTitle,
    UserId,
    Username,
)
from infrastructure.config import Logger  # noqa: E402
from infrastructure.database import Base  # noqa: E402
from presentation.api.v1.dependencies import get_db_session  # noqa: E402
from presentation.app import create_app  # noqa: E402


TODO_ID = "018e8c6a-4e5f-7b9d-8c2a-3f1e4d5c6b7a"
USER_ID = "018e8c6a-1111-7b9d-8c2a-3f1e4d5c6b7a"
CREATED_AT = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def user_id():
    """Fixture for a fixed user identifier."""
    return UserId.from_value(USER_ID)


@pytest.fixture
def stored_todo(user_id):
    """Fixture for a todo as it would come back from storage."""
    return Todo.reconstruct(
        id=TodoId.from_value(TODO_ID),
        user_id=user_id,
        title=TodoTitle.from_value("Write report"),
        body=TodoBody.from_value("Quarterly numbers"),
        status=TodoStatus.IN_PROGRESS,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture
def stored_user(user_id):
    """Fixture for a user as it would come back from storage."""
    return User.reconstruct(
        id=user_id,
        email=Email.from_value("Taro@Example.com"),
        name=Username.from_value("taro_yamada"),
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture
def todo_repository():
    """Fixture for a mocked todo repository port."""
    return AsyncMock(spec=ITodoRepository)


@pytest.fixture
def user_repository():
    """Fixture for a mocked user repository port."""
    return AsyncMock(spec=IUserRepository)


@pytest.fixture
def mock_logger():
    """Fixture for a logger whose calls can be inspected."""
    return MagicMock(spec=Logger)


@pytest.fixture
async def test_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """HTTP client for the app, backed by the per-test SQLite database."""
    async def override_get_db_session():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
