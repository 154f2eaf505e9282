"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from tubetalk.auth.context import AuthContext
from tubetalk.auth.factory import get_auth_adapter_cached
from tubetalk.dbmodels import Base, Users

TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def jwt_secret(reset_environment: None) -> Generator[str, None, None]:
    """Sign tokens with a known secret and drop the cached adapter around each test."""
    os.environ["TUBETALK_JWT_SECRET"] = TEST_JWT_SECRET
    get_auth_adapter_cached.cache_clear()
    yield TEST_JWT_SECRET
    get_auth_adapter_cached.cache_clear()


@pytest.fixture(scope="function")
def test_database_url(tmp_path: Path) -> str:
    """Return the URL of a throwaway SQLite database file."""
    return f"sqlite:///{tmp_path / 'tubetalk_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def database(test_database_url: str) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at a fresh database with all tables created."""
    from tubetalk.database.connection import (
        dispose_database,
        get_async_engine,
        init_database,
        reset_database,
    )

    os.environ["TUBETALK_DATABASE_URL"] = test_database_url
    reset_database()
    init_database(test_database_url, force_reinit=True)

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_database_url

    await dispose_database()


@pytest.fixture
def make_user(database: str) -> Callable[..., Awaitable[Users]]:
    """Factory inserting a user directly into the database."""
    from tubetalk.database.connection import get_async_session

    async def _make_user(
        username: str, access_token: str, avatar_url: str | None = None
    ) -> Users:
        async with get_async_session() as session:
            user = Users(username=username, access_token=access_token, avatar_url=avatar_url)
            session.add(user)
            await session.flush()
        return user

    return _make_user


@pytest_asyncio.fixture
async def alice(make_user: Callable[..., Awaitable[Users]]) -> Users:
    return await make_user("alice", "oauth-alice", "https://example.com/alice.png")


@pytest_asyncio.fixture
async def bob(make_user: Callable[..., Awaitable[Users]]) -> Users:
    return await make_user("bob", "oauth-bob")


@pytest.fixture
def execute() -> Callable[..., Awaitable[Any]]:
    """Execute a GraphQL operation against the schema as a given user (or anonymously)."""
    from tubetalk.graphql.schema import schema

    async def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        user: Users | None = None,
    ) -> Any:
        if user is not None:
            auth = AuthContext(user_id=user.id, user=user)
        else:
            auth = AuthContext(user_id=None)
        return await schema.execute(query, variable_values=variables, context_value={"auth": auth})

    return _execute


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
