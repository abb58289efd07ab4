"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Cheap password hashing in tests
os.environ["BCRYPT_ROUNDS"] = "4"

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.github.client import GitHubClient

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Canned GitHub answers, keyed by username
GITHUB_REPOS: dict[str, list[dict[str, Any]]] = {
    "octocat": [
        {"id": 1, "name": "hello-world", "html_url": "https://github.com/octocat/hello-world"},
        {"id": 2, "name": "spoon-knife", "html_url": "https://github.com/octocat/spoon-knife"},
    ],
}


def _github_handler(request: httpx.Request) -> httpx.Response:
    username = request.url.path.split("/")[2]
    if username in GITHUB_REPOS:
        return httpx.Response(200, json=GITHUB_REPOS[username])
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """UoW factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def github_client() -> GitHubClient:
    """GitHub client answering from GITHUB_REPOS instead of the network."""
    return GitHubClient(
        base_url="https://api.github.test",
        client_id="",
        client_secret="",
        token="",
        transport=httpx.MockTransport(_github_handler),
    )


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    auth_provider: JWTAuthProvider,
    github_client: GitHubClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client with database, token and GitHub overrides.

    Authentication is real: tests obtain tokens by registering or logging in.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import get_post_service, get_profile_service, get_user_service
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from domain.services.user_service import UserService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_service] = lambda: UserService(uow_factory, auth_provider)
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(
        uow_factory, repo_lookup=github_client
    )
    app.dependency_overrides[get_post_service] = lambda: PostService(uow_factory)
    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def register(
    client: AsyncClient,
    name: str = "Ada Lovelace",
    email: str = "ada@example.com",
    password: str = "secret1",
) -> dict[str, str]:
    """Register an account and return bearer headers for it."""
    response = await client.post(
        "/api/v1/users",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Bearer headers for a freshly registered account."""
    return await register(client)


@pytest.fixture
async def other_headers(client: AsyncClient) -> dict[str, str]:
    """Bearer headers for a second account."""
    return await register(client, name="Grace Hopper", email="grace@example.com")
