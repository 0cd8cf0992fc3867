"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any

# Settings are read at import time: configure the test environment first
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_PASSWORD = "secret123"

RegisterFn = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database per test, shared by every connection."""
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
        autoflush=False,
    )


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
def app(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    auth_provider: JWTAuthProvider,
) -> Generator[FastAPI, None, None]:
    """
    Application wired to the in-memory database.

    Every service dependency is overridden with one that uses the test
    UoW factory; authentication runs for real against the test provider.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_post_service,
        get_profile_service,
        get_user_service,
    )
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from domain.services.user_service import UserService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    def override_get_user_service() -> UserService:
        return UserService(uow_factory, auth_provider=auth_provider)

    def override_get_profile_service() -> ProfileService:
        return ProfileService(uow_factory)

    def override_get_post_service() -> PostService:
        return PostService(uow_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_service] = override_get_user_service
    app.dependency_overrides[get_profile_service] = override_get_profile_service
    app.dependency_overrides[get_post_service] = override_get_post_service
    app.dependency_overrides[get_async_session] = override_get_async_session

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def register(client: AsyncClient) -> RegisterFn:
    """Register a user, log in, and return the Authorization header for them."""

    async def _register(
        name: str = "Jane Doe",
        email: str = "jane@devmail.io",
        password: str = DEFAULT_PASSWORD,
    ) -> dict[str, str]:
        response = await client.post(
            "/api/users/register",
            json={"name": name, "email": email, "password": password, "password2": password},
        )
        assert response.status_code == 200, response.text

        login = await client.post(
            "/api/users/login", json={"email": email, "password": password}
        )
        assert login.status_code == 200, login.text
        return {"Authorization": login.json()["token"]}

    return _register


@pytest.fixture
async def auth_headers(register: RegisterFn) -> dict[str, str]:
    """Headers for a registered and logged-in user."""
    return await register()


@pytest.fixture
async def other_headers(register: RegisterFn) -> dict[str, str]:
    """Headers for a second, unrelated user."""
    return await register(name="John Roe", email="john@devmail.io")


def profile_payload(**overrides: Any) -> dict[str, Any]:
    """A valid profile form."""
    payload: dict[str, Any] = {
        "handle": "jdoe",
        "status": "Developer",
        "skills": "Python, SQL, FastAPI",
        "company": "Acme",
        "website": "https://jdoe.dev",
        "twitter": "https://twitter.com/jdoe",
    }
    payload.update(overrides)
    return payload
