"""Pytest fixtures for API integration tests.

The app runs against a throwaway SQLite database and a stub catalog;
no request ever leaves the process.
"""

import asyncio

import pytest
from api_fakes import StubCatalog
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from animelog.infrastructure.cache import AnimeResponseCache
from animelog.infrastructure.persistence.sqlalchemy import Base
from animelog.infrastructure.resilience import RetryPolicy
from animelog.presentation.api.app import API_PREFIX, create_app
from animelog.presentation.api.config import get_api_settings
from animelog.presentation.api.dependencies import (
    get_anime_cache,
    get_anime_catalog,
    get_db_session,
    get_password_service,
    get_retry_policy,
)
from animelog_auth import PasswordHashingService
from animelog_auth.persistence.sqlalchemy import AuthBase
from animelog_config.settings import Settings


@pytest.fixture
def api_prefix() -> str:
    return API_PREFIX


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        database_url_override=database_url,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


def _run(coro) -> None:
    """Run setup/teardown in its own loop, apart from TestClient's."""
    loop = asyncio.new_event_loop()
    try:
        loop.run_until_complete(coro)
    finally:
        loop.close()


async def _create_schema(async_engine) -> None:
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(AuthBase.metadata.create_all)


@pytest.fixture
def stub_catalog() -> StubCatalog:
    return StubCatalog(down_ids={999})


@pytest.fixture
def test_client(api_settings, async_engine, stub_catalog):
    """Create a test client wired to the test database and stub catalog."""
    _run(_create_schema(async_engine))

    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    async def no_wait(_: float) -> None:
        return None

    cache = AnimeResponseCache()

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )
    app.dependency_overrides[get_anime_catalog] = lambda: stub_catalog
    app.dependency_overrides[get_anime_cache] = lambda: cache
    app.dependency_overrides[get_retry_policy] = lambda: RetryPolicy(sleep=no_wait)

    yield TestClient(app)

    _run(async_engine.dispose())


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "name": "Spike Spiegel",
        "email": "spike@example.com",
        "password": "Secure$Pass1",
    }


@pytest.fixture
def auth_headers(test_client, registered_user_data, api_prefix) -> dict:
    """Get auth headers for a freshly registered user."""
    response = test_client.post(
        f"{api_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201, (
        f"Registration failed: {response.status_code} - {response.text}"
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}
