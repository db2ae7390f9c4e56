"""Shared fixtures for integration tests.

Every test gets its own SQLite database file, so tests never share state
and never need a running PostgreSQL server.
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'animelog-test.db'}"


@pytest.fixture
def async_engine(database_url):
    """Engine without pooling, so connections never outlive an event loop."""
    return create_async_engine(database_url, poolclass=NullPool)
