"""Fixtures for repository tests against SQLite."""

from datetime import datetime, timezone
from uuid import UUID

import pytest_asyncio
from seed_users import (
    TEST_USER_EMAIL,
    TEST_USER_EMAIL_2,
    TEST_USER_ID,
    TEST_USER_ID_2,
)
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from animelog.infrastructure.persistence.sqlalchemy import Base, UserModel
from animelog_auth.persistence.sqlalchemy import AuthBase


def _create_test_user(user_id: UUID, email: str, name: str) -> UserModel:
    now = datetime.now(tz=timezone.utc)
    return UserModel(
        id=user_id,
        email=email,
        name=name,
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def async_session(async_engine):
    """
    Provide a session on a fresh schema with two seeded users.

    Tables are dropped and the engine disposed after the test.
    """
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(AuthBase.metadata.create_all)

    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        session.add(_create_test_user(TEST_USER_ID, TEST_USER_EMAIL, "Spike"))
        session.add(_create_test_user(TEST_USER_ID_2, TEST_USER_EMAIL_2, "Jet"))
        await session.commit()

        yield session

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(AuthBase.metadata.drop_all)
    await async_engine.dispose()
