"""SQLAlchemy implementation of UserCredentialRepository."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from animelog_auth.persistence.sqlalchemy.models import UserCredentialModel
from animelog_auth.repositories import UserCredentialData, UserCredentialRepository

logger = logging.getLogger(__name__)


class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
    """SQLAlchemy implementation of UserCredentialRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_data(self, model: UserCredentialModel) -> UserCredentialData:
        return UserCredentialData(
            user_id=model.user_id,
            password_hash=model.password_hash,
            last_login_at=model.last_login_at,
        )

    async def _find_model_by_user_id(self, user_id: UUID) -> UserCredentialModel | None:
        stmt = select(UserCredentialModel).where(
            UserCredentialModel.user_id == str(user_id),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(
        self,
        user_id: UUID,
        password_hash: str,
    ) -> UserCredentialData:
        existing = await self._find_model_by_user_id(user_id)

        if existing:
            existing.password_hash = password_hash
            existing.updated_at = datetime.now(tz=timezone.utc)
            logger.debug("Updated credentials for user: %s", user_id)
            await self._session.flush()
            return self._to_data(existing)

        model = UserCredentialModel(
            user_id=str(user_id),
            password_hash=password_hash,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Created credentials for user: %s", user_id)
        return self._to_data(model)

    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        model = await self._find_model_by_user_id(user_id)
        return self._to_data(model) if model else None

    async def update_last_login(self, user_id: UUID) -> None:
        credential = await self._find_model_by_user_id(user_id)
        if credential:
            credential.last_login_at = datetime.now(tz=timezone.utc)
            await self._session.flush()
