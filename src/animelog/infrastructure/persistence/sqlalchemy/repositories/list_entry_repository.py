"""SQLAlchemy implementation of ListEntryRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from animelog.domain.lists import ListCategory, ListEntryRepository, MembershipChange
from animelog.infrastructure.persistence.sqlalchemy.models import ListEntryModel

logger = logging.getLogger(__name__)


class ListEntryRepositorySQLAlchemy(ListEntryRepository):
    """SQLAlchemy implementation of the ListEntryRepository interface.

    Changes are flushed, not committed; the request's unit of work owns
    the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_anime_ids(self, user_id: UUID, category: ListCategory) -> list[int]:
        stmt = (
            select(ListEntryModel.anime_id)
            .where(
                ListEntryModel.user_id == user_id,
                ListEntryModel.category == category.value,
            )
            .order_by(ListEntryModel.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def anime_ids_by_category(
        self,
        user_id: UUID,
    ) -> dict[ListCategory, set[int]]:
        stmt = select(ListEntryModel.anime_id, ListEntryModel.category).where(
            ListEntryModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)

        memberships: dict[ListCategory, set[int]] = {
            category: set() for category in ListCategory
        }
        for anime_id, category in result.all():
            memberships[ListCategory(category)].add(anime_id)
        return memberships

    async def add(
        self,
        user_id: UUID,
        anime_id: int,
        category: ListCategory,
    ) -> MembershipChange:
        if await self._exists(user_id, anime_id, category):
            return MembershipChange.duplicate()

        try:
            # Savepoint: a failed insert must not discard the rest of the
            # unit of work.
            async with self._session.begin_nested():
                self._session.add(
                    ListEntryModel(
                        user_id=user_id,
                        anime_id=anime_id,
                        category=category.value,
                    ),
                )
        except IntegrityError:
            # Lost a race against a concurrent insert of the same entry.
            logger.debug(
                "Concurrent add of anime %d to %s for user %s",
                anime_id,
                category.value,
                user_id,
            )
            return MembershipChange.duplicate()

        logger.info(
            "Added anime %d to %s for user %s",
            anime_id,
            category.value,
            user_id,
        )
        return MembershipChange.added()

    async def remove(
        self,
        user_id: UUID,
        anime_id: int,
        category: ListCategory,
    ) -> MembershipChange:
        stmt = delete(ListEntryModel).where(
            ListEntryModel.user_id == user_id,
            ListEntryModel.anime_id == anime_id,
            ListEntryModel.category == category.value,
        )
        result = await self._session.execute(stmt)

        if not result.rowcount:
            return MembershipChange.missing()

        logger.info(
            "Removed anime %d from %s for user %s",
            anime_id,
            category.value,
            user_id,
        )
        return MembershipChange.removed()

    async def _exists(
        self,
        user_id: UUID,
        anime_id: int,
        category: ListCategory,
    ) -> bool:
        stmt = select(ListEntryModel.id).where(
            ListEntryModel.user_id == user_id,
            ListEntryModel.anime_id == anime_id,
            ListEntryModel.category == category.value,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
