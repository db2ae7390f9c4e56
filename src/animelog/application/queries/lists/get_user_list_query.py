"""Query to read one of the current user's lists with catalog data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from animelog.application.context import UserContext
    from animelog.application.services import AnimeEnrichmentService
    from animelog.domain.catalog import AnimeRecord
    from animelog.domain.lists import ListCategory, ListEntryRepository

logger = logging.getLogger(__name__)


class GetUserListQuery:
    """Return the records of a user's favorites or watch-later list.

    An empty list returns immediately without touching the catalog.
    Otherwise every stored id yields one record, in insertion order, with
    placeholders for ids the catalog could not serve.
    """

    def __init__(
        self,
        list_repo: ListEntryRepository,
        enrichment_service: AnimeEnrichmentService,
        user_context: UserContext,
    ) -> None:
        self._list_repo = list_repo
        self._enrichment = enrichment_service
        self._user_context = user_context

    async def execute(self, category: ListCategory) -> list[AnimeRecord]:
        anime_ids = await self._list_repo.list_anime_ids(
            self._user_context.user_id,
            category,
        )
        if not anime_ids:
            return []

        logger.debug(
            "Resolving %d %s entries for %s",
            len(anime_ids),
            category.value,
            self._user_context,
        )
        return await self._enrichment.resolve_many(anime_ids)
