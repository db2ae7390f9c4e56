"""Batch resolution of stored anime ids into catalog records.

Given the ids held in a user's list, produce exactly one AnimeRecord per
id, in the same order. Each id is served from the response cache when
possible and otherwise fetched from the catalog under the retry policy
(each attempt passing through the catalog's shared rate limiter). An id
whose fetch still fails after all retries becomes a placeholder record;
it is never dropped and never fails the batch.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Sequence

from animelog.domain.catalog import AnimeRecord, CatalogUnavailableError

if TYPE_CHECKING:
    from animelog.domain.catalog import AnimeCatalog
    from animelog.infrastructure.cache import AnimeResponseCache
    from animelog.infrastructure.resilience import RetryPolicy

logger = logging.getLogger(__name__)


class AnimeEnrichmentService:
    """Resolve anime ids to records with caching, retries and placeholders."""

    def __init__(
        self,
        catalog: AnimeCatalog,
        cache: AnimeResponseCache,
        retry_policy: RetryPolicy,
    ):
        self._catalog = catalog
        self._cache = cache
        self._retry_policy = retry_policy

    async def resolve(self, anime_id: int) -> AnimeRecord:
        """Resolve a single id.

        Returns
        -------
        The cached or freshly fetched record, or a placeholder when the
        catalog stayed unavailable through every retry

        Raises
        ------
        CatalogResponseError
            If the catalog answered with a payload that cannot be parsed
        """
        cached = self._cache.get(anime_id)
        if cached is not None:
            return cached

        try:
            record = await self._retry_policy.run(
                lambda: self._catalog.fetch_anime(anime_id),
                description=f"fetch of anime {anime_id}",
            )
        except CatalogUnavailableError as e:
            logger.error(
                "Giving up on anime %d after %d attempts, using placeholder: %s",
                anime_id,
                self._retry_policy.max_attempts,
                e,
            )
            return AnimeRecord.placeholder(anime_id)

        self._cache.set(anime_id, record)
        return record

    async def resolve_many(self, anime_ids: Sequence[int]) -> list[AnimeRecord]:
        """Resolve every id concurrently.

        The result has the same length and order as ``anime_ids``.
        Duplicate ids are resolved once per occurrence. An error that
        ``resolve`` does not absorb (a malformed catalog payload) cancels
        the remaining lookups and is raised unchanged.
        """
        if not anime_ids:
            return []

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self.resolve(anime_id)) for anime_id in anime_ids
                ]
        except ExceptionGroup as errors:
            # Siblings are already cancelled; surface the first failure as is.
            raise errors.exceptions[0] from None

        records = [task.result() for task in tasks]
        resolved = sum(1 for record in records if not record.is_placeholder)
        logger.debug("Resolved %d/%d anime records", resolved, len(records))
        return records
