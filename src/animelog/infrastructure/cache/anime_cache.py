"""In-memory TTL cache for resolved anime records.

Entries are keyed by anime id and expire a fixed time after they were
written. Expired entries are dropped lazily on lookup; there is no
background sweep and no capacity bound (the key space is the catalog's
id space, and reuse within the TTL is the common case).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from animelog.domain.catalog import AnimeRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    record: AnimeRecord
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class AnimeResponseCache:
    """Maps anime ids to their last successfully fetched record.

    get/set are plain synchronous dict operations, so they are atomic with
    respect to other asyncio tasks. Concurrent writers for the same id
    simply overwrite each other (last write wins).
    """

    DEFAULT_TTL_SECONDS = 60 * 60

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            msg = "Cache TTL must be positive"
            raise ValueError(msg)

        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[int, CacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, anime_id: int) -> AnimeRecord | None:
        """Return the cached record, or None on a miss or expired entry."""
        entry = self._entries.get(anime_id)
        if entry is None:
            return None

        if entry.is_expired(self._clock()):
            self._entries.pop(anime_id, None)
            logger.debug("Cache entry expired for anime %d", anime_id)
            return None

        return entry.record

    def set(self, anime_id: int, record: AnimeRecord) -> None:
        """Store ``record`` for ``anime_id``, replacing any previous entry."""
        self._entries[anime_id] = CacheEntry(
            record=record,
            expires_at=self._clock() + self._ttl,
        )

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, anime_id: object) -> bool:
        if not isinstance(anime_id, int) or isinstance(anime_id, bool):
            return False
        return self.get(anime_id) is not None

    def __len__(self) -> int:
        """Number of live entries. Expired ones still stored are not counted."""
        now = self._clock()
        return sum(1 for entry in self._entries.values() if not entry.is_expired(now))
