"""Stand-in catalog for HTTP-level tests."""

from collections import Counter
from typing import Any

from animelog.domain.catalog import (
    AnimeCatalog,
    AnimeRecord,
    CatalogUnavailableError,
)


class StubCatalog(AnimeCatalog):
    """Serves deterministic anime; ids in ``down_ids`` always fail.

    Setting ``available`` to False makes every browse call fail as well.
    """

    def __init__(self, down_ids: set[int] | None = None):
        self.down_ids = down_ids or set()
        self.available = True
        self.fetches: Counter[int] = Counter()

    async def fetch_anime(self, anime_id: int) -> AnimeRecord:
        self.fetches[anime_id] += 1
        if anime_id in self.down_ids:
            raise CatalogUnavailableError(status_code=503, path=f"/anime/{anime_id}")
        return AnimeRecord(
            mal_id=anime_id,
            title=f"Anime {anime_id}",
            image_url=f"https://cdn.example/{anime_id}.jpg",
            score=8.0,
            year=1998,
            genres=("Action", "Sci-Fi"),
        )

    async def get_anime(self, anime_id: int) -> dict[str, Any]:
        self._check_available()
        return {"data": {"mal_id": anime_id, "title": f"Anime {anime_id}"}}

    async def list_anime(self, page: int, limit: int) -> dict[str, Any]:
        self._check_available()
        start = (page - 1) * limit + 1
        return {
            "pagination": {"current_page": page, "has_next_page": True},
            "data": [
                {"mal_id": i, "title": f"Anime {i}"}
                for i in range(start, start + limit)
            ],
        }

    async def search_anime(self, query: str, page: int, limit: int) -> dict[str, Any]:
        self._check_available()
        return {
            "pagination": {"current_page": page, "has_next_page": False},
            "data": [{"mal_id": 1, "title": f"{query} 1"}],
        }

    def _check_available(self) -> None:
        if not self.available:
            raise CatalogUnavailableError(status_code=503, path="/anime")
