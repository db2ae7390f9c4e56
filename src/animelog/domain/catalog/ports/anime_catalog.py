"""Port for the upstream anime catalog."""

from abc import ABC, abstractmethod
from typing import Any

from animelog.domain.catalog.value_objects import AnimeRecord


class AnimeCatalog(ABC):
    """Read access to a third-party anime catalog.

    All methods raise ``CatalogUnavailableError`` when the catalog cannot
    be reached or answers with a non-2xx status, and
    ``CatalogResponseError`` when a 2xx body cannot be interpreted.
    """

    @abstractmethod
    async def fetch_anime(self, anime_id: int) -> AnimeRecord:
        """Fetch one anime and map it to an AnimeRecord."""

    @abstractmethod
    async def get_anime(self, anime_id: int) -> dict[str, Any]:
        """Return the raw detail payload for one anime."""

    @abstractmethod
    async def list_anime(self, page: int, limit: int) -> dict[str, Any]:
        """Return one raw page of the catalog (``data`` + ``pagination``)."""

    @abstractmethod
    async def search_anime(self, query: str, page: int, limit: int) -> dict[str, Any]:
        """Return one raw page of search results."""
