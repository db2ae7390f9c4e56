"""HTTP client for the Jikan v4 anime catalog."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from animelog.domain.catalog import (
    AnimeCatalog,
    AnimeRecord,
    CatalogResponseError,
    CatalogUnavailableError,
)
from animelog.infrastructure.catalog.jikan_models import JikanAnimeResponse
from animelog.infrastructure.resilience import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.jikan.moe/v4"


class JikanCatalogClient(AnimeCatalog):
    """AnimeCatalog backed by the public Jikan REST API.

    Every outbound request first acquires the shared rate limiter, so the
    limit holds across list enrichment, browsing and detail lookups alike.
    The client performs a single attempt per call; retrying is left to the
    caller.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
    ):
        self._rate_limiter = rate_limiter
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_anime(self, anime_id: int) -> AnimeRecord:
        """Fetch one anime and map it to an AnimeRecord.

        Raises
        ------
        CatalogUnavailableError
            On transport failure or a non-2xx answer
        CatalogResponseError
            When the body is not the expected ``{"data": {...}}`` shape
        """
        path = f"/anime/{anime_id}"
        payload = await self._get_json(path)
        try:
            parsed = JikanAnimeResponse.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning("Unexpected catalog payload for %s: %s", path, e)
            raise CatalogResponseError(path=path) from e
        return parsed.data.to_record()

    async def get_anime(self, anime_id: int) -> dict[str, Any]:
        path = f"/anime/{anime_id}"
        return self._expect_object(await self._get_json(path), path)

    async def list_anime(self, page: int, limit: int) -> dict[str, Any]:
        path = "/anime"
        payload = await self._get_json(path, {"page": page, "limit": limit})
        return self._expect_page(payload, path)

    async def search_anime(self, query: str, page: int, limit: int) -> dict[str, Any]:
        path = "/anime"
        payload = await self._get_json(
            path,
            {"q": query, "page": page, "limit": limit},
        )
        return self._expect_page(payload, path)

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        client = await self._get_client()
        await self._rate_limiter.acquire()

        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Catalog returned error %d for %s", status, path)
            msg = f"Anime catalog returned HTTP {status}"
            raise CatalogUnavailableError(msg, status_code=status, path=path) from e
        except httpx.HTTPError as e:
            logger.warning("Catalog request to %s failed: %s", path, e)
            raise CatalogUnavailableError(path=path) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Catalog returned a non-JSON body for %s", path)
            raise CatalogResponseError(path=path) from e

    @staticmethod
    def _expect_object(payload: Any, path: str) -> dict[str, Any]:
        if not isinstance(payload, dict):
            raise CatalogResponseError(path=path)
        return payload

    @classmethod
    def _expect_page(cls, payload: Any, path: str) -> dict[str, Any]:
        page = cls._expect_object(payload, path)
        if not isinstance(page.get("data"), list):
            raise CatalogResponseError(path=path)
        return page
