"""Browse and search the catalog, marking the current user's list items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from animelog.domain.lists import ListCategory

if TYPE_CHECKING:
    from animelog.application.context import UserContext
    from animelog.domain.catalog import AnimeCatalog
    from animelog.domain.lists import ListEntryRepository


class BrowseCatalogQuery:
    """Read catalog pages and annotate each item for the current user.

    Every item of a page's ``data`` gains ``isFavorite`` and
    ``isWatchLater`` flags; the rest of the upstream payload (including
    ``pagination``) is passed through untouched. Catalog failures are not
    retried here and propagate to the caller.
    """

    def __init__(
        self,
        catalog: AnimeCatalog,
        list_repo: ListEntryRepository,
        user_context: UserContext,
    ) -> None:
        self._catalog = catalog
        self._list_repo = list_repo
        self._user_context = user_context

    async def list_page(self, page: int, limit: int) -> dict[str, Any]:
        payload = await self._catalog.list_anime(page=page, limit=limit)
        return await self._annotate(payload)

    async def search(self, query: str, page: int, limit: int) -> dict[str, Any]:
        payload = await self._catalog.search_anime(query=query, page=page, limit=limit)
        return await self._annotate(payload)

    async def get_anime(self, anime_id: int) -> dict[str, Any]:
        return await self._catalog.get_anime(anime_id)

    async def _annotate(self, payload: dict[str, Any]) -> dict[str, Any]:
        memberships = await self._list_repo.anime_ids_by_category(
            self._user_context.user_id,
        )
        favorites = memberships.get(ListCategory.FAVORITE, set())
        watch_later = memberships.get(ListCategory.WATCH_LATER, set())

        items = []
        for item in payload.get("data", []):
            mal_id = item.get("mal_id") if isinstance(item, dict) else None
            if mal_id is None:
                items.append(item)
                continue
            items.append(
                {
                    **item,
                    "isFavorite": mal_id in favorites,
                    "isWatchLater": mal_id in watch_later,
                },
            )
        return {**payload, "data": items}
