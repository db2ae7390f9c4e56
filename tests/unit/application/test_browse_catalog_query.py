"""Tests for BrowseCatalogQuery."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from catalog_fakes import FakeCatalog

from animelog.application.context import UserContext
from animelog.application.queries import BrowseCatalogQuery
from animelog.domain.catalog import AnimeCatalog, CatalogUnavailableError
from animelog.domain.lists import ListCategory, ListEntryRepository


@pytest.fixture
def user_context() -> UserContext:
    return UserContext(user_id=uuid4(), email="ed@example.com")


@pytest.fixture
def list_repo() -> AsyncMock:
    repo = AsyncMock(spec=ListEntryRepository)
    repo.anime_ids_by_category.return_value = {
        ListCategory.FAVORITE: {1, 3},
        ListCategory.WATCH_LATER: {3},
    }
    return repo


class TestBrowseCatalogQuery:
    async def test_list_page_annotates_items(self, list_repo, user_context):
        query = BrowseCatalogQuery(FakeCatalog(), list_repo, user_context)

        page = await query.list_page(page=1, limit=3)

        flags = {
            item["mal_id"]: (item["isFavorite"], item["isWatchLater"])
            for item in page["data"]
        }
        assert flags == {1: (True, False), 2: (False, False), 3: (True, True)}
        assert page["pagination"] == {"has_next_page": False}

    async def test_search_annotates_and_keeps_extra_keys(self, list_repo, user_context):
        query = BrowseCatalogQuery(FakeCatalog(), list_repo, user_context)

        page = await query.search(query="bebop", page=1, limit=2)

        assert "pagination" in page
        assert [item["isFavorite"] for item in page["data"]] == [True, False]

    async def test_empty_lists_mark_everything_false(self, list_repo, user_context):
        list_repo.anime_ids_by_category.return_value = {
            ListCategory.FAVORITE: set(),
            ListCategory.WATCH_LATER: set(),
        }
        query = BrowseCatalogQuery(FakeCatalog(), list_repo, user_context)

        page = await query.list_page(page=1, limit=2)

        assert not any(item["isFavorite"] for item in page["data"])
        assert not any(item["isWatchLater"] for item in page["data"])

    async def test_catalog_failure_propagates(self, list_repo, user_context):
        catalog = AsyncMock(spec=AnimeCatalog)
        catalog.list_anime.side_effect = CatalogUnavailableError(status_code=503)
        query = BrowseCatalogQuery(catalog, list_repo, user_context)

        with pytest.raises(CatalogUnavailableError):
            await query.list_page(page=1, limit=10)

        list_repo.anime_ids_by_category.assert_not_called()

    async def test_get_anime_passes_payload_through(self, list_repo, user_context):
        query = BrowseCatalogQuery(FakeCatalog(), list_repo, user_context)

        payload = await query.get_anime(5)

        assert payload == {"data": {"mal_id": 5, "title": "Anime 5"}}
