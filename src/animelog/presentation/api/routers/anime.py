"""Catalog router: browse, search and detail, annotated for the caller."""

from typing import Annotated, Any

from fastapi import APIRouter, Path, Query

from animelog.application.queries import BrowseCatalogQuery
from animelog.presentation.api.dependencies import (
    Catalog,
    CurrentUserContext,
    ListRepository,
)
from animelog.presentation.api.schemas.anime import AnimeDetailResponse

router = APIRouter()

PageParam = Annotated[int, Query(ge=1, description="1-based page number")]
LimitParam = Annotated[int, Query(ge=1, le=25, description="Items per page")]


@router.get(
    "",
    summary="Browse the catalog",
    responses={503: {"description": "Catalog unavailable"}},
)
async def list_anime(
    catalog: Catalog,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    page: PageParam = 1,
    limit: LimitParam = 10,
) -> dict[str, Any]:
    """
    One page of the catalog.

    Every item carries ``isFavorite`` and ``isWatchLater`` for the caller;
    ``pagination`` is passed through from the catalog.
    """
    query = BrowseCatalogQuery(catalog, list_repo, user_context)
    result = await query.list_page(page=page, limit=limit)
    return {"data": result["data"], "pagination": result.get("pagination")}


@router.get(
    "/search",
    summary="Search the catalog",
    responses={503: {"description": "Catalog unavailable"}},
)
async def search_anime(
    catalog: Catalog,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    q: str = "",
    page: PageParam = 1,
    limit: LimitParam = 10,
) -> dict[str, Any]:
    query = BrowseCatalogQuery(catalog, list_repo, user_context)
    return await query.search(query=q, page=page, limit=limit)


@router.get(
    "/{anime_id}",
    summary="Get anime details",
    responses={503: {"description": "Catalog unavailable"}},
)
async def get_anime(
    anime_id: Annotated[int, Path(gt=0)],
    catalog: Catalog,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
) -> AnimeDetailResponse:
    query = BrowseCatalogQuery(catalog, list_repo, user_context)
    return AnimeDetailResponse(data=await query.get_anime(anime_id))
