"""Favorites router."""

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from animelog.application.commands import AddToListCommand, RemoveFromListCommand
from animelog.application.queries import GetUserListQuery
from animelog.domain.lists import ListCategory
from animelog.presentation.api.dependencies import (
    CurrentUserContext,
    DBSession,
    EnrichmentService,
    ListRepository,
)
from animelog.presentation.api.schemas.anime import AnimeRecordResponse
from animelog.presentation.api.schemas.lists import (
    AnimeIdRequest,
    AnimeListResponse,
    FavoriteStatusResponse,
)

router = APIRouter()


@router.post("", summary="Add an anime to favorites")
async def add_favorite(
    request: AnimeIdRequest,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    session: DBSession,
) -> FavoriteStatusResponse:
    command = AddToListCommand(list_repo, user_context)
    change = await command.execute(request.id, ListCategory.FAVORITE)
    await session.commit()

    if change.already_exists:
        return FavoriteStatusResponse(
            message="This anime is already in your favorites",
            is_favorite=True,
        )
    return FavoriteStatusResponse(
        message="Favorite added successfully",
        is_favorite=True,
    )


@router.get("", summary="List favorites with catalog data")
async def list_favorites(
    list_repo: ListRepository,
    enrichment_service: EnrichmentService,
    user_context: CurrentUserContext,
) -> AnimeListResponse:
    """
    Every favorite resolved to a record, oldest first.

    Anime the catalog could not serve appear as "Data Unavailable"
    placeholders instead of being dropped.
    """
    query = GetUserListQuery(list_repo, enrichment_service, user_context)
    records = await query.execute(ListCategory.FAVORITE)

    if not records:
        return AnimeListResponse(message="Favorites list is empty", data=[])

    return AnimeListResponse(
        message="Favorites retrieved successfully",
        data=[AnimeRecordResponse.from_record(record) for record in records],
    )


@router.delete(
    "/{anime_id}",
    summary="Remove an anime from favorites",
    responses={404: {"description": "Favorite not found"}},
)
async def remove_favorite(
    anime_id: Annotated[int, Path(gt=0)],
    response: Response,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    session: DBSession,
) -> FavoriteStatusResponse:
    command = RemoveFromListCommand(list_repo, user_context)
    change = await command.execute(anime_id, ListCategory.FAVORITE)

    if not change.found:
        response.status_code = status.HTTP_404_NOT_FOUND
        return FavoriteStatusResponse(message="Favorite not found", is_favorite=False)

    await session.commit()
    return FavoriteStatusResponse(
        message="Favorite removed successfully",
        is_favorite=False,
    )
