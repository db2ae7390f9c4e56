"""Watch-later router."""

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
    WatchLaterStatusResponse,
)

router = APIRouter()


@router.post("", summary="Add an anime to the watchlist")
async def add_to_watchlist(
    request: AnimeIdRequest,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    session: DBSession,
) -> WatchLaterStatusResponse:
    command = AddToListCommand(list_repo, user_context)
    change = await command.execute(request.id, ListCategory.WATCH_LATER)
    await session.commit()

    if change.already_exists:
        return WatchLaterStatusResponse(
            message="This anime is already in your watchlist",
            is_watch_later=True,
        )
    return WatchLaterStatusResponse(
        message="Added to watch list successfully",
        is_watch_later=True,
    )


@router.get("", summary="List the watchlist with catalog data")
async def list_watchlist(
    list_repo: ListRepository,
    enrichment_service: EnrichmentService,
    user_context: CurrentUserContext,
) -> AnimeListResponse:
    query = GetUserListQuery(list_repo, enrichment_service, user_context)
    records = await query.execute(ListCategory.WATCH_LATER)

    if not records:
        return AnimeListResponse(message="Watchlist is empty", data=[])

    return AnimeListResponse(
        message="Watchlist retrieved successfully",
        data=[AnimeRecordResponse.from_record(record) for record in records],
    )


@router.delete(
    "/{anime_id}",
    summary="Remove an anime from the watchlist",
    responses={404: {"description": "Anime not in watchlist"}},
)
async def remove_from_watchlist(
    anime_id: Annotated[int, Path(gt=0)],
    response: Response,
    list_repo: ListRepository,
    user_context: CurrentUserContext,
    session: DBSession,
) -> WatchLaterStatusResponse:
    command = RemoveFromListCommand(list_repo, user_context)
    change = await command.execute(anime_id, ListCategory.WATCH_LATER)

    if not change.found:
        response.status_code = status.HTTP_404_NOT_FOUND
        return WatchLaterStatusResponse(
            message="Anime not found in watchlist",
            is_watch_later=False,
        )

    await session.commit()
    return WatchLaterStatusResponse(
        message="Removed from watch list successfully",
        is_watch_later=False,
    )
