"""Schemas for the favorites and watch-later endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from animelog.presentation.api.schemas.anime import AnimeRecordResponse


class AnimeIdRequest(BaseModel):
    """Body for adding an anime to a list."""

    id: int = Field(..., gt=0, description="Catalog (MyAnimeList) anime id")

    model_config = ConfigDict(json_schema_extra={"example": {"id": 21}})


class FavoriteStatusResponse(BaseModel):
    message: str
    is_favorite: bool = Field(alias="isFavorite")

    model_config = ConfigDict(populate_by_name=True)


class WatchLaterStatusResponse(BaseModel):
    message: str
    is_watch_later: bool = Field(alias="isWatchLater")

    model_config = ConfigDict(populate_by_name=True)


class AnimeListResponse(BaseModel):
    """One of the user's lists with resolved records, in insertion order."""

    message: str
    data: list[AnimeRecordResponse]
