"""Pydantic schemas for API request/response models."""

from animelog.presentation.api.schemas.anime import (
    AnimeDetailResponse,
    AnimeRecordResponse,
)
from animelog.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from animelog.presentation.api.schemas.lists import (
    AnimeIdRequest,
    AnimeListResponse,
    FavoriteStatusResponse,
    WatchLaterStatusResponse,
)

__all__ = [
    # Anime
    "AnimeDetailResponse",
    "AnimeRecordResponse",
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    # Lists
    "AnimeIdRequest",
    "AnimeListResponse",
    "FavoriteStatusResponse",
    "WatchLaterStatusResponse",
]
