from animelog.presentation.api.routers.anime import router as anime_router
from animelog.presentation.api.routers.auth import router as auth_router
from animelog.presentation.api.routers.favorites import router as favorites_router
from animelog.presentation.api.routers.watchlist import router as watchlist_router

__all__ = [
    "anime_router",
    "auth_router",
    "favorites_router",
    "watchlist_router",
]
