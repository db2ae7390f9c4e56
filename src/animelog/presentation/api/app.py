"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers. Every endpoint lives under /api.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from animelog.infrastructure.persistence.sqlalchemy import Base
from animelog.presentation.api.dependencies import get_anime_catalog, get_engine
from animelog.presentation.api.exception_handlers import setup_exception_handlers
from animelog.presentation.api.routers import (
    anime_router,
    auth_router,
    favorites_router,
    watchlist_router,
)
from animelog_auth.persistence.sqlalchemy import AuthBase
from animelog_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for animelog modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("animelog").setLevel(log_level)
    logging.getLogger("animelog_auth").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": "Registration and login. Returns a JWT bearer token.",
    },
    {
        "name": "Anime",
        "description": """Browse, search and inspect the upstream catalog.

Items are annotated with `isFavorite` and `isWatchLater` for the caller.
Upstream requests are rate limited to one per second process-wide.
""",
    },
    {
        "name": "Favorites",
        "description": """The caller's favorite anime.

Listing resolves every stored id through the response cache or the
catalog. Anime the catalog cannot serve are returned as
"Data Unavailable" placeholders.
""",
    },
    {
        "name": "Watchlist",
        "description": "The caller's watch-later list (same behaviour as favorites).",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting animelog API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down animelog API...")
    catalog = get_anime_catalog()
    close = getattr(catalog, "close", None)
    if close is not None:
        await close()
    await engine.dispose()
    logger.info("Catalog client and database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.run_sync(AuthBase.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_api_router() -> APIRouter:
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(anime_router, prefix="/anime", tags=["Anime"])
    api_router.include_router(
        favorites_router,
        prefix="/favorites",
        tags=["Favorites"],
    )
    api_router.include_router(
        watchlist_router,
        prefix="/watchlist",
        tags=["Watchlist"],
    )

    @api_router.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Anime favorites and watchlist backed by the Jikan catalog.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    return app
