"""FastAPI dependency injection for the animelog API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- User context for list scoping
- Catalog access (shared rate limiter, response cache, HTTP client)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from animelog.application.context import UserContext
from animelog.application.services import (
    AnimeEnrichmentService,
    AuthenticationService,
)
from animelog.domain.catalog import AnimeCatalog
from animelog.domain.lists import ListEntryRepository
from animelog.domain.user import User
from animelog.infrastructure.cache import AnimeResponseCache
from animelog.infrastructure.catalog import JikanCatalogClient
from animelog.infrastructure.persistence.sqlalchemy import (
    ListEntryRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from animelog.infrastructure.resilience import RateLimiter, RetryPolicy
from animelog.presentation.api.config import get_api_settings
from animelog_auth import InvalidTokenError, JWTService, PasswordHashingService
from animelog_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from animelog_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    return PasswordHashingService()


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Resolve the authenticated user from the bearer token.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    if not payload.is_access_token():
        raise _unauthorized("Invalid token type")

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        logger.warning("Token for unknown user: %s", payload.user_id)
        raise _unauthorized("User not found")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_user_context(
    user: User = Depends(get_current_user),
) -> UserContext:
    return UserContext.create(user)


CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


# -----------------------------------------------------------------------------
# Upstream Catalog (process-wide singletons)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_rate_limiter() -> RateLimiter:
    """Shared limiter for every outbound catalog request."""
    return RateLimiter(interval=get_settings().catalog_rate_limit_interval)


@lru_cache(maxsize=1)
def get_anime_cache() -> AnimeResponseCache:
    return AnimeResponseCache(ttl_seconds=get_settings().catalog_cache_ttl_seconds)


@lru_cache(maxsize=1)
def get_anime_catalog() -> AnimeCatalog:
    """Shared catalog client (one connection pool per process)."""
    settings = get_settings()
    return JikanCatalogClient(
        rate_limiter=get_rate_limiter(),
        base_url=settings.catalog_base_url,
        timeout=settings.catalog_timeout,
    )


def get_retry_policy(
    settings: Settings = Depends(get_api_settings),
) -> RetryPolicy:
    return RetryPolicy(
        retries=settings.catalog_retry_attempts,
        min_wait=settings.catalog_retry_min_wait,
        factor=settings.catalog_retry_factor,
    )


Catalog = Annotated[AnimeCatalog, Depends(get_anime_catalog)]


def get_enrichment_service(
    catalog: Catalog,
    cache: AnimeResponseCache = Depends(get_anime_cache),
    retry_policy: RetryPolicy = Depends(get_retry_policy),
) -> AnimeEnrichmentService:
    return AnimeEnrichmentService(
        catalog=catalog,
        cache=cache,
        retry_policy=retry_policy,
    )


EnrichmentService = Annotated[
    AnimeEnrichmentService,
    Depends(get_enrichment_service),
]


# -----------------------------------------------------------------------------
# Lists
# -----------------------------------------------------------------------------


def get_list_entry_repository(session: DBSession) -> ListEntryRepository:
    return ListEntryRepositorySQLAlchemy(session)


ListRepository = Annotated[ListEntryRepository, Depends(get_list_entry_repository)]
