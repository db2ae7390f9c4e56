"""Settings for the animelog API, read from the environment.

Process environment variables always win. Below them, values come from
the first env file that exists out of:

- the path in ``ANIMELOG_ENV_FILE`` (relative paths start at the project root)
- ``config/.env.dev`` for local development
- ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "ANIMELOG_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    """Closest ancestor of this package holding ``config/`` or ``.git``."""
    here = Path(__file__).resolve()
    for directory in here.parents:
        if (directory / "config").is_dir() or (directory / ".git").is_dir():
            return directory
    # src/animelog_config/settings.py -> project root
    return here.parents[2]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in ENV_FILE_CANDIDATES:
        candidate = config_dir / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Typed view of the animelog environment.

    Field names map to upper-case variables (``jwt_secret_key`` is
    ``JWT_SECRET_KEY``). Only the two secrets are mandatory.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required secrets
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    # Application
    app_name: str = "animelog"
    debug: bool = False

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "animelog"
    database_url_override: str | None = None  # e.g. sqlite+aiosqlite:///data/dev.db

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        # Accept a JSON list from the env file as well as a CSV string.
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # JWT
    jwt_access_token_expire_hours: int = 24

    # Upstream anime catalog (CATALOG_ prefix)
    catalog_base_url: str = "https://api.jikan.moe/v4"
    catalog_timeout: float = 10.0
    catalog_rate_limit_interval: float = 1.0  # seconds between outbound calls
    catalog_retry_attempts: int = 3  # retries after the first attempt
    catalog_retry_min_wait: float = 1.0
    catalog_retry_factor: float = 2.0
    catalog_cache_ttl_seconds: int = 3600

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """``database_url_override`` if set, else the asyncpg URL for Postgres."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (origin.strip() for origin in self.api_cors_origins.split(","))
        return [origin for origin in origins if origin]


@lru_cache()
def get_settings() -> Settings:
    """Settings for this process, read once.

    Raises pydantic's ValidationError when a required secret is missing.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
