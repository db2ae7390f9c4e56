"""animelog auth - authentication infrastructure.

This package provides authentication infrastructure that is independent
of the anime domain. It handles:
- Password hashing and strength rules (bcrypt)
- JWT access token creation and verification
- User credential storage (with pluggable persistence)

Architecture:
    animelog_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from animelog_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from animelog_auth.repositories import UserCredentialRepository
from animelog_auth.schemas import TokenPayload
from animelog_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
