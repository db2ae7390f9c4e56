"""Abstract repository interfaces for auth persistence."""

from animelog_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = [
    "UserCredentialData",
    "UserCredentialRepository",
]
