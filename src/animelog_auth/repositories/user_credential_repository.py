"""Abstract repository interface for user credentials.

This interface defines the contract for credential persistence.
Implementations can use SQLAlchemy or any other storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    """Immutable credential data returned by repository."""

    user_id: str
    password_hash: str
    last_login_at: datetime | None


class UserCredentialRepository(ABC):
    """Abstract repository interface for user authentication credentials."""

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """
        Create or update credentials for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        password_hash
            The bcrypt password hash

        Returns
        -------
        The saved credential data
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        """
        Find credentials by user ID.

        Returns
        -------
        Credential data if found, None otherwise
        """

    @abstractmethod
    async def update_last_login(self, user_id: UUID) -> None:
        """Update last login timestamp after successful authentication."""
