"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from animelog.domain.user.aggregates.user import User
from animelog.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Persist a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """
