"""List entry repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from animelog.domain.lists.value_objects import ListCategory, MembershipChange


class ListEntryRepository(ABC):
    """Repository interface for a user's favorite and watch-later entries.

    At most one entry exists per (user, anime, category). Neither add nor
    remove raises for duplicates or missing targets; the outcome is
    reported through :class:`MembershipChange`.
    """

    @abstractmethod
    async def list_anime_ids(self, user_id: UUID, category: ListCategory) -> list[int]:
        """
        Return the anime ids in one of the user's lists.

        Returns
        -------
        Anime ids in the order they were added
        """

    @abstractmethod
    async def anime_ids_by_category(
        self,
        user_id: UUID,
    ) -> dict[ListCategory, set[int]]:
        """
        Return every category mapped to the set of anime ids it holds.

        Categories without entries map to an empty set.
        """

    @abstractmethod
    async def add(
        self,
        user_id: UUID,
        anime_id: int,
        category: ListCategory,
    ) -> MembershipChange:
        """
        Add an anime to a list.

        Returns
        -------
        MembershipChange with already_exists=True when the entry was
        already present (no new entry is created)
        """

    @abstractmethod
    async def remove(
        self,
        user_id: UUID,
        anime_id: int,
        category: ListCategory,
    ) -> MembershipChange:
        """
        Remove an anime from a list.

        Returns
        -------
        MembershipChange with found=False when there was nothing to remove
        """
