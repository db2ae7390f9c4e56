"""Remove an anime from one of the current user's lists."""

from __future__ import annotations

from typing import TYPE_CHECKING

from animelog.application.commands.lists._validation import ensure_anime_id

if TYPE_CHECKING:
    from animelog.application.context import UserContext
    from animelog.domain.lists import (
        ListCategory,
        ListEntryRepository,
        MembershipChange,
    )


class RemoveFromListCommand:
    """Remove an anime from a list; ``found`` is False if it was not there."""

    def __init__(
        self,
        list_repo: ListEntryRepository,
        user_context: UserContext,
    ) -> None:
        self._list_repo = list_repo
        self._user_context = user_context

    async def execute(
        self,
        anime_id: int,
        category: ListCategory,
    ) -> MembershipChange:
        ensure_anime_id(anime_id)
        return await self._list_repo.remove(
            self._user_context.user_id,
            anime_id,
            category,
        )
