"""Add an anime to one of the current user's lists."""

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


class AddToListCommand:
    """Add an anime to a list; adding an existing entry is a no-op."""

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
        return await self._list_repo.add(
            self._user_context.user_id,
            anime_id,
            category,
        )
