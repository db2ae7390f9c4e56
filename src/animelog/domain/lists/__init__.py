"""Lists domain - a user's favorites and watch-later entries."""

from animelog.domain.lists.repositories import ListEntryRepository
from animelog.domain.lists.value_objects import ListCategory, MembershipChange

__all__ = [
    "ListCategory",
    "ListEntryRepository",
    "MembershipChange",
]
