from animelog.domain.lists.repositories.list_entry_repository import (
    ListEntryRepository,
)

__all__ = ["ListEntryRepository"]
