"""Categories a user can file an anime under."""

from enum import Enum


class ListCategory(str, Enum):
    """The two personal lists every user has."""

    FAVORITE = "favorite"
    WATCH_LATER = "watch_later"
