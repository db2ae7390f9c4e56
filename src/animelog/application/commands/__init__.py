"""Application commands - operations that change state."""

from animelog.application.commands.lists import (
    AddToListCommand,
    RemoveFromListCommand,
)

__all__ = [
    "AddToListCommand",
    "RemoveFromListCommand",
]
