"""List commands - favorite and watch-later membership."""

from animelog.application.commands.lists.add_to_list_command import AddToListCommand
from animelog.application.commands.lists.remove_from_list_command import (
    RemoveFromListCommand,
)

__all__ = [
    "AddToListCommand",
    "RemoveFromListCommand",
]
