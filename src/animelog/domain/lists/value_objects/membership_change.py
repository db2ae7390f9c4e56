"""Outcome of adding or removing a list entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MembershipChange:
    """Result of a membership mutation.

    ``already_exists`` is set by add (True means nothing was created),
    ``found`` is set by remove (False means nothing was deleted).
    """

    already_exists: bool = False
    found: bool = True

    @classmethod
    def added(cls) -> "MembershipChange":
        return cls(already_exists=False)

    @classmethod
    def duplicate(cls) -> "MembershipChange":
        return cls(already_exists=True)

    @classmethod
    def removed(cls) -> "MembershipChange":
        return cls(found=True)

    @classmethod
    def missing(cls) -> "MembershipChange":
        return cls(found=False)
