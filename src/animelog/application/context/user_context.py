"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from animelog.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """
    Immutable identity of the authenticated caller.

    Created once per request and handed to commands and queries, which
    scope every list read and write to ``user_id``.
    """

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email)

    def __str__(self) -> str:
        return f"UserContext({self.email})"
