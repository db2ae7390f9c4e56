"""SQLAlchemy repository implementations."""

from animelog.infrastructure.persistence.sqlalchemy.repositories.list_entry_repository import (  # NOQA: E501
    ListEntryRepositorySQLAlchemy,
)
from animelog.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ListEntryRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
