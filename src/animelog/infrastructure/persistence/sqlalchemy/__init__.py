"""SQLAlchemy persistence for users and list entries."""

from animelog.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ListEntryModel,
    UserModel,
)
from animelog.infrastructure.persistence.sqlalchemy.repositories import (
    ListEntryRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "ListEntryModel",
    "ListEntryRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
