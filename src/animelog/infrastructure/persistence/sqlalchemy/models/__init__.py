"""SQLAlchemy models for persistence layer."""

from animelog.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from animelog.infrastructure.persistence.sqlalchemy.models.list_entry_model import (
    ListEntryModel,
)
from animelog.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "ListEntryModel",
    "TimestampMixin",
    "UserModel",
]
