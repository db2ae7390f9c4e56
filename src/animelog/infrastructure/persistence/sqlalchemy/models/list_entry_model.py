"""SQLAlchemy model for favorite and watch-later list entries."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from animelog.domain.shared.time import utc_now
from animelog.infrastructure.persistence.sqlalchemy.models.base import Base


class ListEntryModel(Base):
    """
    One anime in one of a user's lists.

    ``category`` holds a ListCategory value. The autoincrement id doubles
    as insertion order when a list is read back.
    """

    __tablename__ = "list_entries"

    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "anime_id",
            "category",
            name="uq_list_entry_user_anime_category",
        ),
        Index("ix_list_entries_user_category", "user_id", "category"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    anime_id: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<ListEntryModel(user_id={self.user_id}, anime_id={self.anime_id}, "
            f"category={self.category})>"
        )
