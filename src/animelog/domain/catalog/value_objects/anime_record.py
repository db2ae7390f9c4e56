"""Anime record value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

PLACEHOLDER_TITLE = "Data Unavailable"


@dataclass(frozen=True)
class AnimeRecord:
    """Snapshot of the catalog data shown for one anime.

    Either resolved from the upstream catalog or, when resolution failed
    for good, a placeholder built with :meth:`placeholder`.
    """

    mal_id: int
    title: str
    image_url: str
    score: Optional[float] = None
    year: Optional[int] = None
    genres: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def placeholder(cls, mal_id: int) -> AnimeRecord:
        return cls(
            mal_id=mal_id,
            title=PLACEHOLDER_TITLE,
            image_url="",
            score=None,
            year=None,
            genres=(),
        )

    @property
    def is_placeholder(self) -> bool:
        return self.title == PLACEHOLDER_TITLE and not self.image_url
