"""Pydantic models for the subset of the Jikan v4 payload we consume."""

from __future__ import annotations

from pydantic import BaseModel, Field

from animelog.domain.catalog import AnimeRecord


class JikanImage(BaseModel):
    image_url: str | None = None


class JikanImages(BaseModel):
    jpg: JikanImage = Field(default_factory=JikanImage)


class JikanGenre(BaseModel):
    name: str


class JikanAnime(BaseModel):
    """One anime item as returned by ``GET /anime/{id}``.

    Unknown fields are ignored; only what an AnimeRecord needs is read.
    """

    mal_id: int
    title: str
    images: JikanImages = Field(default_factory=JikanImages)
    score: float | None = None
    year: int | None = None
    genres: list[JikanGenre] = Field(default_factory=list)

    def to_record(self) -> AnimeRecord:
        return AnimeRecord(
            mal_id=self.mal_id,
            title=self.title,
            image_url=self.images.jpg.image_url or "",
            score=self.score,
            year=self.year,
            genres=tuple(genre.name for genre in self.genres),
        )


class JikanAnimeResponse(BaseModel):
    data: JikanAnime
