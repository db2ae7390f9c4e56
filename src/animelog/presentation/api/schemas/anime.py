"""Schemas for anime records and catalog pass-through responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from animelog.domain.catalog import AnimeRecord


class AnimeImageResponse(BaseModel):
    image_url: str


class AnimeImagesResponse(BaseModel):
    jpg: AnimeImageResponse


class GenreResponse(BaseModel):
    name: str


class AnimeRecordResponse(BaseModel):
    """AnimeRecord in the same shape as an upstream catalog item."""

    mal_id: int
    title: str
    images: AnimeImagesResponse
    score: float | None = None
    year: int | None = None
    genres: list[GenreResponse] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: AnimeRecord) -> AnimeRecordResponse:
        return cls(
            mal_id=record.mal_id,
            title=record.title,
            images=AnimeImagesResponse(
                jpg=AnimeImageResponse(image_url=record.image_url),
            ),
            score=record.score,
            year=record.year,
            genres=[GenreResponse(name=genre) for genre in record.genres],
        )


class AnimeDetailResponse(BaseModel):
    """Upstream detail payload, passed through unchanged."""

    success: bool = True
    data: dict[str, Any]
