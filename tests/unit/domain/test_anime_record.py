"""Tests for the AnimeRecord value object."""

import dataclasses

import pytest

from animelog.domain.catalog import PLACEHOLDER_TITLE, AnimeRecord


class TestAnimeRecord:
    def test_placeholder_fields(self):
        record = AnimeRecord.placeholder(21)

        assert record.mal_id == 21
        assert record.title == PLACEHOLDER_TITLE == "Data Unavailable"
        assert record.image_url == ""
        assert record.score is None
        assert record.year is None
        assert record.genres == ()
        assert record.is_placeholder

    def test_real_record_is_not_placeholder(self):
        record = AnimeRecord(
            mal_id=1,
            title="Cowboy Bebop",
            image_url="https://cdn.myanimelist.net/images/anime/4/19644.jpg",
            score=8.75,
            year=1998,
            genres=("Action", "Sci-Fi"),
        )

        assert not record.is_placeholder

    def test_records_are_immutable(self):
        record = AnimeRecord.placeholder(5)

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Changed"  # type: ignore[misc]

    def test_equal_by_value(self):
        assert AnimeRecord.placeholder(7) == AnimeRecord.placeholder(7)
        assert AnimeRecord.placeholder(7) != AnimeRecord.placeholder(8)
