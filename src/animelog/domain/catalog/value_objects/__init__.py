from animelog.domain.catalog.value_objects.anime_record import (
    PLACEHOLDER_TITLE,
    AnimeRecord,
)

__all__ = ["PLACEHOLDER_TITLE", "AnimeRecord"]
