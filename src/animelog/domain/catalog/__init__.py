"""Catalog domain - anime data owned by the upstream catalog.

This domain handles:
- AnimeRecord snapshots (real or placeholder)
- The AnimeCatalog port implemented by infrastructure clients
- Errors raised when the upstream catalog fails
"""

from animelog.domain.catalog.exceptions import (
    CatalogError,
    CatalogResponseError,
    CatalogUnavailableError,
)
from animelog.domain.catalog.ports import AnimeCatalog
from animelog.domain.catalog.value_objects import PLACEHOLDER_TITLE, AnimeRecord

__all__ = [
    "PLACEHOLDER_TITLE",
    "AnimeCatalog",
    "AnimeRecord",
    "CatalogError",
    "CatalogResponseError",
    "CatalogUnavailableError",
]
