"""Application queries - read-only operations."""

from animelog.application.queries.catalog import BrowseCatalogQuery
from animelog.application.queries.lists import GetUserListQuery

__all__ = [
    "BrowseCatalogQuery",
    "GetUserListQuery",
]
