from animelog.application.queries.catalog.browse_catalog_query import (
    BrowseCatalogQuery,
)

__all__ = ["BrowseCatalogQuery"]
