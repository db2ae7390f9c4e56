from animelog.domain.catalog.ports.anime_catalog import AnimeCatalog

__all__ = ["AnimeCatalog"]
