from animelog.infrastructure.catalog.jikan_client import JikanCatalogClient
from animelog.infrastructure.catalog.jikan_models import JikanAnime, JikanAnimeResponse

__all__ = ["JikanAnime", "JikanAnimeResponse", "JikanCatalogClient"]
