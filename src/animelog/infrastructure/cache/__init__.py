from animelog.infrastructure.cache.anime_cache import AnimeResponseCache, CacheEntry

__all__ = ["AnimeResponseCache", "CacheEntry"]
