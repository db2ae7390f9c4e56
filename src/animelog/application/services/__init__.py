"""Application services."""

from animelog.application.services.anime_enrichment_service import (
    AnimeEnrichmentService,
)
from animelog.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = [
    "AnimeEnrichmentService",
    "AuthenticationService",
]
