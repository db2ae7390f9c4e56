"""Batch enrichment against a mocked Jikan, throttled by a real RateLimiter.

Every ``GET /anime/{id}`` that reaches the transport records when it was
sent; consecutive requests must be at least one limiter interval apart.
"""

import time

import httpx
import pytest
import respx

from animelog.application.services import AnimeEnrichmentService
from animelog.infrastructure.cache import AnimeResponseCache
from animelog.infrastructure.catalog import JikanCatalogClient
from animelog.infrastructure.resilience import RateLimiter, RetryPolicy

pytestmark = pytest.mark.integration

BASE_URL = "https://api.jikan.moe/v4"
# Slack for monotonic clock granularity between the limiter and the mock.
TOLERANCE = 0.01


async def no_wait(seconds: float) -> None:
    return None


class TimestampedCatalog:
    """respx side effect answering ``/anime/{id}`` and recording send times."""

    def __init__(self, down_ids: frozenset[int] = frozenset()):
        self.down_ids = down_ids
        self.sent: list[tuple[int, float]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        anime_id = int(request.url.path.rsplit("/", 1)[-1])
        self.sent.append((anime_id, time.monotonic()))
        if anime_id in self.down_ids:
            return httpx.Response(503)
        return httpx.Response(
            200,
            json={
                "data": {
                    "mal_id": anime_id,
                    "title": f"Anime {anime_id}",
                    "images": {
                        "jpg": {"image_url": f"https://cdn.example/{anime_id}.jpg"},
                    },
                },
            },
        )

    def gaps(self) -> list[float]:
        times = [sent_at for _, sent_at in self.sent]
        return [later - earlier for earlier, later in zip(times, times[1:])]


async def resolve_with_limiter(
    interval: float,
    anime_ids: list[int],
    upstream: TimestampedCatalog,
):
    respx.get(url__startswith=f"{BASE_URL}/anime/").mock(side_effect=upstream)
    catalog = JikanCatalogClient(
        rate_limiter=RateLimiter(interval=interval),
        base_url=BASE_URL,
    )
    service = AnimeEnrichmentService(
        catalog=catalog,
        cache=AnimeResponseCache(),
        retry_policy=RetryPolicy(sleep=no_wait),
    )
    try:
        return await service.resolve_many(anime_ids)
    finally:
        await catalog.close()


class TestEnrichmentRateLimit:
    @respx.mock
    async def test_requests_are_spaced_by_interval(self):
        interval = 0.1
        upstream = TimestampedCatalog()

        records = await resolve_with_limiter(interval, [3, 1, 2], upstream)

        assert [record.mal_id for record in records] == [3, 1, 2]
        assert len(upstream.sent) == 3
        assert all(gap >= interval - TOLERANCE for gap in upstream.gaps())

    @respx.mock
    async def test_retries_share_the_same_limiter(self):
        interval = 0.05
        upstream = TimestampedCatalog(down_ids=frozenset({2}))

        records = await resolve_with_limiter(interval, [1, 2], upstream)

        assert records[0].title == "Anime 1"
        assert records[1].is_placeholder
        # One call for id 1, four attempts for id 2.
        assert len(upstream.sent) == 5
        assert all(gap >= interval - TOLERANCE for gap in upstream.gaps())

    @pytest.mark.slow
    @respx.mock
    async def test_default_interval_is_one_second(self):
        upstream = TimestampedCatalog()

        await resolve_with_limiter(1.0, [1, 2, 3], upstream)

        assert len(upstream.sent) == 3
        assert all(gap >= 1.0 - TOLERANCE for gap in upstream.gaps())
