"""Integration tests for /api/watchlist endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestWatchlist:
    def test_add_and_duplicate(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        first = test_client.post(
            f"{api_prefix}/watchlist",
            json={"id": 30},
            headers=auth_headers,
        )
        second = test_client.post(
            f"{api_prefix}/watchlist",
            json={"id": 30},
            headers=auth_headers,
        )

        assert first.json() == {
            "message": "Added to watch list successfully",
            "isWatchLater": True,
        }
        assert second.json() == {
            "message": "This anime is already in your watchlist",
            "isWatchLater": True,
        }

    def test_empty_watchlist(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        response = test_client.get(f"{api_prefix}/watchlist", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Watchlist is empty", "data": []}

    def test_list_watchlist(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        for anime_id in (2, 999):
            test_client.post(
                f"{api_prefix}/watchlist",
                json={"id": anime_id},
                headers=auth_headers,
            )

        response = test_client.get(f"{api_prefix}/watchlist", headers=auth_headers)

        body = response.json()
        assert body["message"] == "Watchlist retrieved successfully"
        assert [item["title"] for item in body["data"]] == [
            "Anime 2",
            "Data Unavailable",
        ]

    def test_watchlist_is_separate_from_favorites(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        test_client.post(
            f"{api_prefix}/favorites",
            json={"id": 1},
            headers=auth_headers,
        )

        response = test_client.get(f"{api_prefix}/watchlist", headers=auth_headers)

        assert response.json()["data"] == []

    def test_remove(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_prefix: str,
    ):
        test_client.post(
            f"{api_prefix}/watchlist",
            json={"id": 30},
            headers=auth_headers,
        )

        removed = test_client.delete(f"{api_prefix}/watchlist/30", headers=auth_headers)
        missing = test_client.delete(f"{api_prefix}/watchlist/30", headers=auth_headers)

        assert removed.status_code == 200
        assert removed.json() == {
            "message": "Removed from watch list successfully",
            "isWatchLater": False,
        }
        assert missing.status_code == 404
        assert missing.json() == {
            "message": "Anime not found in watchlist",
            "isWatchLater": False,
        }
