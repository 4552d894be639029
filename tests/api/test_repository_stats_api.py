"""API endpoint tests for the repository stats route.

Tests the HTTP layer: credential gating, query handling, response shape,
error codes, and coordination with the stats cache.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from httpx import AsyncClient

from repo_stats.services.repository_stats import (
    RepositoryStatsCache,
    RepositoryStatsError,
    build_cache_key,
)
from repo_stats.services.repository_stats.types import RepositoryStats
from tests.helpers.github_fakes import commit_json, repo_json

URL = "/api/v1/repository-stats"
AUTH = "Bearer ghp_test_token_12345"


def _seed_acme(fake_github) -> None:
    fake_github.org_repos["acme"] = [repo_json("alpine")]
    fake_github.commits["acme/alpine"] = [commit_json("a1"), commit_json("a2")]
    fake_github.commit_stats.update({"a1": (10, 2), "a2": (10, 2)})


def _cached_stats() -> RepositoryStats:
    return RepositoryStats(
        total_lines_added=7,
        total_lines_deleted=3,
        total_net_lines=4,
        repository_count=2,
        last_updated="2024-02-01T00:00:00.000Z",
    )


# ═══════════════════════════════════════════════════════════════════════════
# GET /api/v1/repository-stats
# ═══════════════════════════════════════════════════════════════════════════


class TestGetRepositoryStats:
    """Tests for the stats endpoint."""

    @pytest.mark.anyio
    async def test_end_to_end(self, api_client: AsyncClient, fake_github):
        _seed_acme(fake_github)

        response = await api_client.get(
            URL,
            params={"org": "acme", "since": "2024-01-01", "until": "2024-01-31"},
            headers={"Authorization": AUTH},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["totalLinesAdded"] == 20
        assert data["totalLinesDeleted"] == 4
        assert data["totalNetLines"] == 16
        assert data["repositoryCount"] == 1
        assert data["lastUpdated"].endswith("Z")
        assert set(data) == {
            "totalLinesAdded",
            "totalLinesDeleted",
            "totalNetLines",
            "repositoryCount",
            "lastUpdated",
        }

    @pytest.mark.anyio
    async def test_credential_forwarded_to_github(self, api_client: AsyncClient, fake_github):
        _seed_acme(fake_github)

        with patch.object(fake_github, "get", wraps=fake_github.get) as spy:
            await api_client.get(URL, params={"org": "acme"}, headers={"Authorization": AUTH})

        assert spy.call_args_list
        for call in spy.call_args_list:
            assert call.kwargs["headers"]["Authorization"] == AUTH

    @pytest.mark.anyio
    async def test_default_org(self, api_client: AsyncClient, fake_github):
        await api_client.get(URL, headers={"Authorization": AUTH})

        assert fake_github.paths[0] == "/orgs/vuori-clothing/repos"

    @pytest.mark.anyio
    async def test_missing_credential_is_401(self, api_client: AsyncClient, fake_github):
        response = await api_client.get(URL, params={"org": "acme"})

        assert response.status_code == 401
        assert response.json()["detail"] == "No Authentication provided"
        assert fake_github.calls == []

    @pytest.mark.anyio
    async def test_missing_credential_bypasses_populated_cache(
        self, api_client: AsyncClient, stats_cache: RepositoryStatsCache, fake_github
    ):
        stats_cache.put(build_cache_key("acme", None, None, AUTH), _cached_stats())

        with patch.object(stats_cache, "get", wraps=stats_cache.get) as spy:
            response = await api_client.get(URL, params={"org": "acme"})

        assert response.status_code == 401
        spy.assert_not_called()

    @pytest.mark.anyio
    async def test_cache_hit_returns_stored_value(
        self, api_client: AsyncClient, stats_cache: RepositoryStatsCache, fake_github
    ):
        stats_cache.put(build_cache_key("acme", None, None, AUTH), _cached_stats())

        response = await api_client.get(URL, params={"org": "acme"}, headers={"Authorization": AUTH})

        assert response.status_code == 200
        assert response.json() == {
            "totalLinesAdded": 7,
            "totalLinesDeleted": 3,
            "totalNetLines": 4,
            "repositoryCount": 2,
            "lastUpdated": "2024-02-01T00:00:00.000Z",
        }
        assert fake_github.calls == []

    @pytest.mark.anyio
    async def test_github_outage_returns_estimate(self, api_client: AsyncClient, fake_github):
        fake_github.failing_org_pages.add(1)

        response = await api_client.get(URL, params={"org": "acme"}, headers={"Authorization": AUTH})

        assert response.status_code == 200
        data = response.json()
        assert data["repositoryCount"] == 4
        assert data["totalLinesAdded"] == 44621
        assert data["totalLinesDeleted"] == 20813
        assert data["totalNetLines"] == 44621 - 20813

    @pytest.mark.anyio
    async def test_unexpected_failure_is_500(self, api_client: AsyncClient, fake_github):
        with patch(
            "repo_stats.api.v1.repository_stats.RepositoryStatsService.get_stats",
            side_effect=RepositoryStatsError("cache unavailable"),
        ):
            response = await api_client.get(
                URL, params={"org": "acme"}, headers={"Authorization": AUTH}
            )

        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching repository stats: cache unavailable"


class TestHealth:
    """Tests for the health endpoint."""

    @pytest.mark.anyio
    async def test_health(self, api_client: AsyncClient):
        response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
