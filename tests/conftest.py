"""Root conftest: test infrastructure for all tests.

Provides:
- asyncio as the only anyio backend
- A fresh stats cache per test
- FakeGitHub patched in as the shared GitHub HTTP client
- API client with the stats cache dependency overridden
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from repo_stats.services.repository_stats import RepositoryStatsCache
from tests.helpers.github_fakes import FakeGitHub


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def stats_cache() -> RepositoryStatsCache:
    """An empty cache, discarded after the test."""
    return RepositoryStatsCache(ttl_seconds=3600)


@pytest.fixture
def fake_github():
    """SAFETY: route every GitHub call to canned data instead of the network."""
    fake = FakeGitHub()
    with patch(
        "repo_stats.services.github.read_operations.get_github_client",
        return_value=fake,
    ):
        yield fake


@pytest.fixture
async def api_client(stats_cache: RepositoryStatsCache):
    """HTTP client against the app with the per-test stats cache injected."""
    from repo_stats.api.deps.cache import get_stats_cache
    from repo_stats.main import app

    app.dependency_overrides[get_stats_cache] = lambda: stats_cache

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
