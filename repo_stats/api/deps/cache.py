"""Stats cache dependency."""

from typing import Annotated

from fastapi import Depends, Request

from repo_stats.services.repository_stats import RepositoryStatsCache


def get_stats_cache(request: Request) -> RepositoryStatsCache:
    """Return the application-scoped cache created in the lifespan."""
    cache: RepositoryStatsCache = request.app.state.stats_cache
    return cache


StatsCache = Annotated[RepositoryStatsCache, Depends(get_stats_cache)]
