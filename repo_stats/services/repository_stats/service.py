"""
Repository stats service.

Orchestrates a churn query: cache lookup, live collection from GitHub,
fallback to a fixed estimate when live collection fails, assembly and
caching of the result.

Live collection errors never reach the caller; they degrade to the estimate,
which is cached and returned exactly like live data. Only failures outside
that guarded step (assembly, caching) escape, as RepositoryStatsError, and
they invalidate the cache key so the next request starts from scratch.
"""

import logging

from repo_stats.config import settings
from repo_stats.services.github import GitHubReadOperations
from repo_stats.services.repository_stats.assembler import assemble_stats
from repo_stats.services.repository_stats.cache import RepositoryStatsCache, build_cache_key
from repo_stats.services.repository_stats.collector import (
    calculate_commit_stats,
    filter_target_repos,
    resolve_date_window,
)
from repo_stats.services.repository_stats.exceptions import (
    NoTargetRepositoriesFound,
    RepositoryStatsError,
)
from repo_stats.services.repository_stats.fallback import estimate_totals
from repo_stats.services.repository_stats.types import (
    CollectedTotals,
    RepositoryStats,
    StatsRequest,
    StatsSource,
)

logger = logging.getLogger(__name__)


class RepositoryStatsService:
    """Computes churn statistics for the allow-listed repositories of an org."""

    def __init__(self, cache: RepositoryStatsCache):
        self.cache = cache

    async def get_stats(self, request: StatsRequest) -> RepositoryStats:
        """
        Return churn stats for the request, from cache when fresh.

        Raises:
            RepositoryStatsError: If the result could not be assembled or cached
        """
        cache_key = build_cache_key(
            request.org_name, request.since, request.until, request.authorization
        )

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info(f"Returning cached repository stats for {request.org_name}")
            return cached

        try:
            logger.info(f"Fetching repository statistics for organization: {request.org_name}")
            totals = await self.collect_totals(request)
            stats = assemble_stats(totals)
            self.cache.put(cache_key, stats, settings.stats_cache_ttl_seconds)
            logger.info(
                f"Serving {totals.source.value} stats for {request.org_name}: "
                f"+{stats.total_lines_added} -{stats.total_lines_deleted} "
                f"across {stats.repository_count} repositories"
            )
            return stats
        except Exception as e:
            logger.error(f"Error fetching repository stats: {e}", exc_info=True)
            self.cache.delete(cache_key)
            raise RepositoryStatsError(str(e)) from e

    async def collect_totals(self, request: StatsRequest) -> CollectedTotals:
        """Collect live totals, degrading to the fixed estimate on any failure."""
        logger.info(f"Fetching stats from {request.since or 'beginning'} to {request.until or 'now'}")
        try:
            return await self._collect_live(request)
        except Exception as e:
            logger.warning(f"Failed to fetch real repository stats, using estimation: {e}")
            return estimate_totals()

    async def _collect_live(self, request: StatsRequest) -> CollectedTotals:
        since, until = resolve_date_window(request.since, request.until)
        github = GitHubReadOperations(request.authorization)

        all_repos = await github.get_all_org_repos(request.org_name)
        repos = filter_target_repos(all_repos, settings.target_repository_set)

        logger.info(
            f"Found {len(all_repos)} total repositories in organization {request.org_name}"
        )
        logger.info(
            f"Filtering to {len(repos)} target repositories: "
            f"{', '.join(repo.name for repo in repos)}"
        )

        if not repos:
            logger.warning("No target repositories found, using fallback estimation")
            raise NoTargetRepositoriesFound(request.org_name)

        commit_totals = await calculate_commit_stats(github, repos, since, until)

        return CollectedTotals(
            additions=commit_totals.additions,
            deletions=commit_totals.deletions,
            repository_count=len(repos),
            source=StatsSource.LIVE,
        )
