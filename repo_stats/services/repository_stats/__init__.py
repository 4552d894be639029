"""
Repository churn statistics.

Module structure:
- service.py: RepositoryStatsService, the request pipeline
- collector.py: Allow-list filter and batched commit-stats collection
- cache.py: Fingerprinted TTL cache
- fallback.py: Fixed estimate for failed collections
- assembler.py: Final result construction
- types.py: Data types
- exceptions.py: Custom exceptions
"""

from repo_stats.services.repository_stats.cache import RepositoryStatsCache, build_cache_key
from repo_stats.services.repository_stats.exceptions import (
    NoTargetRepositoriesFound,
    RepositoryStatsError,
)
from repo_stats.services.repository_stats.service import RepositoryStatsService
from repo_stats.services.repository_stats.types import (
    CollectedTotals,
    CommitTotals,
    RepositoryStats,
    StatsRequest,
    StatsSource,
)

__all__ = [
    "RepositoryStatsService",
    "RepositoryStatsCache",
    "build_cache_key",
    # Exceptions
    "NoTargetRepositoriesFound",
    "RepositoryStatsError",
    # Types
    "CollectedTotals",
    "CommitTotals",
    "RepositoryStats",
    "StatsRequest",
    "StatsSource",
]
