"""API dependencies - re-exports from submodules."""

from .auth import CallerCredential, require_authorization
from .cache import StatsCache, get_stats_cache

__all__ = [
    # Auth
    "CallerCredential",
    "require_authorization",
    # Cache
    "StatsCache",
    "get_stats_cache",
]
