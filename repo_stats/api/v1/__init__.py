from repo_stats.api.v1 import repository_stats

__all__ = [
    "repository_stats",
]
