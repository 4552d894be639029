"""Configuration package."""

from repo_stats.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
