"""
TTL cache for assembled repository stats.

Keys embed a fingerprint of the caller's credential so that two callers with
different GitHub access never share an entry, while the credential itself is
never stored. Each entry carries its own expiry; expired entries are treated
as misses even if they have not been evicted yet.
"""

import hashlib
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from cachetools import TLRUCache  # type: ignore[import-untyped]

from repo_stats.services.repository_stats.types import RepositoryStats

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "repo-stats-filtered"
FINGERPRINT_LENGTH = 16


@dataclass(frozen=True)
class CacheEntry:
    """A stored stats value and the epoch second it stops being served."""

    key: str
    value: RepositoryStats
    expires_at: float


def credential_fingerprint(authorization: str) -> str:
    """Truncated SHA-256 of a credential, safe to embed in cache keys."""
    return hashlib.sha256(authorization.encode()).hexdigest()[:FINGERPRINT_LENGTH]


def build_cache_key(
    org_name: str,
    since: str | None,
    until: str | None,
    authorization: str,
) -> str:
    """
    Build the cache key for a stats query.

    Usage:
        key = build_cache_key("acme", "2024-01-01", None, "Bearer ghp_...")
        # repo-stats-filtered:<16 hex>:acme:2024-01-01:now
    """
    fingerprint = credential_fingerprint(authorization)
    return f"{CACHE_KEY_PREFIX}:{fingerprint}:{org_name}:{since or 'all'}:{until or 'now'}"


def _entry_expiry(_key: str, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at


class RepositoryStatsCache:
    """
    Process-local stats cache with per-entry TTL.

    Created once per application (see the lifespan in main.py) and injected
    into request handlers. Not shared across processes; concurrent misses for
    the same key each recompute.
    """

    def __init__(
        self,
        ttl_seconds: int = 3600,
        maxsize: int = 1024,
        timer: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        self._lock = threading.Lock()
        self._entries: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize, ttu=_entry_expiry, timer=timer
        )

    def get(self, key: str) -> RepositoryStats | None:
        """Return the cached stats for key, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)

        if entry is None or not self._timer() < entry.expires_at:
            logger.debug(f"Cache MISS: {key}")
            return None

        logger.debug(f"Cache HIT: {key}")
        return entry.value

    def put(self, key: str, value: RepositoryStats, ttl_seconds: int | None = None) -> None:
        """Insert or replace the entry for key."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        entry = CacheEntry(key=key, value=value, expires_at=self._timer() + ttl)
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        """Drop the entry for key if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("Cleared repository stats cache")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
