"""
Shared HTTP client for GitHub API operations.

One pooled AsyncClient serves every stats request. It is bound to the
configured API root and carries the media type and API version headers, so
callers only pass a relative path and their own Authorization header.
"""

import logging

import httpx

from repo_stats.config import settings

logger = logging.getLogger(__name__)

GITHUB_MEDIA_TYPE = "application/vnd.github+json"

_client: httpx.AsyncClient | None = None


def github_default_headers() -> dict[str, str]:
    """Headers sent on every GitHub call regardless of the caller."""
    return {
        "Accept": GITHUB_MEDIA_TYPE,
        "X-GitHub-Api-Version": settings.github_api_version,
    }


def get_github_client() -> httpx.AsyncClient:
    """
    Return the shared GitHub client, creating it on first use or after close.

    The Authorization header is not stored on the client: each stats request
    forwards the caller's credential per call.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            base_url=settings.github_api_url.rstrip("/"),
            headers=github_default_headers(),
            timeout=httpx.Timeout(30.0, connect=5.0),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            http2=True,
        )
        logger.debug(f"Created GitHub HTTP client for {settings.github_api_url}")
    return _client


async def close_github_client() -> None:
    """Close the shared client on shutdown; the next call builds a fresh one."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.debug("Closed GitHub HTTP client")
    _client = None
