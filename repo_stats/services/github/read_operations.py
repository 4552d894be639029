"""
GitHub API read operations.

Provides the read-only calls used for churn statistics:
- Organization repository listing (paginated)
- Commit listing for a date window
- Per-commit diff statistics
"""

import logging
from typing import Any

from repo_stats.services.github.exceptions import GitHubAPIError
from repo_stats.services.github.helpers import RateLimitInfo, handle_error_response
from repo_stats.services.github.http_client import get_github_client
from repo_stats.services.github.types import CommitSummary, GitHubRepo

logger = logging.getLogger(__name__)

REPOS_PER_PAGE = 100


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    The caller's Authorization header is forwarded verbatim, so both
    "Bearer ..." and "token ..." credentials work unchanged.

    Paths are relative to the shared client, which supplies the API root,
    media type, and API version.
    """

    def __init__(self, authorization: str):
        self._headers = {"Authorization": authorization}

    def _normalize_repo(self, data: dict[str, Any]) -> GitHubRepo:
        """Convert GitHub API response to GitHubRepo dataclass."""
        return GitHubRepo(
            name=data["name"],
            full_name=data["full_name"],
            updated_at=data.get("updated_at", ""),
        )

    async def get_org_repos(
        self,
        org: str,
        page: int = 1,
        per_page: int = REPOS_PER_PAGE,
        sort: str = "updated",
        direction: str = "desc",
    ) -> list[GitHubRepo]:
        """
        Fetch one page of an organization's repositories.

        Args:
            org: Organization login
            page: Page number (1-indexed)
            per_page: Items per page (max 100)
            sort: Sort by ('created', 'updated', 'pushed', 'full_name')
            direction: Sort direction ('asc', 'desc')

        Returns:
            Repositories on the page; empty when past the last page
        """
        params: dict[str, str | int] = {
            "per_page": min(per_page, 100),
            "page": page,
            "sort": sort,
            "direction": direction,
        }

        client = get_github_client()
        response = await client.get(
            f"/orgs/{org}/repos",
            headers=self._headers,
            params=params,
        )

        handle_error_response(response, org)

        rate_info = RateLimitInfo(response)
        if rate_info.remaining is not None:
            logger.debug(f"GitHub rate limit remaining: {rate_info.remaining}")

        data = response.json()
        if not isinstance(data, list):
            return []
        return [self._normalize_repo(r) for r in data]

    async def get_all_org_repos(self, org: str) -> list[GitHubRepo]:
        """
        Fetch every repository visible to the credential in an organization.

        Pages through the listing, most recently updated first, until an empty
        page or a page shorter than the page size. A failing page raises;
        partial listings are never returned.
        """
        repos: list[GitHubRepo] = []
        page = 1

        while True:
            batch = await self.get_org_repos(org, page=page, per_page=REPOS_PER_PAGE)
            if not batch:
                break

            repos.extend(batch)

            if len(batch) < REPOS_PER_PAGE:
                break
            page += 1

        return repos

    async def get_commits(
        self,
        full_name: str,
        since: str,
        until: str,
        page: int = 1,
        per_page: int = 100,
    ) -> list[dict[str, Any]]:
        """
        Fetch one page of commits within a date window.

        Args:
            full_name: Repository in "owner/repo" form
            since: ISO 8601 lower bound
            until: ISO 8601 upper bound
            page: Page number (1-indexed)
            per_page: Items per page (max 100)

        Returns:
            Raw commit objects from the list endpoint (no stats included)
        """
        client = get_github_client()
        response = await client.get(
            f"/repos/{full_name}/commits",
            headers=self._headers,
            params={
                "since": since,
                "until": until,
                "per_page": min(per_page, 100),
                "page": page,
            },
        )

        handle_error_response(response, full_name)

        data = response.json()
        if not isinstance(data, list):
            return []
        return data

    async def get_commit_stats(self, full_name: str, sha: str) -> CommitSummary | None:
        """
        Fetch additions/deletions for a single commit.

        Returns:
            CommitSummary, or None when GitHub reports no stats for the commit

        Raises:
            GitHubAPIError: On any non-200 response or a body that is not an object
        """
        client = get_github_client()
        response = await client.get(
            f"/repos/{full_name}/commits/{sha}",
            headers=self._headers,
        )

        handle_error_response(response, full_name)

        data = response.json()
        if not isinstance(data, dict):
            raise GitHubAPIError(f"Unexpected commit detail payload for {full_name}@{sha}")

        stats = data.get("stats")
        if not stats:
            return None

        return CommitSummary(
            sha=sha,
            additions=stats.get("additions", 0),
            deletions=stats.get("deletions", 0),
        )
