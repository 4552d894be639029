"""Live churn collection from GitHub.

Filters an organization's listing down to the allow-listed repositories and
sums commit additions/deletions for them over a date window. Collection is
deliberately bounded: repositories are processed in small batches with a
pause between batches, and each repository only looks at the first few
commits of the first few pages. Limits default to the values in settings.
"""

import asyncio
import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from repo_stats.config import settings
from repo_stats.services.github import GitHubReadOperations, GitHubRepo
from repo_stats.services.repository_stats.types import CommitTotals

logger = logging.getLogger(__name__)


def parse_window_bound(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are read as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def resolve_date_window(
    since: str | None,
    until: str | None,
    now: datetime | None = None,
    lookback_days: int | None = None,
) -> tuple[datetime, datetime]:
    """
    Turn optional query strings into a concrete [since, until] window.

    Raises:
        ValueError: If either bound is not a valid ISO date
    """
    if lookback_days is None:
        lookback_days = settings.stats_lookback_days
    now = now or datetime.now(UTC)
    since_dt = parse_window_bound(since) if since else now - timedelta(days=lookback_days)
    until_dt = parse_window_bound(until) if until else now
    return since_dt, until_dt


def format_github_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def filter_target_repos(repos: list[GitHubRepo], targets: Iterable[str]) -> list[GitHubRepo]:
    """Keep repos whose name is on the allow-list, preserving listing order."""
    allowed = {name.lower() for name in targets}
    return [repo for repo in repos if repo.name.lower() in allowed]


async def _commit_totals(
    github: GitHubReadOperations,
    full_name: str,
    commit: object,
) -> CommitTotals:
    """Line changes of one commit-list row; zero when it cannot be read."""
    sha = commit.get("sha") if isinstance(commit, dict) else None
    if not sha:
        logger.warning(f"Skipping commit without sha in {full_name}")
        return CommitTotals()

    try:
        summary = await github.get_commit_stats(full_name, sha)
    except Exception as e:
        logger.warning(f"Error fetching commit {sha} in {full_name}: {e}")
        return CommitTotals()

    if not summary:
        return CommitTotals()
    return CommitTotals(additions=summary.additions, deletions=summary.deletions)


async def fetch_repository_commit_stats(
    github: GitHubReadOperations,
    full_name: str,
    since: datetime,
    until: datetime,
    per_page: int | None = None,
    max_pages: int | None = None,
    max_commits_per_page: int | None = None,
) -> CommitTotals:
    """
    Sum additions/deletions for one repository over the window.

    Only the first max_commits_per_page commits of each of the first
    max_pages pages are inspected. A commit that cannot be read is skipped;
    a failing commit-list call stops pagination and keeps what was already
    counted.
    """
    per_page = per_page or settings.commits_per_page
    max_pages = max_pages or settings.max_commit_pages
    max_commits_per_page = max_commits_per_page or settings.max_commits_per_page

    totals = CommitTotals()
    since_str = format_github_timestamp(since)
    until_str = format_github_timestamp(until)

    for page in range(1, max_pages + 1):
        try:
            commits = await github.get_commits(
                full_name, since_str, until_str, page=page, per_page=per_page
            )
        except Exception as e:
            logger.warning(f"Error fetching commits for {full_name} (page {page}): {e}")
            break

        if not commits:
            break

        for commit in commits[:max_commits_per_page]:
            totals += await _commit_totals(github, full_name, commit)

        if len(commits) < per_page:
            break

    return totals


async def calculate_commit_stats(
    github: GitHubReadOperations,
    repos: list[GitHubRepo],
    since: datetime,
    until: datetime,
    batch_size: int | None = None,
    batch_delay: float | None = None,
    per_page: int | None = None,
    max_pages: int | None = None,
    max_commits_per_page: int | None = None,
) -> CommitTotals:
    """
    Sum commit stats across repositories, batch_size at a time.

    Each batch runs concurrently and is fully joined before the next one
    starts, with batch_delay seconds between batches. A repository that fails
    outright contributes zero.
    """
    batch_size = batch_size or settings.stats_batch_size
    if batch_delay is None:
        batch_delay = settings.stats_batch_delay_seconds

    logger.info(
        f"Calculating commit stats from {format_github_timestamp(since)} "
        f"to {format_github_timestamp(until)}"
    )

    async def collect(repo: GitHubRepo) -> CommitTotals:
        try:
            return await fetch_repository_commit_stats(
                github,
                repo.full_name,
                since,
                until,
                per_page=per_page,
                max_pages=max_pages,
                max_commits_per_page=max_commits_per_page,
            )
        except Exception as e:
            logger.warning(f"Failed to fetch stats for {repo.full_name}: {e}")
            return CommitTotals()

    totals = CommitTotals()
    for start in range(0, len(repos), batch_size):
        batch = repos[start : start + batch_size]
        results = await asyncio.gather(*[collect(repo) for repo in batch])
        for result in results:
            totals += result

        # Pause between batches to stay friendly with GitHub rate limits
        if start + batch_size < len(repos):
            await asyncio.sleep(batch_delay)

    return totals
