from datetime import UTC, datetime

from repo_stats.services.repository_stats.types import CollectedTotals, RepositoryStats


def format_timestamp(value: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_stats(totals: CollectedTotals, now: datetime | None = None) -> RepositoryStats:
    """Build the final stats; live and estimated totals are treated alike."""
    return RepositoryStats(
        total_lines_added=totals.additions,
        total_lines_deleted=totals.deletions,
        total_net_lines=totals.additions - totals.deletions,
        repository_count=totals.repository_count,
        last_updated=format_timestamp(now or datetime.now(UTC)),
    )
