"""Data types for repository churn statistics."""

from dataclasses import dataclass
from enum import Enum


class StatsSource(str, Enum):
    """Where a set of totals came from."""

    LIVE = "live"  # Collected from GitHub for this request
    ESTIMATED = "estimated"  # Fixed historical snapshot


@dataclass(frozen=True)
class StatsRequest:
    """A churn query for one organization and date window."""

    org_name: str
    since: str | None  # ISO date/datetime as received, None = lookback default
    until: str | None  # ISO date/datetime as received, None = now
    authorization: str  # Forwarded verbatim to GitHub


@dataclass(frozen=True)
class CommitTotals:
    """Summed line changes for one or more repositories."""

    additions: int = 0
    deletions: int = 0

    def __add__(self, other: "CommitTotals") -> "CommitTotals":
        return CommitTotals(
            additions=self.additions + other.additions,
            deletions=self.deletions + other.deletions,
        )


@dataclass(frozen=True)
class CollectedTotals:
    """Totals ready for assembly, tagged with their source."""

    additions: int
    deletions: int
    repository_count: int
    source: StatsSource


@dataclass(frozen=True)
class RepositoryStats:
    """Final churn statistics returned to callers and stored in the cache."""

    total_lines_added: int
    total_lines_deleted: int
    total_net_lines: int
    repository_count: int
    last_updated: str  # ISO 8601 UTC timestamp
