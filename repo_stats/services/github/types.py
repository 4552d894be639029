"""Data types for GitHub API responses."""

from dataclasses import dataclass


@dataclass
class GitHubRepo:
    """Normalized organization repository listing row."""

    name: str
    full_name: str
    updated_at: str


@dataclass
class CommitSummary:
    """Line changes of a single commit."""

    sha: str
    additions: int
    deletions: int
