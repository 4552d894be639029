"""
GitHub service package.

Usage: `from repo_stats.services.github import GitHubReadOperations`

Module structure:
- read_operations.py: Read-only API operations (repos, commits, commit stats)
- helpers.py: Rate limit handling and error utilities
- http_client.py: Shared pooled HTTP client
- types.py: Data types
- exceptions.py: Custom exceptions
"""

from repo_stats.services.github.exceptions import GitHubAPIError
from repo_stats.services.github.helpers import RateLimitInfo, handle_error_response
from repo_stats.services.github.http_client import close_github_client, get_github_client
from repo_stats.services.github.read_operations import GitHubReadOperations
from repo_stats.services.github.types import CommitSummary, GitHubRepo

__all__ = [
    "GitHubReadOperations",
    # HTTP client lifecycle
    "close_github_client",
    "get_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    # Types
    "CommitSummary",
    "GitHubRepo",
]
