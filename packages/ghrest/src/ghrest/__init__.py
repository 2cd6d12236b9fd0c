"""GitHub REST API client utilities."""

from .client import GitHubClient, ServerError, get_token
from .models import GitHubBranch, GitHubCommitRef, GitHubRepository, GitTree, GitTreeEntry

__all__ = [
    "GitHubClient",
    "GitHubRepository",
    "GitHubBranch",
    "GitHubCommitRef",
    "GitTree",
    "GitTreeEntry",
    "ServerError",
    "get_token",
]
