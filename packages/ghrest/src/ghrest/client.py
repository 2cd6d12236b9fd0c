"""GitHub REST API client."""

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)

from .models import GitHubBranch, GitHubRepository, GitTree

logger = logging.getLogger(__name__)

# Retry configuration
DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 10  # seconds
DEFAULT_TIMEOUT = 30.0  # seconds

# Retryable exceptions
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.WriteTimeout,
    httpx.PoolTimeout,
    httpx.NetworkError,
)


class ServerError(httpx.HTTPStatusError):
    """5xx response, retried like a network error."""


def get_token(token: str | None = None, use_env: bool = True) -> str | None:
    """
    Get GitHub token.

    Priority:
    1. Explicitly provided token
    2. Environment variable GH_TOKEN / GITHUB_TOKEN (if use_env=True)

    Returns:
        GitHub token or None
    """
    if token:
        logger.debug("Using explicitly provided token")
        return token

    if use_env:
        env_token = os.environ.get("GH_TOKEN") or os.environ.get("GITHUB_TOKEN")
        if env_token:
            logger.info("Using token from environment variable")
            return env_token

    return None


def create_retry_decorator(max_retries: int = DEFAULT_MAX_RETRIES):
    """Create a retry decorator with specified max attempts."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS + (ServerError,)),
        stop=stop_after_attempt(max(max_retries, 1)),
        wait=wait_exponential(multiplier=1, min=DEFAULT_MIN_WAIT, max=DEFAULT_MAX_WAIT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def validate_base_url(base_url: str) -> str:
    """
    Check that base_url is an absolute http(s) URL.

    Raises:
        httpx.InvalidURL: URL cannot be parsed
        ValueError: URL is not absolute http(s)
    """
    url = httpx.URL(base_url)
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"Invalid GitHub API endpoint: {base_url!r}")
    return base_url.rstrip("/")


def repo_path(full_name: str) -> str:
    """Percent-encode "owner/repo" segment by segment."""
    return "/".join(quote(part, safe="") for part in full_name.split("/"))


class GitHubClient:
    """GitHub REST API client with retry support."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        use_env_token: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub personal access token (optional)
            base_url: Custom base URL, e.g. a GitHub Enterprise API endpoint
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts per request (1 disables retries)
            use_env_token: Fall back to GH_TOKEN / GITHUB_TOKEN when no token given
            transport: Custom httpx transport (used by tests)

        Raises:
            httpx.InvalidURL, ValueError: base_url is malformed
        """
        self.base_url = validate_base_url(base_url or self.BASE_URL)
        self.timeout = timeout
        self.max_retries = max_retries
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "scriptscout-github-client",
        }

        resolved_token = get_token(token, use_env=use_env_token)

        if resolved_token:
            self.headers["Authorization"] = f"token {resolved_token}"
            logger.debug("GitHub client initialized with token")
        else:
            logger.debug("GitHub client initialized without token (rate limited)")
        logger.debug("GitHub client ready, base_url=%s, max_retries=%d", self.base_url, max_retries)

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self.headers

    def _request(
        self, method: str, endpoint: str, **kwargs: Any
    ) -> httpx.Response:
        """Make HTTP request to GitHub API with retry."""
        url = f"{self.base_url}{endpoint}"

        @create_retry_decorator(self.max_retries)
        def do_request() -> httpx.Response:
            logger.debug("Request: %s %s", method, url)
            with httpx.Client(
                timeout=self.timeout, headers=self.headers, transport=self.transport
            ) as client:
                response = client.request(method, url, **kwargs)
                logger.debug(
                    "Response: %s %s (status=%d)",
                    method,
                    endpoint,
                    response.status_code,
                )
                if response.status_code >= 500:
                    logger.warning("Server error %d on %s", response.status_code, endpoint)
                    raise ServerError(
                        f"Server error {response.status_code}",
                        request=response.request,
                        response=response,
                    )
                response.raise_for_status()
                return response

        return do_request()

    def get_repository(self, full_name: str) -> GitHubRepository:
        """
        Get repository metadata.

        Args:
            full_name: Repository in "owner/repo" form

        Returns:
            GitHubRepository
        """
        logger.info("Fetching repository: %s", full_name)
        response = self._request("GET", f"/repos/{repo_path(full_name)}")
        return GitHubRepository.model_validate(response.json())

    def get_branch(self, full_name: str, branch: str) -> GitHubBranch:
        """
        Get a branch and its head commit.

        Args:
            full_name: Repository in "owner/repo" form
            branch: Branch name

        Returns:
            GitHubBranch
        """
        logger.info("Fetching branch: %s@%s", full_name, branch)
        endpoint = f"/repos/{repo_path(full_name)}/branches/{quote(branch, safe='')}"
        response = self._request("GET", endpoint)
        return GitHubBranch.model_validate(response.json())

    def get_tree(self, full_name: str, sha: str, recursive: bool = False) -> GitTree:
        """
        Get the git tree at a commit or tree SHA.

        Args:
            full_name: Repository in "owner/repo" form
            sha: Commit or tree SHA
            recursive: List every entry at all depths in one response

        Returns:
            GitTree
        """
        logger.info("Fetching tree: %s@%s recursive=%s", full_name, sha, recursive)
        params = {"recursive": "1"} if recursive else {}
        endpoint = f"/repos/{repo_path(full_name)}/git/trees/{quote(sha, safe='')}"
        response = self._request("GET", endpoint, params=params)
        tree = GitTree.model_validate(response.json())
        logger.debug("Tree fetched: %s@%s (%d entries)", full_name, sha, len(tree.tree))
        return tree
