"""GitHub client construction from repository configs."""

import logging

import httpx
from ghrest import GitHubClient
from ghrest.client import DEFAULT_TIMEOUT

from .exceptions import ClientConstructionError
from .models import RepositoryConfig

logger = logging.getLogger(__name__)


def build_client(
    config: RepositoryConfig,
    *,
    timeout: float | None = None,
    max_retries: int = 1,
    transport: httpx.BaseTransport | None = None,
) -> GitHubClient:
    """
    Create a GitHub client for a repository config.

    A non-empty base_url replaces the public API endpoint and a non-empty
    access_token authenticates; otherwise the client is anonymous. Ambient
    credentials (environment, gh cli) are never used.

    Raises:
        ClientConstructionError: the endpoint is malformed
    """
    try:
        return GitHubClient(
            token=config.access_token or None,
            base_url=config.base_url or None,
            timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            max_retries=max_retries,
            use_env_token=False,
            transport=transport,
        )
    except (httpx.InvalidURL, ValueError) as e:
        logger.error("Fail to creation of github client from %s", config, exc_info=True)
        raise ClientConstructionError() from e
