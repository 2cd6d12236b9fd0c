"""Script discovery in a remote repository."""

import logging
from typing import Callable, Iterable

import httpx
from ghrest import GitHubClient, GitTreeEntry

from .client_factory import build_client
from .exceptions import ConfigValidationError, RemoteFetchError
from .models import RepositoryConfig, User

logger = logging.getLogger(__name__)

SCRIPT_EXTENSIONS = (".groovy", ".py")
BLOB_TYPE = "blob"

ClientFactory = Callable[[RepositoryConfig], GitHubClient]


def is_script(entry: GitTreeEntry) -> bool:
    """A file entry whose path ends with a script extension."""
    return entry.type == BLOB_TYPE and entry.path.endswith(SCRIPT_EXTENSIONS)


def filter_scripts(entries: Iterable[GitTreeEntry]) -> list[str]:
    """Paths of script entries, in listing order."""
    return [entry.path for entry in entries if is_script(entry)]


class ScriptFetcher:
    """Lists scripts on the default branch of a configured repository."""

    def __init__(self, client_factory: ClientFactory = build_client):
        self.client_factory = client_factory

    def fetch_scripts(self, user: User, config: RepositoryConfig) -> list[str]:
        """
        Get test scripts from the head of the repository's default branch.

        Args:
            user: Owner of the configuration, for diagnostics
            config: Repository to scan

        Returns:
            Repository-relative paths of .groovy and .py files

        Raises:
            ConfigValidationError: owner or repo is empty
            ClientConstructionError: client cannot be built from config
            RemoteFetchError: any remote call failed
        """
        if not config.owner or not config.repo:
            logger.error(
                "Owner and repository configuration must not be empty. [userId(%s), %s]",
                user.user_id, config,
            )
            raise ConfigValidationError()

        client = self.client_factory(config)
        try:
            repository = client.get_repository(config.full_name)
            branch = client.get_branch(config.full_name, repository.default_branch)
            tree = client.get_tree(config.full_name, branch.sha, recursive=True)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Fail to get script from git with [userId(%s), %s]",
                user.user_id, config, exc_info=True,
            )
            raise RemoteFetchError() from e

        if tree.truncated:
            logger.warning(
                "Tree listing of %s@%s is truncated, some scripts may be missing",
                config.full_name, branch.sha,
            )
        scripts = filter_scripts(tree.tree)
        logger.info(
            "Found %d scripts in %s@%s for user %s",
            len(scripts), config.full_name, repository.default_branch, user.user_id,
        )
        return scripts
