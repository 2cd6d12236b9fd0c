"""GitHub script service facade."""

import logging
from functools import partial

from .cache import CacheStore, ScriptCache
from .client_factory import build_client
from .config import ConfigLoader
from .fetcher import ScriptFetcher
from .models import RepositoryConfig, User
from .settings import Settings
from .storage import FileStore, LocalFileStore

logger = logging.getLogger(__name__)


class GitHubScriptService:
    """Repository configs and cached script lists of users."""

    def __init__(self, config_loader: ConfigLoader, script_cache: ScriptCache):
        self.config_loader = config_loader
        self.script_cache = script_cache

    @classmethod
    def create(
        cls,
        file_store: FileStore,
        fetcher: ScriptFetcher | None = None,
        cache_store: CacheStore | None = None,
    ) -> "GitHubScriptService":
        return cls(
            ConfigLoader(file_store),
            ScriptCache(fetcher or ScriptFetcher(), cache_store),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubScriptService":
        logger.info("Creating script service, storage=%s", settings.storage_dir)
        factory = partial(
            build_client,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
        )
        return cls.create(LocalFileStore(settings.storage_dir), ScriptFetcher(factory))

    def get_github_configs(self, user: User) -> list[RepositoryConfig]:
        return self.config_loader.load_configs(user)

    def get_scripts(self, user: User, config: RepositoryConfig) -> list[str]:
        return self.script_cache.get_scripts(user, config)

    def evict_github_script_cache(self, user: User) -> None:
        self.script_cache.evict(user)
