"""Test script discovery for GitHub repositories."""

from .cache import CacheStore, InMemoryCacheStore, ScriptCache
from .client_factory import build_client
from .config import GITHUB_CONFIG_NAME, ConfigLoader, parse_configs
from .exceptions import (
    ClientConstructionError,
    ConfigMappingError,
    ConfigNotFoundError,
    ConfigValidationError,
    RemoteFetchError,
    ScriptScoutError,
)
from .fetcher import SCRIPT_EXTENSIONS, ScriptFetcher, filter_scripts, is_script
from .models import FileEntry, RepositoryConfig, User
from .service import GitHubScriptService
from .settings import Settings
from .storage import LATEST_REVISION, FileStore, LocalFileStore

__all__ = [
    "ConfigLoader",
    "parse_configs",
    "GITHUB_CONFIG_NAME",
    "build_client",
    "ScriptFetcher",
    "filter_scripts",
    "is_script",
    "SCRIPT_EXTENSIONS",
    "ScriptCache",
    "CacheStore",
    "InMemoryCacheStore",
    "GitHubScriptService",
    "Settings",
    "User",
    "RepositoryConfig",
    "FileEntry",
    "FileStore",
    "LocalFileStore",
    "LATEST_REVISION",
    "ScriptScoutError",
    "ConfigNotFoundError",
    "ConfigMappingError",
    "ConfigValidationError",
    "ClientConstructionError",
    "RemoteFetchError",
]
