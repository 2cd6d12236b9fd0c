"""Repository configuration loading."""

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ConfigMappingError, ConfigNotFoundError
from .models import RepositoryConfig, User
from .storage import LATEST_REVISION, FileStore

logger = logging.getLogger(__name__)

GITHUB_CONFIG_NAME = ".gitconfig.yml"


def to_repository_config(document: Any, index: int | None = None) -> RepositoryConfig:
    """Decode one parsed YAML document."""
    if not isinstance(document, dict):
        raise ConfigMappingError(
            f"expected a mapping, got {type(document).__name__}", index
        )
    try:
        return RepositoryConfig.model_validate(document)
    except ValidationError as e:
        raise ConfigMappingError(str(e), index) from e


def parse_configs(content: str) -> list[RepositoryConfig]:
    """
    Parse a YAML stream into repository configs.

    Documents are separated by ``---``; empty documents are skipped.

    Raises:
        ConfigMappingError: YAML is malformed or a document cannot be decoded
    """
    configs: list[RepositoryConfig] = []
    try:
        for index, document in enumerate(yaml.safe_load_all(content)):
            if document is None:
                logger.debug("Skipping empty document #%d", index)
                continue
            configs.append(to_repository_config(document, index))
    except yaml.YAMLError as e:
        raise ConfigMappingError(f"malformed YAML: {e}") from e
    return configs


class ConfigLoader:
    """Loads a user's .gitconfig.yml from file storage."""

    def __init__(self, file_store: FileStore, config_name: str = GITHUB_CONFIG_NAME):
        self.file_store = file_store
        self.config_name = config_name

    def load_configs(self, user: User) -> list[RepositoryConfig]:
        """
        Load every repository config of a user, in document order.

        Raises:
            ConfigNotFoundError: the config file does not exist
            ConfigMappingError: the config file cannot be decoded
        """
        try:
            entry = self.file_store.get_one(user, self.config_name, LATEST_REVISION)
        except UnicodeDecodeError as e:
            logger.error("Undecodable %s for user %s", self.config_name, user.user_id)
            raise ConfigMappingError(f"{self.config_name} is not valid UTF-8: {e}") from e
        if entry is None:
            logger.info("No %s for user %s", self.config_name, user.user_id)
            raise ConfigNotFoundError(self.config_name)

        try:
            configs = parse_configs(entry.content)
        except ConfigMappingError:
            logger.error("Invalid %s for user %s", self.config_name, user.user_id, exc_info=True)
            raise
        logger.debug("Loaded %d repository configs for user %s", len(configs), user.user_id)
        return configs
