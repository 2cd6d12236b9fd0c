"""scriptscout exceptions."""


class ScriptScoutError(Exception):
    """Base error for script discovery."""

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigNotFoundError(ScriptScoutError, FileNotFoundError):
    """The user's repository configuration file does not exist."""

    def __init__(self, config_name: str):
        super().__init__(f"{config_name} isn't exist.", "CONFIG_NOT_FOUND")
        self.config_name = config_name


class ConfigMappingError(ScriptScoutError):
    """A configuration document cannot be decoded into a RepositoryConfig."""

    def __init__(self, message: str, document_index: int | None = None):
        if document_index is not None:
            message = f"document #{document_index}: {message}"
        super().__init__(f"Invalid repository configuration: {message}", "CONFIG_MAPPING_ERROR")
        self.document_index = document_index


class ConfigValidationError(ScriptScoutError):
    """Repository configuration is missing owner or repo."""

    def __init__(self, message: str = "Owner and repository configuration must not be empty."):
        super().__init__(message, "CONFIG_VALIDATION_ERROR")


class ClientConstructionError(ScriptScoutError):
    """GitHub client could not be built from a configuration."""

    def __init__(self, message: str = "Fail to creation of github client."):
        super().__init__(message, "CLIENT_CONSTRUCTION_ERROR")


class RemoteFetchError(ScriptScoutError):
    """Scripts could not be read from the remote repository."""

    def __init__(self, message: str = "Fail to get script from git."):
        super().__init__(message, "REMOTE_FETCH_ERROR")
