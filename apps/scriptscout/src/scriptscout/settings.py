"""Runtime settings from environment variables and .env."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """scriptscout settings, read from SCRIPTSCOUT_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTSCOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage_dir: str = Field(default="./storage", description="User file storage root")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout (seconds)")
    max_retries: int = Field(default=1, ge=1, description="Attempts per GitHub request")
