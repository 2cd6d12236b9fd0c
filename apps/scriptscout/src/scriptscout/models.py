"""scriptscout data models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """User whose repositories are scanned."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    user_name: str | None = None


class RepositoryConfig(BaseModel):
    """One repository entry of a user's .gitconfig.yml."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    owner: str
    repo: str
    base_url: str = Field(default="", alias="baseUrl")
    access_token: str = Field(default="", alias="accessToken", repr=False)

    @field_validator("owner", "repo", "base_url", "access_token", mode="before")
    @classmethod
    def scalar_to_str(cls, value: Any) -> Any:
        """Read YAML scalars (null, booleans, dates) back as plain text."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, date):
            return value.isoformat()
        return value

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        token = "****" if self.access_token else ""
        return (
            f"RepositoryConfig(owner={self.owner!r}, repo={self.repo!r}, "
            f"base_url={self.base_url!r}, access_token={token!r})"
        )


class FileEntry(BaseModel):
    """A stored user file at a given revision."""

    path: str
    content: str
    revision: int
