"""GitHub API data models."""

from pydantic import BaseModel, Field


class GitHubRepository(BaseModel):
    """Repository metadata (subset)."""

    id: int | None = None
    name: str
    full_name: str
    default_branch: str
    private: bool = False
    html_url: str | None = None


class GitHubCommitRef(BaseModel):
    """Commit pointer on a branch."""

    sha: str
    url: str | None = None


class GitHubBranch(BaseModel):
    """Branch with its head commit."""

    name: str
    commit: GitHubCommitRef
    protected: bool = False

    @property
    def sha(self) -> str:
        return self.commit.sha


class GitTreeEntry(BaseModel):
    """Entry of a git tree listing."""

    path: str
    mode: str | None = None
    type: str  # "blob", "tree" or "commit" (submodule)
    sha: str | None = None
    size: int | None = None
    url: str | None = None


class GitTree(BaseModel):
    """Git tree listing."""

    sha: str
    url: str | None = None
    tree: list[GitTreeEntry] = Field(default_factory=list)
    truncated: bool = False
