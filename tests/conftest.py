"""Shared fixtures."""

import pytest

from ghrest import GitHubBranch, GitHubCommitRef, GitHubRepository, GitTree, GitTreeEntry
from scriptscout import RepositoryConfig, User

SAMPLE_ENTRIES = [
    GitTreeEntry(path="a.groovy", type="blob"),
    GitTreeEntry(path="notes.txt", type="blob"),
    GitTreeEntry(path="lib", type="tree"),
    GitTreeEntry(path="sub/b.py", type="blob"),
]


class FakeGitHubClient:
    """GitHubClient stand-in that records calls."""

    def __init__(self, entries=None, default_branch="main", error=None, truncated=False):
        self.entries = list(SAMPLE_ENTRIES if entries is None else entries)
        self.default_branch = default_branch
        self.error = error
        self.truncated = truncated
        self.calls = []

    def _record(self, *call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def get_repository(self, full_name):
        self._record("get_repository", full_name)
        owner, name = full_name.split("/")
        return GitHubRepository(name=name, full_name=full_name, default_branch=self.default_branch)

    def get_branch(self, full_name, branch):
        self._record("get_branch", full_name, branch)
        return GitHubBranch(name=branch, commit=GitHubCommitRef(sha="abc123"))

    def get_tree(self, full_name, sha, recursive=False):
        self._record("get_tree", full_name, sha, recursive)
        return GitTree(sha=sha, tree=self.entries, truncated=self.truncated)


class FakeClientFactory:
    """Client factory returning one FakeGitHubClient and counting builds."""

    def __init__(self, client=None):
        self.client = client or FakeGitHubClient()
        self.configs = []

    def __call__(self, config):
        self.configs.append(config)
        return self.client


@pytest.fixture
def user():
    return User(user_id="alice")


@pytest.fixture
def config():
    return RepositoryConfig(owner="naver", repo="perf-scripts")


@pytest.fixture
def fake_client():
    return FakeGitHubClient()


@pytest.fixture
def client_factory(fake_client):
    return FakeClientFactory(fake_client)


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "storage"


@pytest.fixture
def write_config(storage_dir):
    """Write a .gitconfig.yml for a user id."""
    def write(user_id: str, content: str):
        user_dir = storage_dir / user_id
        user_dir.mkdir(parents=True, exist_ok=True)
        path = user_dir / ".gitconfig.yml"
        path.write_text(content, encoding="utf-8")
        return path
    return write


