"""Repository config loading tests."""

import pytest

from scriptscout import (
    ConfigLoader,
    ConfigMappingError,
    ConfigNotFoundError,
    FileEntry,
    LocalFileStore,
    RepositoryConfig,
    User,
    parse_configs,
)

MULTI_DOCUMENT = """\
owner: naver
repo: ngrinder
---
owner: alice
repo: load-tests
baseUrl: https://github.example.com/api/v3
accessToken: secret-token
---
owner: bob
repo: scripts
comment: unknown keys are ignored
"""


class TestParseConfigs:
    """YAML stream parsing"""

    def test_documents_in_order(self):
        configs = parse_configs(MULTI_DOCUMENT)

        assert [c.full_name for c in configs] == [
            "naver/ngrinder",
            "alice/load-tests",
            "bob/scripts",
        ]

    def test_optional_keys(self):
        first, second, _ = parse_configs(MULTI_DOCUMENT)

        assert first.base_url == ""
        assert first.access_token == ""
        assert second.base_url == "https://github.example.com/api/v3"
        assert second.access_token == "secret-token"

    def test_snake_case_keys(self):
        (config,) = parse_configs("owner: a\nrepo: b\nbase_url: http://ghe/api/v3\naccess_token: t\n")

        assert config.base_url == "http://ghe/api/v3"
        assert config.access_token == "t"

    def test_empty_content(self):
        assert parse_configs("") == []

    def test_empty_documents_skipped(self):
        configs = parse_configs("---\nowner: a\nrepo: b\n---\n")

        assert len(configs) == 1

    def test_numbers_become_strings(self):
        (config,) = parse_configs("owner: 42\nrepo: 2024\n")

        assert config.owner == "42"
        assert config.repo == "2024"

    def test_empty_owner_passes_decoding(self):
        (config,) = parse_configs("owner: ''\nrepo: b\n")

        assert config.owner == ""

    def test_blank_optional_keys_default_to_empty(self):
        (config,) = parse_configs("owner: a\nrepo: b\nbaseUrl:\naccessToken:\n")

        assert config.base_url == ""
        assert config.access_token == ""

    def test_blank_owner_passes_decoding(self):
        (config,) = parse_configs("owner:\nrepo: b\n")

        assert config.owner == ""

    @pytest.mark.parametrize("content,owner,repo", [
        ("owner: on\nrepo: off\n", "true", "false"),
        ("owner: yes\nrepo: 2024-01-01\n", "true", "2024-01-01"),
        ("owner: team\nrepo: 1.5\n", "team", "1.5"),
    ])
    def test_yaml_scalars_read_as_text(self, content, owner, repo):
        (config,) = parse_configs(content)

        assert config.owner == owner
        assert config.repo == repo

    @pytest.mark.parametrize("content", [
        "owner: a\n",
        "- owner: a\n  repo: b\n",
        "just a string\n",
        "owner: [1, 2]\nrepo: b\n",
        "owner: a\nrepo: b\n---\nowner: c\n",
    ])
    def test_invalid_document_fails_whole_load(self, content):
        with pytest.raises(ConfigMappingError):
            parse_configs(content)

    def test_malformed_yaml(self):
        with pytest.raises(ConfigMappingError, match="malformed YAML"):
            parse_configs("owner: [a\nrepo: b\n")

    def test_mapping_error_names_document(self):
        with pytest.raises(ConfigMappingError) as exc_info:
            parse_configs("owner: a\nrepo: b\n---\nowner: c\n")

        assert exc_info.value.document_index == 1
        assert exc_info.value.error_code == "CONFIG_MAPPING_ERROR"


class TestRepositoryConfig:
    """Repository config model"""

    def test_token_not_in_repr_or_str(self):
        config = RepositoryConfig(owner="a", repo="b", accessToken="secret")

        assert "secret" not in repr(config)
        assert "secret" not in str(config)
        assert "****" in str(config)

    def test_immutable(self):
        config = RepositoryConfig(owner="a", repo="b")

        with pytest.raises(Exception):
            config.owner = "c"


class TestConfigLoader:
    """Loading from file storage"""

    def test_load_configs(self, storage_dir, write_config, user):
        write_config(user.user_id, MULTI_DOCUMENT)
        loader = ConfigLoader(LocalFileStore(storage_dir))

        configs = loader.load_configs(user)

        assert len(configs) == 3
        assert configs[0].owner == "naver"

    def test_missing_config(self, storage_dir, user):
        loader = ConfigLoader(LocalFileStore(storage_dir))

        with pytest.raises(ConfigNotFoundError, match=r"\.gitconfig\.yml"):
            loader.load_configs(user)

    def test_missing_config_is_file_not_found(self, storage_dir, user):
        loader = ConfigLoader(LocalFileStore(storage_dir))

        with pytest.raises(FileNotFoundError):
            loader.load_configs(user)

    def test_users_are_isolated(self, storage_dir, write_config):
        write_config("alice", "owner: a\nrepo: b\n")
        loader = ConfigLoader(LocalFileStore(storage_dir))

        with pytest.raises(ConfigNotFoundError):
            loader.load_configs(User(user_id="bob"))

    def test_reads_latest_revision(self, user):
        requested = []

        class RecordingStore:
            def get_one(self, user, path, revision=-1):
                requested.append((user.user_id, path, revision))
                return FileEntry(path=path, content="owner: a\nrepo: b\n", revision=3)

        ConfigLoader(RecordingStore()).load_configs(user)

        assert requested == [("alice", ".gitconfig.yml", -1)]

    def test_undecodable_config(self, storage_dir, user):
        user_dir = storage_dir / user.user_id
        user_dir.mkdir(parents=True)
        (user_dir / ".gitconfig.yml").write_bytes(b"owner: a\xff\nrepo: b\n")
        loader = ConfigLoader(LocalFileStore(storage_dir))

        with pytest.raises(ConfigMappingError, match="not valid UTF-8") as exc_info:
            loader.load_configs(user)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_config_propagates(self, storage_dir, write_config, user):
        write_config(user.user_id, "owner: a\n")
        loader = ConfigLoader(LocalFileStore(storage_dir))

        with pytest.raises(ConfigMappingError):
            loader.load_configs(user)
